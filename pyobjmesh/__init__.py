"""
pyobjmesh: load Wavefront OBJ triangle meshes into flat vertex-attribute
arrays and generate Rust source that embeds them at compile time.

    mesh = load_file("assets/triangle.obj")
    fragment = to_rust_code(mesh)
"""
from .codegen import to_rust_code
from .errors import ObjFileNotFoundError, ObjIndexError, ObjLoadError, ObjParseError
from .loader import flatten, load, load_file, load_from_memory
from .mesh import ObjMesh

__version__ = "0.1.0"

__all__ = [
    "ObjMesh",
    "ObjLoadError",
    "ObjFileNotFoundError",
    "ObjParseError",
    "ObjIndexError",
    "flatten",
    "load",
    "load_file",
    "load_from_memory",
    "to_rust_code",
]
