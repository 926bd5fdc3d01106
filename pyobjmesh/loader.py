# pyobjmesh/loader.py
"""
Load entry points: OBJ data -> scene graph -> flattened ObjMesh.

Only the first object of the scene graph is read. Each triangular face
contributes exactly three vertices, in corner order; other elements are
skipped. Missing texture coordinates and normals are filled with zeros.
"""
from __future__ import annotations

import io
import logging
import os
from typing import IO, List, Tuple, Union

from .errors import ObjFileNotFoundError, ObjIndexError, ObjParseError
from .mesh import ObjMesh
from .scene import Face, SceneGraph, Vec2, Vec3, VTNTriple
from . import wavefront

logger = logging.getLogger(__name__)

ZERO_TEX_COORD: Vec2 = (0.0, 0.0)
ZERO_NORMAL: Vec3 = (0.0, 0.0, 0.0)


# ------------------
# Triple resolution
# ------------------

def resolve_triple(triple: VTNTriple) -> Tuple[Vec3, Vec2, Vec3]:
    """Return (position, tex_coord, normal), zero-filling absent attributes."""
    tex_coord = ZERO_TEX_COORD if triple.tex_coord is None else triple.tex_coord
    normal = ZERO_NORMAL if triple.normal is None else triple.normal
    return triple.position, tex_coord, normal


# -----------
# Flattening
# -----------

def flatten(scene: SceneGraph) -> ObjMesh:
    """Flatten the faces of the first object in scene into an ObjMesh."""
    if not scene.objects:
        logger.debug("Scene graph has no objects; returning an empty mesh.")
        return ObjMesh.empty()

    obj = scene.objects[0]
    points: List[Vec3] = []
    tex_coords: List[Vec2] = []
    normals: List[Vec3] = []
    face_count = 0

    for element in obj.elements:
        if not isinstance(element, Face):
            continue
        for index in element.corners():
            try:
                triple = obj.get_vtn_triple(index)
            except LookupError as e:
                raise ObjIndexError(
                    f"object {obj.name!r}, face {face_count + 1}: cannot resolve {index}: {e}"
                ) from e
            position, tex_coord, normal = resolve_triple(triple)
            points.append(position)
            tex_coords.append(tex_coord)
            normals.append(normal)
        face_count += 1

    logger.debug(f"Flattened object {obj.name!r}: {face_count} faces, {len(points)} vertices.")
    return ObjMesh(points, tex_coords, normals)


# -------------
# Entry points
# -------------

def _parse(text: str) -> SceneGraph:
    try:
        return wavefront.parse(text)
    except wavefront.ParseError as e:
        logger.debug(f"OBJ parse failed: {e}")
        raise ObjParseError() from e


def load(reader: Union[IO[str], IO[bytes]]) -> ObjMesh:
    """Read a whole text or binary stream of OBJ data and flatten it."""
    try:
        data = reader.read()
        if isinstance(data, (bytes, bytearray)):
            text = data.decode("utf-8-sig")
        else:
            # text streams opened without utf-8-sig still carry the BOM
            text = data[1:] if data.startswith("\ufeff") else data
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read OBJ data: {e}")
        raise ObjParseError() from e
    return flatten(_parse(text))


def load_from_memory(buffer: Union[bytes, bytearray, memoryview]) -> ObjMesh:
    return load(io.BytesIO(bytes(buffer)))


def load_file(path: Union[str, os.PathLike]) -> ObjMesh:
    """Load an OBJ file from disk.

    Raises ObjFileNotFoundError if the path cannot be opened; parse and
    index failures surface as ObjParseError / ObjIndexError.
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        logger.debug(f"Cannot open OBJ file '{os.fspath(path)}': {e}")
        raise ObjFileNotFoundError(os.fspath(path)) from e
    with f:
        logger.info(f"Loading OBJ file: {os.fspath(path)}")
        return load(f)
