# pyobjmesh/scene.py
"""
Scene-graph vocabulary shared between an OBJ parser and the mesh flattener.

The flattener only needs three capabilities from a parsed file:

    scene.objects                 ordered objects, first one is flattened
    obj.elements                  ordered elements; only Face is consumed
    obj.get_vtn_triple(index)     resolve a face corner to coordinates

Any parser whose output satisfies SceneGraph / SceneObject can be used in
place of pyobjmesh.wavefront.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Tuple, Union

Vec3 = Tuple[float, float, float]
Vec2 = Tuple[float, float]


# -----------------------
# Face-vertex references
# -----------------------

@dataclass(frozen=True)
class VTNIndex:
    """Zero-based, object-local indices of one face corner."""
    v: int
    vt: Optional[int] = None
    vn: Optional[int] = None


@dataclass(frozen=True)
class VTNTriple:
    """A face corner resolved to its coordinates.

    Which of tex_coord / normal is present selects the variant
    (V, VT, VN or VTN).
    """
    position: Vec3
    tex_coord: Optional[Vec2] = None
    normal: Optional[Vec3] = None

    @property
    def kind(self) -> str:
        return "V" + ("T" if self.tex_coord is not None else "") + ("N" if self.normal is not None else "")


# ---------
# Elements
# ---------

@dataclass(frozen=True)
class Point:
    a: VTNIndex


@dataclass(frozen=True)
class Line:
    a: VTNIndex
    b: VTNIndex


@dataclass(frozen=True)
class Face:
    a: VTNIndex
    b: VTNIndex
    c: VTNIndex

    def corners(self) -> Tuple[VTNIndex, VTNIndex, VTNIndex]:
        return (self.a, self.b, self.c)


Element = Union[Point, Line, Face]


# -----------------------
# Capability interfaces
# -----------------------

class SceneObject(Protocol):
    name: str

    @property
    def elements(self) -> Sequence[Element]: ...

    def get_vtn_triple(self, index: VTNIndex) -> VTNTriple:
        """Resolve index; raise LookupError when it is out of range."""
        ...


class SceneGraph(Protocol):
    @property
    def objects(self) -> Sequence[SceneObject]: ...
