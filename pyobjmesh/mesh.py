# pyobjmesh/mesh.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np


def _as_attribute(values: Iterable, arity: int, name: str) -> np.ndarray:
    arr = np.array(values, dtype=np.float32)
    if arr.size == 0:
        arr = arr.reshape(0, arity)
    if arr.ndim != 2 or arr.shape[1] != arity:
        raise ValueError(f"{name} must have shape (n, {arity}), got {arr.shape}")
    arr.setflags(write=False)
    return arr


# --------------
# Mesh container
# --------------

@dataclass(frozen=True, eq=False)
class ObjMesh:
    """
    Model space representation of a triangle mesh with one entry per
    face-vertex occurrence (no shared vertices).

    points, tex_coords and normals are read-only float32 arrays of shape
    (n, 3), (n, 2) and (n, 3). Row k of each array describes the same vertex;
    every consecutive group of three rows is one triangle.
    """
    points: np.ndarray
    tex_coords: np.ndarray
    normals: np.ndarray

    def __post_init__(self) -> None:
        points = _as_attribute(self.points, 3, "points")
        tex_coords = _as_attribute(self.tex_coords, 2, "tex_coords")
        normals = _as_attribute(self.normals, 3, "normals")
        n = len(points)
        if len(tex_coords) != n or len(normals) != n:
            raise ValueError(
                f"attribute lengths differ: points={n}, tex_coords={len(tex_coords)}, normals={len(normals)}"
            )
        if n % 3 != 0:
            raise ValueError(f"vertex count must be a multiple of 3 (got {n})")
        object.__setattr__(self, "points", points)
        object.__setattr__(self, "tex_coords", tex_coords)
        object.__setattr__(self, "normals", normals)

    @classmethod
    def empty(cls) -> "ObjMesh":
        return cls([], [], [])

    def __len__(self) -> int:
        """Number of vertices in the mesh."""
        return len(self.points)

    # ---- buffer sizes ----
    def points_len_bytes(self) -> int:
        return self.points.nbytes

    def tex_coords_len_bytes(self) -> int:
        return self.tex_coords.nbytes

    def normals_len_bytes(self) -> int:
        return self.normals.nbytes

    def len_bytes(self) -> int:
        """Total size of the three attribute buffers in bytes."""
        return self.points_len_bytes() + self.tex_coords_len_bytes() + self.normals_len_bytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjMesh):
            return NotImplemented
        return (
            np.array_equal(self.points, other.points)
            and np.array_equal(self.tex_coords, other.tex_coords)
            and np.array_equal(self.normals, other.normals)
        )

    def __repr__(self) -> str:
        return f"ObjMesh(vertices={len(self)}, triangles={len(self) // 3})"
