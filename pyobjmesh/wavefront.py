# pyobjmesh/wavefront.py
"""
Minimal Wavefront OBJ reader producing a scene graph.

Supported statements: o, v, vt, vn, f, l, p, g, s, usemtl, mtllib, and
'#' comments. A trailing backslash continues a statement on the next line.

Face/line/point references use the usual forms v, v/t, v//n, v/t/n.
Indices are 1-based and global across the file; negative indices are
relative to the end of the table read so far. They are stored as zero-based
indices local to the object that owns the element. Range checks happen when
a reference is resolved (Object.get_vtn_triple), not while parsing.

Polygons with more than three corners are fan-triangulated.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from .scene import Element, Face, Line, Point, Vec2, Vec3, VTNIndex, VTNTriple

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    def __init__(self, message: str, line_number: int) -> None:
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


# --------------
# Scene objects
# --------------

@dataclass
class Object:
    name: str
    vertices: List[Vec3] = field(default_factory=list)
    tex_vertices: List[Vec2] = field(default_factory=list)
    normals: List[Vec3] = field(default_factory=list)
    elements: List[Element] = field(default_factory=list)
    groups: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        """True when the object holds no coordinates and no elements; group names do not count."""
        return not (self.vertices or self.tex_vertices or self.normals or self.elements)

    def get_vtn_triple(self, index: VTNIndex) -> VTNTriple:
        position = _lookup(self.vertices, index.v, "vertex")
        tex_coord = None if index.vt is None else _lookup(self.tex_vertices, index.vt, "texture vertex")
        normal = None if index.vn is None else _lookup(self.normals, index.vn, "normal")
        return VTNTriple(position, tex_coord, normal)


@dataclass
class ObjSet:
    objects: List[Object] = field(default_factory=list)


def _lookup(table: Sequence, i: int, what: str):
    # reject negatives explicitly, Python would otherwise wrap around
    if i < 0 or i >= len(table):
        raise IndexError(f"{what} index {i} out of range (table holds {len(table)})")
    return table[i]


# -------
# Parser
# -------

_IGNORED = ("s", "usemtl", "mtllib")


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (line_number, statement) with comments stripped and continuations joined."""
    pending: List[str] = []
    start = 0
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].rstrip()
        if not pending:
            start = number
        if line.endswith("\\"):
            pending.append(line[:-1])
            continue
        pending.append(line)
        statement = " ".join(pending).strip()
        pending = []
        if statement:
            yield start, statement
    if pending:
        statement = " ".join(pending).strip()
        if statement:
            yield start, statement


class _Parser:
    def __init__(self) -> None:
        self.objects: List[Object] = []
        self.current = Object(name="")
        # global table sizes, and sizes at the start of the current object
        self.nv = self.nvt = self.nvn = 0
        self.base_v = self.base_vt = self.base_vn = 0
        self.line_number = 0

    def error(self, message: str) -> ParseError:
        return ParseError(message, self.line_number)

    # ---- numbers ----
    def floats(self, args: Sequence[str], lo: int, hi: int, what: str) -> List[float]:
        if not lo <= len(args) <= hi:
            expected = str(lo) if lo == hi else f"{lo}..{hi}"
            raise self.error(f"{what} expects {expected} components, got {len(args)}")
        try:
            return [float(a) for a in args]
        except ValueError:
            raise self.error(f"invalid number in {what}: {' '.join(args)}") from None

    def index(self, token: str, count: int, base: int) -> int:
        try:
            i = int(token)
        except ValueError:
            raise self.error(f"invalid index: {token!r}") from None
        if i == 0:
            raise self.error("index 0 is not valid in OBJ")
        global0 = i - 1 if i > 0 else count + i
        return global0 - base

    def reference(self, token: str) -> VTNIndex:
        parts = token.split("/")
        if len(parts) > 3 or not parts[0]:
            raise self.error(f"malformed vertex reference: {token!r}")
        v = self.index(parts[0], self.nv, self.base_v)
        vt: Optional[int] = None
        vn: Optional[int] = None
        if len(parts) >= 2 and parts[1]:
            vt = self.index(parts[1], self.nvt, self.base_vt)
        if len(parts) == 3:
            if not parts[2]:
                raise self.error(f"malformed vertex reference: {token!r}")
            vn = self.index(parts[2], self.nvn, self.base_vn)
        elif len(parts) == 2 and not parts[1]:
            raise self.error(f"malformed vertex reference: {token!r}")
        return VTNIndex(v, vt, vn)

    # ---- statements ----
    def start_object(self, name: str) -> None:
        groups: List[str] = []
        if self.current.name == "" and self.current.is_empty():
            # groups declared before the first `o` belong to the object it opens
            groups = self.current.groups
        else:
            self.objects.append(self.current)
        self.current = Object(name=name, groups=groups)
        self.base_v, self.base_vt, self.base_vn = self.nv, self.nvt, self.nvn

    def statement(self, keyword: str, args: List[str]) -> None:
        obj = self.current
        if keyword == "o":
            self.start_object(" ".join(args))
        elif keyword == "v":
            x, y, z = self.floats(args, 3, 4, "vertex")[:3]
            obj.vertices.append((x, y, z))
            self.nv += 1
        elif keyword == "vt":
            uv = self.floats(args, 1, 3, "texture vertex")
            obj.tex_vertices.append((uv[0], uv[1] if len(uv) > 1 else 0.0))
            self.nvt += 1
        elif keyword == "vn":
            x, y, z = self.floats(args, 3, 3, "normal")
            obj.normals.append((x, y, z))
            self.nvn += 1
        elif keyword == "f":
            if len(args) < 3:
                raise self.error(f"face needs at least 3 vertices, got {len(args)}")
            refs = [self.reference(a) for a in args]
            for k in range(1, len(refs) - 1):
                obj.elements.append(Face(refs[0], refs[k], refs[k + 1]))
        elif keyword == "l":
            if len(args) < 2:
                raise self.error(f"line needs at least 2 vertices, got {len(args)}")
            refs = [self.reference(a) for a in args]
            for a, b in zip(refs, refs[1:]):
                obj.elements.append(Line(a, b))
        elif keyword == "p":
            if not args:
                raise self.error("point needs at least 1 vertex")
            for a in args:
                obj.elements.append(Point(self.reference(a)))
        elif keyword == "g":
            for group in args:
                if group not in obj.groups:
                    obj.groups.append(group)
        elif keyword in _IGNORED:
            pass
        else:
            raise self.error(f"unknown statement: {keyword!r}")

    def parse(self, text: str) -> ObjSet:
        for line_number, statement in _logical_lines(text):
            self.line_number = line_number
            keyword, *args = statement.split()
            self.statement(keyword, args)
        if not (self.current.name == "" and self.current.is_empty()):
            self.objects.append(self.current)
        return ObjSet(self.objects)


def parse(text: str) -> ObjSet:
    """Parse OBJ source text into an ObjSet. Raises ParseError on bad input."""
    obj_set = _Parser().parse(text)
    logger.debug(f"Parsed {len(obj_set.objects)} object(s).")
    return obj_set
