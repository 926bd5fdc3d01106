# pyobjmesh/codegen.py
"""
Generate a Rust source fragment that rebuilds an ObjMesh at compile time.

Generation runs in two steps:

1) compile: walk the mesh and emit a flat list of tokens (the IR).
   compile_mesh() emits the bare token stream; compile_mesh_layout() adds
   whitespace/newline tokens so the result is readable.
2) synthesize: render each token to its text and concatenate.

The fragment is a single block expression, e.g. (layout form)

    {
        let points: Vec<[f32; 3]> = vec![
            [0.00000000, 0.00000000, 0.00000000],
        ];
        let tex_coords: Vec<[f32; 2]> = vec![
            ...
        ];
        let normals: Vec<[f32; 3]> = vec![
            ...
        ];

        ObjMesh::new(points, tex_coords, normals)
    }

Float literals are the float32 value printed with FLOAT_DIGITS fractional
digits (correctly rounded, half-to-even; negative zero prints as -0.00000000).
NaN and infinities have no literal form and are written as the f32 constants
f32::NAN, f32::INFINITY and f32::NEG_INFINITY.
"""
from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Union

import numpy as np

from .config import FLOAT_DIGITS, INDENT_STEP, NORMALS_NAME, POINTS_NAME, TEX_COORDS_NAME
from .mesh import ObjMesh

logger = logging.getLogger(__name__)


# ------
# Tokens
# ------

class Symbol(enum.Enum):
    LET = "let"
    POINTS = "points"
    TEX_COORDS = "tex_coords"
    NORMALS = "normals"
    TYPE_F32 = "f32"
    TYPE_OBJ_MESH = "ObjMesh"
    TYPE_VEC = "Vec"
    CONSTRUCTOR = "new"
    MACRO_VEC = "vec!"
    ARITY_TWO = "2"
    ARITY_THREE = "3"
    EQUALS = "="
    COLON = ":"
    DOUBLE_COLON = "::"
    SEMICOLON = ";"
    LBRACKET = "["
    RBRACKET = "]"
    LBRACE = "{"
    RBRACE = "}"
    LESS_THAN = "<"
    GREATER_THAN = ">"
    COMMA = ","
    LPAREN = "("
    RPAREN = ")"
    NEWLINE = "\n"


@dataclass(frozen=True)
class Float32:
    value: float

    def __post_init__(self) -> None:
        # store the single precision value so equal f32s compare equal
        object.__setattr__(self, "value", float(np.float32(self.value)))


@dataclass(frozen=True)
class Whitespace:
    count: int


@dataclass(frozen=True)
class ArrayLength:
    length: int


Token = Union[Symbol, Float32, Whitespace, ArrayLength]

_SYMBOL_TEXT: Dict[Symbol, str] = {sym: sym.value for sym in Symbol}
# the keyword carries its own separator so the compact form stays valid
_SYMBOL_TEXT[Symbol.LET] = "let "
_SYMBOL_TEXT[Symbol.POINTS] = POINTS_NAME
_SYMBOL_TEXT[Symbol.TEX_COORDS] = TEX_COORDS_NAME
_SYMBOL_TEXT[Symbol.NORMALS] = NORMALS_NAME


@dataclass
class ObjMeshIR:
    data: List[Token]

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self):
        return iter(self.data)


# -------------------------
# IR emission: compact form
# -------------------------

_ARITY_SYMBOL = {2: Symbol.ARITY_TWO, 3: Symbol.ARITY_THREE}


def _emit_rows(ir: List[Token], rows: np.ndarray) -> None:
    for row in rows:
        ir.append(Symbol.LBRACKET)
        for k, value in enumerate(row):
            if k:
                ir.append(Symbol.COMMA)
            ir.append(Float32(value))
        ir.append(Symbol.RBRACKET)
        ir.append(Symbol.COMMA)


def _emit_section(ir: List[Token], name: Symbol, rows: np.ndarray, arity: int) -> None:
    # let <name>:Vec<[f32;<arity>]>=vec![ ... ];
    ir += [
        Symbol.LET, name, Symbol.COLON,
        Symbol.TYPE_VEC, Symbol.LESS_THAN,
        Symbol.LBRACKET, Symbol.TYPE_F32, Symbol.SEMICOLON, _ARITY_SYMBOL[arity], Symbol.RBRACKET,
        Symbol.GREATER_THAN, Symbol.EQUALS, Symbol.MACRO_VEC, Symbol.LBRACKET,
    ]
    _emit_rows(ir, rows)
    ir += [Symbol.RBRACKET, Symbol.SEMICOLON]


def _emit_constructor(ir: List[Token]) -> None:
    ir += [
        Symbol.TYPE_OBJ_MESH, Symbol.DOUBLE_COLON, Symbol.CONSTRUCTOR, Symbol.LPAREN,
        Symbol.POINTS, Symbol.COMMA, Symbol.TEX_COORDS, Symbol.COMMA, Symbol.NORMALS,
        Symbol.RPAREN,
    ]


def compile_mesh(mesh: ObjMesh) -> ObjMeshIR:
    """Emit the IR for mesh without any layout tokens."""
    ir: List[Token] = [Symbol.LBRACE]
    _emit_section(ir, Symbol.POINTS, mesh.points, 3)
    _emit_section(ir, Symbol.TEX_COORDS, mesh.tex_coords, 2)
    _emit_section(ir, Symbol.NORMALS, mesh.normals, 3)
    _emit_constructor(ir)
    ir.append(Symbol.RBRACE)
    return ObjMeshIR(ir)


# -------------------------------
# IR emission: layout-aware form
# -------------------------------

class _LayoutEmitter:
    def __init__(self, indent_step: int = INDENT_STEP) -> None:
        self.ir: List[Token] = []
        self.indent_step = indent_step

    def push(self, *tokens: Token) -> None:
        self.ir.extend(tokens)

    def space(self) -> None:
        self.ir.append(Whitespace(1))

    def newline(self) -> None:
        self.ir.append(Symbol.NEWLINE)

    def indent(self, depth: int) -> None:
        if depth > 0:
            self.ir.append(Whitespace(depth * self.indent_step))

    def row(self, values: Iterable[np.float32]) -> None:
        self.indent(2)
        self.push(Symbol.LBRACKET)
        for k, value in enumerate(values):
            if k:
                self.push(Symbol.COMMA)
                self.space()
            self.push(Float32(value))
        self.push(Symbol.RBRACKET, Symbol.COMMA)
        self.newline()

    def section(self, name: Symbol, rows: np.ndarray, arity: int) -> None:
        # let <name>: Vec<[f32; <arity>]> = vec![
        self.indent(1)
        self.push(Symbol.LET, name, Symbol.COLON)
        self.space()
        self.push(Symbol.TYPE_VEC, Symbol.LESS_THAN, Symbol.LBRACKET, Symbol.TYPE_F32, Symbol.SEMICOLON)
        self.space()
        self.push(ArrayLength(arity), Symbol.RBRACKET, Symbol.GREATER_THAN)
        self.space()
        self.push(Symbol.EQUALS)
        self.space()
        self.push(Symbol.MACRO_VEC, Symbol.LBRACKET)
        self.newline()
        for row in rows:
            self.row(row)
        self.indent(1)
        self.push(Symbol.RBRACKET, Symbol.SEMICOLON)
        self.newline()

    def constructor(self) -> None:
        self.indent(1)
        self.push(Symbol.TYPE_OBJ_MESH, Symbol.DOUBLE_COLON, Symbol.CONSTRUCTOR, Symbol.LPAREN)
        names: Sequence[Symbol] = (Symbol.POINTS, Symbol.TEX_COORDS, Symbol.NORMALS)
        for k, name in enumerate(names):
            if k:
                self.push(Symbol.COMMA)
                self.space()
            self.push(name)
        self.push(Symbol.RPAREN)
        self.newline()

    def emit(self, mesh: ObjMesh) -> ObjMeshIR:
        self.push(Symbol.LBRACE)
        self.newline()
        self.section(Symbol.POINTS, mesh.points, 3)
        self.section(Symbol.TEX_COORDS, mesh.tex_coords, 2)
        self.section(Symbol.NORMALS, mesh.normals, 3)
        self.newline()
        self.constructor()
        self.push(Symbol.RBRACE)
        return ObjMeshIR(self.ir)


def compile_mesh_layout(mesh: ObjMesh) -> ObjMeshIR:
    """Emit the IR for mesh with indentation and line breaks."""
    return _LayoutEmitter().emit(mesh)


# ----------
# Synthesis
# ----------

def format_float32(value: float) -> str:
    if math.isnan(value):
        return "f32::NAN"
    if math.isinf(value):
        return "f32::INFINITY" if value > 0 else "f32::NEG_INFINITY"
    return f"{value:.{FLOAT_DIGITS}f}"


def synthesize_token(token: Token) -> str:
    if isinstance(token, Symbol):
        return _SYMBOL_TEXT[token]
    if isinstance(token, Float32):
        return format_float32(token.value)
    if isinstance(token, Whitespace):
        return " " * token.count
    if isinstance(token, ArrayLength):
        return str(token.length)
    raise TypeError(f"Not an IR token: {token!r}")


def synthesize(ir: ObjMeshIR) -> str:
    return "".join(synthesize_token(token) for token in ir.data)


def to_rust_code(mesh: ObjMesh, layout: bool = True) -> str:
    """Generate the Rust block expression that constructs mesh.

    layout=False emits the same code without indentation or line breaks.
    """
    ir = compile_mesh_layout(mesh) if layout else compile_mesh(mesh)
    fragment = synthesize(ir)
    logger.debug(f"Generated {len(ir)} tokens, {len(fragment)} characters for {len(mesh)} vertices.")
    return fragment
