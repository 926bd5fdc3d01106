"""
Global constants for code generation and logging.

FLOAT_DIGITS:
    Number of fractional digits written for every float literal.
INDENT_STEP:
    Columns per indentation level in the layout-aware output.
"""

FLOAT_DIGITS: int = 8
INDENT_STEP: int = 4

# Names bound inside the generated block, in constructor argument order.
POINTS_NAME: str = "points"
TEX_COORDS_NAME: str = "tex_coords"
NORMALS_NAME: str = "normals"

LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT: str = "%H:%M:%S"
