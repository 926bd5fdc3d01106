"""Command-line interface: OBJ file in, Rust code fragment out."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .codegen import to_rust_code
from .errors import ObjLoadError
from .loader import load_file
from .logging_config import setup_logging

logger = logging.getLogger("pyobjmesh.cli")

_DEF_HELP = """
Examples:
  python -m pyobjmesh assets/triangle.obj
  python -m pyobjmesh assets/triangle.obj -o tests/triangle_obj_code_gen_test.in
  python -m pyobjmesh assets/cube.obj --compact -o cube.in
"""


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pyobjmesh", description="Generate a Rust ObjMesh literal from an OBJ file",
                                epilog=_DEF_HELP, formatter_class=argparse.RawTextHelpFormatter)
    p.add_argument("input", help="Path to the .obj file")
    p.add_argument("-o", "--out", help="Output path for the code fragment (default: stdout)")
    p.add_argument("--compact", action="store_true", help="Emit the fragment without indentation or line breaks")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    p.add_argument("--log-file", help="Also write log output to this file")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    try:
        mesh = load_file(args.input)
    except ObjLoadError as e:
        logger.error(f"{args.input}: {e}")
        return 1

    fragment = to_rust_code(mesh, layout=not args.compact)

    if args.out:
        with open(args.out, "w", encoding="utf-8", newline="\n") as f:
            f.write(fragment)
        logger.info(f"Wrote {len(fragment)} characters to {args.out}")
    else:
        sys.stdout.write(fragment)
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
