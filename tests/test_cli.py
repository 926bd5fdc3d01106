import logging

import pytest

from conftest import TRIANGLE_OBJ
from pyobjmesh.__main__ import main


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("pyobjmesh")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


@pytest.fixture
def triangle_path(tmp_path):
    path = tmp_path / "triangle.obj"
    path.write_text(TRIANGLE_OBJ, encoding="utf-8")
    return path


def test_writes_fragment_to_file(tmp_path, triangle_path):
    out = tmp_path / "triangle_obj_code_gen_test.in"

    assert main([str(triangle_path), "-o", str(out)]) == 0

    text = out.read_text(encoding="utf-8")
    assert text.startswith("{\n    let points: Vec<[f32; 3]> = vec![\n")
    assert text.endswith("ObjMesh::new(points, tex_coords, normals)\n}")


def test_compact_to_stdout(triangle_path, capsys):
    assert main([str(triangle_path), "--compact"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("{let points:Vec<[f32;3]>=vec![[0.00000000,0.00000000,0.00000000],")
    assert out.endswith("ObjMesh::new(points,tex_coords,normals)}\n")


def test_missing_input_exits_with_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.obj")]) == 1
    lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    assert len(lines) == 1
    assert "file not found" in lines[0]


def test_log_file(tmp_path, triangle_path):
    log_file = tmp_path / "run.log"
    out = tmp_path / "out.in"

    assert main([str(triangle_path), "-o", str(out), "--log-level", "INFO", "--log-file", str(log_file)]) == 0
    logging.getLogger("pyobjmesh").handlers[-1].flush()
    assert "Loading OBJ file" in log_file.read_text(encoding="utf-8")


def test_bundled_triangle_asset_matches_readme_example():
    from pathlib import Path

    from pyobjmesh import load_file, to_rust_code

    asset = Path(__file__).resolve().parent.parent / "assets" / "triangle.obj"
    fragment = to_rust_code(load_file(asset))
    assert "        [0.00000000, 1.00000000, 0.00000000],\n" in fragment
    assert fragment.count("[0.00000000, 0.00000000, 1.00000000]") == 3
