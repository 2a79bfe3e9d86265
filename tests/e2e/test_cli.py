"""End-to-end CLI tests: JSON document in, laid-out JSON document out."""

import json
from pathlib import Path

from click.testing import CliRunner

from ideagraph_layout.__main__ import main
from ideagraph_layout.config import LayoutConfig

DOC = {
    "nodes": [
        {"id": "A", "position": {"x": 50, "y": 50}, "data": {"title": "Root"}},
        {"id": "B", "position": {"x": 0, "y": 300}},
        {"id": "C", "position": {"x": 0, "y": 0}, "height": 60},
    ],
    "edges": [
        {"id": "e1", "source": "A", "target": "B"},
        {"id": "e2", "source": "A", "target": "C"},
    ],
}


def _positions(doc: dict) -> dict[str, tuple[float, float]]:
    return {n["id"]: (n["position"]["x"], n["position"]["y"]) for n in doc["nodes"]}


def test_stdin_to_stdout():
    result = CliRunner().invoke(main, [], input=json.dumps(DOC))
    assert result.exit_code == 0, result.output
    out = json.loads(result.output)
    assert _positions(out) == {"A": (0, 0), "C": (480, 0), "B": (480, 100)}
    assert out["nodes"][0]["data"] == {"title": "Root"}
    assert out["edges"] == DOC["edges"]


def test_file_to_file(tmp_path: Path):
    src = tmp_path / "graph.json"
    dst = tmp_path / "laid.json"
    src.write_text(json.dumps(DOC))
    result = CliRunner().invoke(main, [str(src), "-o", str(dst), "--col-gap", "0"])
    assert result.exit_code == 0, result.output
    assert _positions(json.loads(dst.read_text()))["B"] == (320, 100)


def test_changed_node():
    result = CliRunner().invoke(main, ["--changed", "B", "--threshold", "1"], input=json.dumps(DOC))
    assert result.exit_code == 0, result.output
    out = _positions(json.loads(result.output))
    assert out["A"] == (50, 50)
    assert out["C"] == (480, 0)


def test_report():
    doc = {"nodes": DOC["nodes"], "edges": DOC["edges"] + [{"id": "e3", "source": "B", "target": "A"}]}
    result = CliRunner().invoke(main, ["--report"], input=json.dumps(doc))
    assert result.exit_code == 0, result.output
    assert "column 0:" in result.output
    assert "degraded: cycle-detected" in result.output


def test_format_error():
    result = CliRunner().invoke(main, [], input='{"edges": []}')
    assert result.exit_code == 1
    assert "format error" in result.output


def test_invalid_config():
    result = CliRunner().invoke(main, ["--row-gap=-3"], input=json.dumps(DOC))
    assert result.exit_code == 1
    assert "gaps must be non-negative" in result.output


def test_report_summary_line():
    result = CliRunner().invoke(main, ["--report"], input=json.dumps(DOC))
    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[0] == "3 nodes in 2 columns"
    assert "column 1: C B" in result.output


def test_report_rejects_changed():
    result = CliRunner().invoke(main, ["--report", "--changed", "B"], input=json.dumps(DOC))
    assert result.exit_code == 1
    assert "cannot be combined with --changed" in result.output


def test_spacing_defaults_follow_layout_config():
    config = LayoutConfig()
    defaults = {p.name: p.default for p in main.params}
    assert defaults["col_gap"] == config.col_gap
    assert defaults["row_gap"] == config.row_gap
    assert defaults["default_width"] == config.default_width
    assert defaults["default_height"] == config.default_height
    assert defaults["threshold"] == config.incremental_threshold


def test_malformed_position_rejected():
    doc = {"nodes": [{"id": "A", "position": []}], "edges": []}
    result = CliRunner().invoke(main, [], input=json.dumps(doc))
    assert result.exit_code == 1
    assert "nodes.0.position" in result.output
