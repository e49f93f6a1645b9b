from __future__ import annotations

import io
import json
import subprocess
import sys
from pathlib import Path

import pytest

from scripts import analyze_request


def test_script_analyzes_file(tmp_path, capsys) -> None:
    path = tmp_path / "request.json"
    path.write_text(json.dumps({"skills": ["React", "TypeScript"], "targetRole": "Fullstack"}), encoding="utf-8")

    assert analyze_request.main([str(path)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["score"] == 73
    assert out["missingSkills"] == ["Tailwind"]


def test_script_example(capsys) -> None:
    assert analyze_request.main(["--example"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["score"] == 67
    assert len(out["suggestions"]) == 3


def test_script_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO('{"skills": ["tailwind css"], "targetRole": "X"}'))
    assert analyze_request.main([]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["coreSkillsMatched"] == ["tailwind css"]


def test_script_parse_error_exit_code(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("{oops"))
    assert analyze_request.main(["-"]) == 1
    assert capsys.readouterr().err.startswith("Error: ")


def test_script_validation_error_exit_code(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("{}"))
    assert analyze_request.main([]) == 2
    err = capsys.readouterr().err
    assert "'skills' (array) and 'targetRole' (string) are required" in err


def test_script_does_not_import_http_routes() -> None:
    # Run in a fresh interpreter so modules loaded by other tests do not leak in.
    root = Path(__file__).resolve().parents[1]
    code = (
        "import sys; import scripts.analyze_request; "
        "print('skillmatch.api.routes.analyze' in sys.modules)"
    )
    out = subprocess.run([sys.executable, "-c", code], cwd=root, capture_output=True, text=True, check=True)
    assert out.stdout.strip() == "False"
