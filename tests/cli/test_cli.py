"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from systemcss.cli.main import build_parser, main


def test_build_parser_accepts_compile_selectors(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(["compile", "component(a)", "has(b)", "--root", str(tmp_path)])

    assert args.command == "compile"
    assert args.selectors == ["component(a)", "has(b)"]
    assert args.root == tmp_path
    assert args.config is None


def test_build_parser_mixins_flags(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(["mixins", "-e", "scss", "-o", str(tmp_path), "-n", "ns-", "--filename", "sys"])

    assert args.engine == "scss"
    assert args.output == tmp_path
    assert args.namespace == "ns-"
    assert args.filename == "sys"


def test_build_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_compile_prints_selectors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["compile", "component(card) when(active) has(title)", ".plain", "-r", str(tmp_path)])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == [r".card.\+active .card--title", ".plain"]


def test_compile_reads_stdin(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("component(a, b)\n\nutil(hidden)\n"))

    code = main(["compile", "-r", str(tmp_path)])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == [".a,", ".b", r"#system .\~hidden"]


def test_compile_uses_project_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "systemcss.yaml").write_text("mixins:\n  block: new\n", encoding="utf-8")

    code = main(["compile", "new(card) has(title)", "-r", str(tmp_path)])

    assert code == 0
    assert capsys.readouterr().out.strip() == ".card--title"


def test_compile_reports_config_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "systemcss.yaml").write_text("mixins:\n  block: has\n", encoding="utf-8")

    code = main(["compile", "component(a)", "-r", str(tmp_path)])

    assert code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_mixins_writes_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["mixins", "-r", str(tmp_path), "-e", "stylus", "-o", str(tmp_path), "-n", "sys-"])

    dest = tmp_path / "system.styl"
    assert code == 0
    assert dest.exists()
    assert "sys-component(name)" in dest.read_text(encoding="utf-8")
    assert str(dest) in capsys.readouterr().out


def test_mixins_without_engine_is_config_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["mixins", "-r", str(tmp_path), "-o", str(tmp_path)])

    assert code == 2
    assert "Please specify the name of the CSS preprocessor" in capsys.readouterr().err


def test_mixins_into_missing_directory_is_io_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["mixins", "-r", str(tmp_path), "-e", "scss", "-o", str(tmp_path / "nope")])

    assert code == 1
    assert "I/O error" in capsys.readouterr().err


def test_validate_config_ok(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["validate-config", "-r", str(tmp_path)])

    assert code == 0
    assert "Configuration is valid." in capsys.readouterr().out


def test_validate_config_reports_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "systemcss.yaml").write_text("mixins:\n  block: has\nrot: '#x'\n", encoding="utf-8")

    code = main(["validate-config", "-r", str(tmp_path)])

    err = capsys.readouterr().err
    assert code == 2
    assert "[CFG004]" in err
    assert "did you mean `root`?" in err
    assert "[CFG007]" in err


def test_validate_config_missing_explicit_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["validate-config", "-r", str(tmp_path), "-c", str(tmp_path / "missing.yaml")])

    assert code == 2
    assert "[CFG001]" in capsys.readouterr().err


def test_show_config_prints_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "systemcss.yaml").write_text("root: '#app'\n", encoding="utf-8")

    code = main(["show-config", "-r", str(tmp_path)])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["root"] == "#app"
    assert payload["mixins"]["block"] == "component"
