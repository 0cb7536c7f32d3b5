"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from iglu_schema_editor.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["show", "--config", "registry.yaml"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--name" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["list", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_configuration_returns_exit_code_one(tmp_path: Path, capsys) -> None:
    exit_code = main(["list", "--config", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err
    assert "Traceback" not in captured.err


def test_configuration_path_that_is_a_directory_returns_exit_code_one(
    tmp_path: Path, capsys
) -> None:
    exit_code = main(["list", "--config", str(tmp_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to read configuration file" in captured.err
    assert "Traceback" not in captured.err


def test_configuration_that_is_not_utf8_returns_exit_code_one(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "registry.yaml"
    config_path.write_bytes(b"\xff\xfe registry")

    exit_code = main(["list", "--config", str(config_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to read configuration file" in captured.err
    assert "Traceback" not in captured.err
