# tests/test_main.py
"""
Unit tests for the command line entry point (html_attributes/main.py)
"""

import json
from pathlib import Path

import pytest

from html_attributes import main as cli


@pytest.fixture(autouse=True)
def isolated(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the CLI away from the user's home config and global log handlers."""
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr("html_attributes.utils.config.default_config_path",
                        lambda: str(tmp_path / "missing.json"))


def test_normalizes_input(capsys: pytest.CaptureFixture) -> None:
    assert cli.main(["id='app'  disabled"]) == 0
    assert capsys.readouterr().out == 'id="app" disabled\n'


def test_edits(capsys: pytest.CaptureFixture) -> None:
    code = cli.main([
        'id="app" class="btn"',
        "--append", "class= primary",
        "--prepend", "id=my-",
        "--set", "hidden",
        "--set", "role=button",
        "--delete", "id",
    ])
    assert code == 0
    assert capsys.readouterr().out == 'class="btn primary" hidden role="button"\n'


def test_json_output(capsys: pytest.CaptureFixture) -> None:
    assert cli.main(['id="app" disabled', "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == {"id": "app", "disabled": True}


def test_error_policy_exit_code(capsys: pytest.CaptureFixture) -> None:
    assert cli.main(['id="app" disabled', "--bare-tokens", "error"]) == 1
    assert "disabled" in capsys.readouterr().err


def test_policy_from_config_file(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"parser": {"bare_tokens": "skip"}}), encoding="utf-8")
    assert cli.main(['id="app" disabled', "--config", str(config_file)]) == 0
    assert capsys.readouterr().out == 'id="app"\n'


def test_append_requires_value() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--append", "class"])
    assert excinfo.value.code == 2


def test_empty_input(capsys: pytest.CaptureFixture) -> None:
    assert cli.main([]) == 0
    assert capsys.readouterr().out == "\n"


def test_edits_apply_in_command_line_order(capsys: pytest.CaptureFixture) -> None:
    assert cli.main(['id="app" x="1"', "--delete", "x", "--set", "x=2", "--append", "id=-main"]) == 0
    assert capsys.readouterr().out == 'id="app-main" x="2"\n'


def test_set_then_delete(capsys: pytest.CaptureFixture) -> None:
    assert cli.main(['id="app"', "--set", "x=2", "--delete", "x"]) == 0
    assert capsys.readouterr().out == 'id="app"\n'


def test_numeric_console_level_from_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
                                           capsys: pytest.CaptureFixture) -> None:
    calls = []
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: calls.append(kwargs))
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"logging": {"console_level": 10}}), encoding="utf-8")

    assert cli.main(['id="a"', "--config", str(config_file)]) == 0
    assert capsys.readouterr().out == 'id="a"\n'
    assert calls[0]["console_level"] == 10
    assert calls[0]["log_file"] is None


def test_debug_overrides_console_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: calls.append(kwargs))
    assert cli.main(['id="a"', "--debug"]) == 0
    assert calls[0]["console_level"] == "DEBUG"


@pytest.mark.parametrize("logging_section", [
    {"console_level": ["DEBUG"]},
    {"console_level": None},
    {"log_file": 5},
])
def test_bad_logging_config_exit_code(logging_section: dict, tmp_path: Path,
                                      capsys: pytest.CaptureFixture) -> None:
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"logging": logging_section}), encoding="utf-8")

    assert cli.main(['id="a"', "--config", str(config_file)]) == 1
    assert "logging." in capsys.readouterr().err
