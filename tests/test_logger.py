from __future__ import annotations

import logging

import pytest

import kurdish_didyoumean.logger as logger_mod


@pytest.fixture
def reset_level():
    yield
    logger_mod.set_log_level("WARNING", console=False)


def test_level_number_defaults_to_warning():
    assert logger_mod.level_number("debug") == logging.DEBUG
    assert logger_mod.level_number(" Error ") == logging.ERROR
    assert logger_mod.level_number("verbose") == logging.WARNING
    assert logger_mod.level_number(None) == logging.WARNING


def test_get_logger_nests_under_package():
    assert logger_mod.get_logger("ranking").name == "kurdish_didyoumean.ranking"
    assert logger_mod.get_logger("kurdish_didyoumean.cli").name == "kurdish_didyoumean.cli"
    root = logger_mod.get_logger()
    assert root.name == "kurdish_didyoumean"
    assert root.propagate is False


def test_set_log_level_console_echoes_to_stderr(capsys, reset_level):
    logger_mod.set_log_level("debug", console=True)
    logger_mod.get_logger("tests").debug("scoring %s", "maal")
    assert "DEBUG kurdish_didyoumean.tests: scoring maal" in capsys.readouterr().err

    logger_mod.set_log_level("debug", console=False)
    logger_mod.get_logger("tests").debug("quiet")
    assert "quiet" not in capsys.readouterr().err


def test_cli_log_level_flag_enables_console(capsys, tmp_path, reset_level):
    from kurdish_didyoumean import cli

    code = cli.main(["maal", "-t", "1", "--log-level", "DEBUG", "--config", str(tmp_path / "none.json")])

    assert code == 0
    captured = capsys.readouterr()
    assert "Did you mean: mal" in captured.out
    assert "within 1 edits" in captured.err
