import json
import logging

import pytest

from grid_engine.main import build, main
from grid_engine.utils.config import Config


def write_config(tmp_path, data):
    path = tmp_path / "grid.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_build_default_grid():
    text = build(Config())
    assert ".col-12" in text
    assert ".push-11" in text
    assert ".push-12" not in text
    assert ".pull-11" in text
    assert ".gutters .col-1" in text


def test_main_writes_output(tmp_path):
    config_path = write_config(tmp_path, {
        "grid": {"columns": 4},
        "breakpoints": {"small": 450},
        "responsive": [
            {"selector": "h1", "properties": ["font-size"], "value": 24,
             "overrides": {"small": 32}},
        ],
    })
    output = tmp_path / "grid.css"

    assert main(["--config", config_path, "--output", str(output)]) == 0

    text = output.read_text(encoding="utf-8")
    assert ".col-4" in text
    assert ".col-5" not in text
    assert "@media" in text
    assert "450px" in text
    assert "2rem" in text


def test_main_prints_to_stdout(capsys):
    assert main([]) == 0
    assert ".col-1" in capsys.readouterr().out


def test_unresolved_breakpoint_does_not_fail_the_build(tmp_path, caplog):
    config_path = write_config(tmp_path, {
        "responsive": [
            {"selector": "p", "properties": ["margin-top"], "value": "1em",
             "overrides": {"giant": "2em"}},
        ],
    })
    output = tmp_path / "grid.css"

    with caplog.at_level(logging.WARNING, logger="grid_engine"):
        assert main(["--config", config_path, "--output", str(output)]) == 0

    assert "giant" in caplog.text
    assert "@media" not in output.read_text(encoding="utf-8")


def test_invalid_grid_fails_the_build(tmp_path):
    config_path = write_config(tmp_path, {"grid": {"columns": 0}})
    assert main(["--config", config_path]) == 1


def test_zero_line_height_fails_the_build(tmp_path):
    config_path = write_config(tmp_path, {
        "responsive": [
            {"selector": "p", "properties": ["line-height"], "value": 0},
        ],
    })
    assert main(["--config", config_path]) == 1


def test_non_pixel_literal_key_fails_the_build(tmp_path):
    config_path = write_config(tmp_path, {
        "responsive": [
            {"selector": "p", "properties": ["margin-top"], "value": "1em",
             "overrides": {"40em-literal": "2em"}},
        ],
    })
    assert main(["--config", config_path]) == 1


def test_unknown_breakpoint_starting_with_a_digit_is_a_warning(tmp_path, caplog):
    config_path = write_config(tmp_path, {
        "responsive": [
            {"selector": "p", "properties": ["margin-top"], "value": "1em",
             "overrides": {"3xl": "2em"}},
        ],
    })
    with caplog.at_level(logging.WARNING, logger="grid_engine"):
        assert main(["--config", config_path, "--output", str(tmp_path / "out.css")]) == 0
    assert "3xl" in caplog.text


@pytest.mark.parametrize("gutter", ["2", None])
def test_non_numeric_gutter_fails_the_build(tmp_path, gutter):
    config_path = write_config(tmp_path, {"grid": {"gutter_percent": gutter}})
    assert main(["--config", config_path]) == 1


def test_properties_string_fails_the_build(tmp_path):
    config_path = write_config(tmp_path, {
        "responsive": [{"selector": "p", "properties": "font-size", "value": 12}],
    })
    assert main(["--config", config_path]) == 1


def test_infinite_breakpoint_is_not_emitted(tmp_path, caplog):
    config_path = tmp_path / "grid.json"
    config_path.write_text(
        '{"breakpoints": {"huge": 1e999}, "responsive": [{"selector": "p", '
        '"properties": ["margin-top"], "value": "1em", "overrides": {"huge": "2em"}}]}',
        encoding="utf-8",
    )
    output = tmp_path / "grid.css"
    with caplog.at_level(logging.WARNING, logger="grid_engine"):
        assert main(["--config", str(config_path), "--output", str(output)]) == 0
    assert "inf" not in output.read_text(encoding="utf-8")
    assert "huge" in caplog.text
