import json

import pytest

from grid_engine.errors import ConfigError, InvalidGridConfig
from grid_engine.utils.config import Config


def write_config(tmp_path, data):
    path = tmp_path / "grid.json"
    path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
    return str(path)


def test_defaults_without_file():
    config = Config()
    assert config.breakpoint_map()["small"] == 480
    assert config.grid_config().column_count == 12
    assert config.base_font_size() == 16
    assert config.base_line_height() == 24
    assert config.use_unit_mixins()
    assert config.responsive_rules() == []


def test_missing_file_uses_defaults(tmp_path):
    config = Config(str(tmp_path / "missing.json"))
    assert config.get("grid.columns") == 12


def test_file_is_merged_over_defaults(tmp_path):
    config = Config(write_config(tmp_path, {
        "grid": {"columns": 4, "gutters": True},
        "breakpoints": {"tablet": 700},
    }))
    grid = config.grid_config()
    assert grid.column_count == 4
    assert grid.use_gutters
    assert grid.gutter_percent == 2
    assert config.breakpoint_map()["tablet"] == 700
    assert config.base_font_size() == 16


def test_invalid_json(tmp_path):
    with pytest.raises(ConfigError):
        Config(write_config(tmp_path, "{not json"))


def test_non_object_json(tmp_path):
    with pytest.raises(ConfigError):
        Config(write_config(tmp_path, [1, 2]))


def test_dotted_get_and_set():
    config = Config()
    config.set("naming.column", "span-")
    config.set("extra.nested.key", 3)
    assert config.get("naming.column") == "span-"
    assert config.get("extra.nested.key") == 3
    assert config.get("extra.missing.key", "fallback") == "fallback"
    assert config.naming()["column"] == "span-"


def test_get_all_is_a_copy():
    config = Config()
    snapshot = config.get_all()
    snapshot["grid"]["columns"] = 1
    assert config.get("grid.columns") == 12


def test_invalid_grid_settings(tmp_path):
    config = Config(write_config(tmp_path, {"grid": {"columns": 0}}))
    with pytest.raises(InvalidGridConfig):
        config.grid_config()


def test_responsive_rule_requires_keys(tmp_path):
    config = Config(write_config(tmp_path, {"responsive": [{"selector": "h1"}]}))
    with pytest.raises(ConfigError):
        config.responsive_rules()


@pytest.mark.parametrize("properties", ["font-size", ["font-size", 3], {"font-size": 1}])
def test_responsive_properties_must_be_a_list_of_names(tmp_path, properties):
    config = Config(write_config(tmp_path, {
        "responsive": [{"selector": "h1", "properties": properties, "value": 12}],
    }))
    with pytest.raises(ConfigError):
        config.responsive_rules()


def test_responsive_overrides_must_be_an_object(tmp_path):
    config = Config(write_config(tmp_path, {
        "responsive": [{"selector": "h1", "properties": ["font-size"], "value": 12,
                        "overrides": [["small", 14]]}],
    }))
    with pytest.raises(ConfigError):
        config.responsive_rules()


def test_non_numeric_gutter_percent(tmp_path):
    config = Config(write_config(tmp_path, {"grid": {"gutter_percent": "2"}}))
    with pytest.raises(InvalidGridConfig):
        config.grid_config()
