import pytest
import yaml

from holograph.config import (
    DEFAULT_CONFIG,
    annotated_config,
    get_option,
    load_config,
    merge_config,
)
from holograph.errors import ConfigError
from holograph.logger import MemoryLogger


def test_defaults():
    assert merge_config() == {
        "title": "Style Guide",
        "source": "./components",
        "destination": "./docs",
        "documentation_assets": "./templates",
        "compat_mode": False,
        "dependencies": ["./build"],
        "preprocessor": "minify",
        "build": "./build/css",
        "main_stylesheet": "build/css/screen.css",
        "port": "3232",
    }


def test_merge_overrides_only_given_keys():
    config = merge_config({"source": "FFFFFFFFF", "extra": 1})
    assert config["source"] == "FFFFFFFFF"
    assert config["extra"] == 1
    for key, value in DEFAULT_CONFIG.items():
        if key != "source":
            assert config[key] == value


def test_merge_does_not_share_default_lists():
    config = merge_config()
    config["dependencies"].append("./vendor")
    assert DEFAULT_CONFIG["dependencies"] == ["./build"]


def test_get_option():
    config = merge_config({"source": "FFFFFFFFF"})
    assert get_option(config, "source") == "FFFFFFFFF"
    assert get_option(config, "foobar") == ""


def test_load_config_missing_file_uses_defaults(tmp_path):
    logger = MemoryLogger()
    config = load_config(tmp_path / "holograph.yml", logger=logger)
    assert config == merge_config()
    assert "not found" in logger.messages["warning"][0]


def test_load_config_missing_file_strict(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "custom.yml", strict=True)


def test_load_config_reads_file(tmp_path):
    path = tmp_path / "holograph.yml"
    path.write_text("title: My Guide\npreprocessor: none\n", encoding="utf-8")
    config = load_config(path)
    assert config["title"] == "My Guide"
    assert config["preprocessor"] == "none"
    assert config["destination"] == "./docs"


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "holograph.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == merge_config()


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "holograph.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(path)


def test_annotated_config_round_trips():
    doc = annotated_config()
    assert doc.startswith("# Holograph configuration")
    assert "Directory to build the final" in doc
    assert yaml.safe_load(doc) == merge_config()
