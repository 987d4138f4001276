from __future__ import annotations
import pytest
from pathlib import Path
from tsvtable.config.loader import SCHEMA_PATH, load_config, ConfigError
from tsvtable.models.config_models import DEFAULT_CONFIG, TableConfig


def test_load_config_success(write_config: Path):
    cfg = load_config(write_config)
    assert cfg == TableConfig(encoding="utf-8", strict=True)


def test_load_config_defaults_for_empty_file(write_config: Path):
    write_config.write_text("", encoding="utf-8")
    cfg = load_config(write_config)
    assert cfg == DEFAULT_CONFIG
    assert cfg.encoding == "utf-8"
    assert cfg.strict is False


def test_load_config_missing_file(temp_workdir: Path):
    missing = temp_workdir / "config" / "not_exists.yml"
    with pytest.raises(ConfigError):
        load_config(missing)


def test_load_config_invalid_yaml(write_config: Path):
    write_config.write_text("encoding: [utf-8\n", encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "invalid yaml" in str(e.value)


def test_load_config_wrong_type(write_config: Path):
    write_config.write_text("strict: maybe\n", encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value)


def test_load_config_extra_field(write_config: Path):
    # additionalProperties: false
    text = write_config.read_text(encoding="utf-8") + "\nextra_field: not_allowed\n"
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value)


def test_load_config_unknown_encoding(write_config: Path):
    write_config.write_text("encoding: no-such-codec\n", encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "unknown encoding" in str(e.value)


def test_schema_file_is_shipped():
    assert SCHEMA_PATH.exists()


def test_table_config_is_frozen():
    with pytest.raises(AttributeError):
        DEFAULT_CONFIG.strict = True  # type: ignore[misc]
