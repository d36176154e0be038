#!/usr/bin/env python3
"""
Tests for configuration loading.
"""

import pytest
from pathlib import Path

from plasmid_manager.config import PlasmidConfig
from plasmid_manager.exceptions import ConfigurationError


def test_defaults():
    config = PlasmidConfig()
    assert config.load_file is None
    assert config.save_file is None
    assert config.name_width == 10
    assert config.encoding == "utf-8"
    assert config.log_level == "INFO"


def test_paths_are_converted(tmp_path):
    load = tmp_path / "genes.csv"
    load.write_text("")
    config = PlasmidConfig(load_file=str(load), save_file=str(tmp_path / "out.txt"))
    assert config.load_file == load
    assert config.save_file == tmp_path / "out.txt"


@pytest.mark.parametrize("kwargs,parameter", [
    ({"load_file": "does/not/exist.csv"}, "load_file"),
    ({"name_width": 0}, "name_width"),
    ({"name_width": 101}, "name_width"),
    ({"encoding": "no-such-codec"}, "encoding"),
    ({"log_level": "LOUD"}, "log_level"),
])
def test_invalid_values(kwargs, parameter):
    with pytest.raises(ConfigurationError) as excinfo:
        PlasmidConfig(**kwargs)
    assert excinfo.value.parameter == parameter


def test_log_level_is_normalised():
    assert PlasmidConfig(log_level="debug").log_level == "DEBUG"


def test_from_yaml(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "name_width: 16\n"
        "log_level: WARNING\n"
        f"save_file: {tmp_path / 'out.txt'}\n"
    )
    config = PlasmidConfig.from_yaml(config_file)
    assert config.name_width == 16
    assert config.log_level == "WARNING"
    assert config.save_file == tmp_path / "out.txt"


def test_from_empty_yaml(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("")
    assert PlasmidConfig.from_yaml(config_file) == PlasmidConfig()


def test_from_yaml_errors(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        PlasmidConfig.from_yaml(tmp_path / "missing.yaml")

    bad = tmp_path / "bad.yaml"
    bad.write_text("name_width: [1, 2\n")
    with pytest.raises(ConfigurationError, match="Invalid YAML"):
        PlasmidConfig.from_yaml(bad)

    unknown = tmp_path / "unknown.yaml"
    unknown.write_text("threads: 4\n")
    with pytest.raises(ConfigurationError, match="Unknown parameters: threads"):
        PlasmidConfig.from_yaml(unknown)

    listing = tmp_path / "list.yaml"
    listing.write_text("- a\n- b\n")
    with pytest.raises(ConfigurationError):
        PlasmidConfig.from_yaml(listing)


def test_from_args_overrides_base(tmp_path):
    base = PlasmidConfig(name_width=20, log_level="ERROR")
    config = PlasmidConfig.from_args(
        {"load": None, "save": tmp_path / "out.txt", "name_width": None, "log_level": "DEBUG"},
        base=base
    )
    assert config.name_width == 20
    assert config.log_level == "DEBUG"
    assert config.save_file == tmp_path / "out.txt"


def test_from_args_without_base():
    config = PlasmidConfig.from_args({"name_width": 12})
    assert config.name_width == 12
    assert config.load_file is None


def test_from_yaml_unreadable_files(tmp_path):
    # A directory cannot be opened as a file
    with pytest.raises(ConfigurationError) as excinfo:
        PlasmidConfig.from_yaml(tmp_path)
    assert excinfo.value.config_file == str(tmp_path)

    latin1 = tmp_path / "latin1.yaml"
    latin1.write_bytes(b"log_level: \xe9\xff\n")
    with pytest.raises(ConfigurationError):
        PlasmidConfig.from_yaml(latin1)


@pytest.mark.parametrize("width", [True, False])
def test_boolean_name_width_is_rejected(width):
    with pytest.raises(ConfigurationError) as excinfo:
        PlasmidConfig(name_width=width)
    assert excinfo.value.parameter == "name_width"


def test_yaml_boolean_name_width_is_rejected(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("name_width: true\n")
    with pytest.raises(ConfigurationError, match="name_width"):
        PlasmidConfig.from_yaml(config_file)


def test_from_args_encoding():
    config = PlasmidConfig.from_args({"encoding": "latin-1", "log_level": None})
    assert config.encoding == "latin-1"
