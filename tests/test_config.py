#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#

import os

import pytest

from estemplate.config import _merge_dicts, _update_config_field, load_config

HERE = os.path.dirname(__file__)
FIXTURES_DIR = os.path.abspath(os.path.join(HERE, "fixtures"))

CONFIG_FILE = os.path.join(FIXTURES_DIR, "config.yml")
CONFIG_INVALID_LOG_LEVEL_FILE = os.path.join(
    FIXTURES_DIR, "config_invalid_log_level.yml"
)


def test_bad_config_file():
    with pytest.raises(FileNotFoundError):
        load_config("BEEUUUAH")


def test_default_config():
    config = load_config()

    assert config["service"]["log_level"] == "INFO"
    assert config["render"] == {
        "indent": 2,
        "sort_keys": True,
        "include_name": True,
        "validate": False,
    }


def test_config(set_env):
    config = load_config(CONFIG_FILE)

    assert isinstance(config, dict)
    assert config["service"]["log_level"] == "DEBUG"
    assert config["render"]["indent"] == 4
    assert config["render"]["sort_keys"] is False
    # defaults are kept for keys missing from the file
    assert config["render"]["include_name"] is True


def test_config_with_invalid_log_level():
    with pytest.raises(ValueError) as e:
        load_config(CONFIG_INVALID_LOG_LEVEL_FILE)

    assert e.match("Unexpected log level.*")


def test_update_config_when_nested_field_does_not_exist():
    config = {}

    _update_config_field(config, "test.nested.property", 50)

    assert config["test"]["nested"]["property"] == 50


def test_update_config_when_nested_field_exists():
    config = {"test": {"nested": {"property": 25}}}

    _update_config_field(config, "test.nested.property", 50)

    assert config["test"]["nested"]["property"] == 50


def test_update_config_when_root_field_does_not_exist():
    config = {}

    _update_config_field(config, "test", 50)

    assert config["test"] == 50


def test_merge_dicts():
    merged = dict(
        _merge_dicts(
            {"render": {"indent": 2, "sort_keys": True}, "service": {"log_level": "INFO"}},
            {"render": {"indent": 4}, "extra": 1},
        )
    )

    assert merged == {
        "render": {"indent": 4, "sort_keys": True},
        "service": {"log_level": "INFO"},
        "extra": 1,
    }
