import logging

import pytest
import yaml

from relcalc.algebra.engine.config import Config, config


def test_config_is_singleton():
    assert Config.get_instance() is config
    with pytest.raises(RuntimeError):
        Config()

def test_config_defaults():
    assert config.get_wildcard() == "*"
    assert config.is_strict_arity() is False
    assert config.get_separator() == ", "
    assert config.get_not_found_message() == "Relation not found"
    assert config.get_log_level() == logging.WARNING
    assert config.get("no.such.path", "fallback") == "fallback"

def test_config_set_and_reset():
    config.set("display.separator", " | ")
    config.set("extra.nested.key", 3)
    assert config.get_separator() == " | "
    assert config.get("extra.nested.key") == 3

    config.reset()
    assert config.get_separator() == ", "
    assert config.get("extra") is None

def test_config_load_merges_with_defaults(tmp_path):
    path = tmp_path / "relcalc.yaml"
    path.write_text(yaml.dump({"relation": {"wildcard": "?"}, "logging": {"level": "debug"}}))

    config.load_from_file(str(path))
    assert config.get_wildcard() == "?"
    assert config.is_strict_arity() is False
    assert config.get_log_level() == logging.DEBUG

def test_config_load_missing_or_invalid(tmp_path):
    config.load_from_file(str(tmp_path / "missing.yaml"))
    assert config.get_wildcard() == "*"

    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        config.load_from_file(str(path))

def test_config_save_round_trip(tmp_path):
    path = tmp_path / "saved.yaml"
    config.set("relation.strict_arity", True)
    config.save(str(path))

    saved = yaml.safe_load(path.read_text())
    assert saved["relation"]["strict_arity"] is True
    assert saved["display"]["separator"] == ", "

def test_config_unknown_log_level():
    config.set("logging.level", "chatty")
    assert config.get_log_level() == logging.WARNING
