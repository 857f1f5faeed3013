import json

import pytest

from a11y_auditor.managers.config_manager import ConfigManager
from a11y_auditor.utils.path_utils import PathUtils

# A small, predictable configuration for these tests
MOCK_SETTINGS_CONTENT = {
    "debug": {
        "level": "WARNING"
    },
    "audit": {
        "fail_fast": False,
        "disabled_rules": []
    },
    "report": {
        "max_violations_per_rule": 25
    }
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    Points the ConfigManager at a temporary settings.json and reloads it.
    """
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps(MOCK_SETTINGS_CONTENT))
    monkeypatch.setattr(PathUtils, 'get_settings_file', lambda: settings_file)

    manager = ConfigManager()
    manager.reset()
    return manager


# --- Tests for loading ---

def test_config_manager_is_a_singleton():
    assert ConfigManager() is ConfigManager()


def test_config_manager_load(config_env):
    """The manager exposes the file's content."""
    config = config_env.get_all()
    assert config["debug"]["level"] == "WARNING"
    assert config["report"]["max_violations_per_rule"] == 25


def test_packaged_settings_are_complete():
    """The shipped settings.json defines every key the auditor reads."""
    manager = ConfigManager()
    manager.reset()
    assert manager.get_nested("audit.fail_fast") is False
    assert manager.get_nested("audit.disabled_rules") == []
    assert manager.get_nested("report.show_references") is True
    assert manager.get_nested("report.max_violations_per_rule") == 25


def test_missing_settings_file_gives_empty_config(tmp_path, monkeypatch):
    monkeypatch.setattr(PathUtils, 'get_settings_file', lambda: tmp_path / "absent.json")
    manager = ConfigManager()
    manager.reset()
    assert manager.get_all() == {}
    assert manager.get_nested("audit.fail_fast", False) is False


def test_broken_settings_file_gives_empty_config(tmp_path, monkeypatch):
    broken = tmp_path / "settings.json"
    broken.write_text("{ not json")
    monkeypatch.setattr(PathUtils, 'get_settings_file', lambda: broken)
    manager = ConfigManager()
    manager.reset()
    assert manager.get_all() == {}


# --- Tests for get_nested / set_nested ---

def test_config_manager_get_nested(config_env):
    """Dotted paths reach nested values; missing keys fall back to the default."""
    assert config_env.get_nested("report.max_violations_per_rule") == 25
    assert config_env.get_nested("non.existent.key", "default") == "default"
    assert config_env.get_nested("debug.level.deeper", "default") == "default"


def test_config_manager_set_nested(config_env):
    """String input is cast to the type of the value it replaces."""
    config_env.set_nested("debug.level", "INFO")
    assert config_env.get_nested("debug.level") == "INFO"

    config_env.set_nested("report.max_violations_per_rule", "10")
    assert config_env.get_nested("report.max_violations_per_rule") == 10

    config_env.set_nested("audit.fail_fast", "yes")
    assert config_env.get_nested("audit.fail_fast") is True

    config_env.set_nested("audit.disabled_rules", "images-have-alt, tel-links-valid-phone")
    assert config_env.get_nested("audit.disabled_rules") == ["images-have-alt", "tel-links-valid-phone"]


def test_config_manager_set_new_key(config_env):
    assert config_env.set_nested("new_feature.enabled", True)
    assert config_env.get_nested("new_feature.enabled") is True


def test_uncastable_value_is_stored_as_string(config_env):
    config_env.set_nested("report.max_violations_per_rule", "many")
    assert config_env.get_nested("report.max_violations_per_rule") == "many"


def test_reset_discards_in_memory_changes(config_env):
    config_env.set_nested("audit.fail_fast", True)
    config_env.reset()
    assert config_env.get_nested("audit.fail_fast") is False
