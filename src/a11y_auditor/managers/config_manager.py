import json
import logging
from typing import Any, Dict, Optional

from a11y_auditor.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"1", "true", "yes", "on"}


class ConfigManager:
    """
    A singleton holding the auditor's configuration.
    Values come from the packaged settings.json and may be overridden in memory.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._config: Dict[str, Any] = {}
        self.reset()
        logger.debug("ConfigManager initialized.")

    def get_all(self) -> Dict[str, Any]:
        """Returns the entire current configuration dictionary."""
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Retrieves a nested value using a dotted path, e.g. 'audit.fail_fast'.
        Missing keys and explicit nulls both fall back to `default`.
        """
        value = self._config
        for key in key_path.split('.'):
            if not isinstance(value, dict):
                return default
            value = value.get(key)
        return value if value is not None else default

    def set_nested(self, key_path: str, value: Any) -> bool:
        """
        Sets a nested value in memory, e.g. ('report.max_violations_per_rule', 10).
        String input is coerced to the type of the value it replaces.
        """
        keys = key_path.split('.')
        d = self._config
        for key in keys[:-1]:
            d = d.setdefault(key, {})
            if not isinstance(d, dict):
                logger.error("Cannot set value: '%s' is not a dictionary.", key)
                return False

        original_value = d.get(keys[-1])
        if original_value is not None and isinstance(value, str):
            value = self._coerce(key_path, value, type(original_value))

        d[keys[-1]] = value
        logger.info("Configuration updated: %s = %s", key_path, value)
        return True

    @staticmethod
    def _coerce(key_path: str, raw: str, target: type) -> Any:
        if target is bool:
            return raw.strip().lower() in _TRUE_STRINGS
        if target is list:
            return [part.strip() for part in raw.split(',') if part.strip()]
        try:
            return target(raw)
        except (ValueError, TypeError):
            logger.warning(
                "Could not cast new value for '%s' to type %s. Storing as string.",
                key_path, target.__name__
            )
            return raw

    def reset(self):
        """Reloads the in-memory configuration from settings.json."""
        config_path = PathUtils.get_settings_file()
        if not config_path.exists():
            logger.warning("settings.json not found at %s. Using empty config.", config_path)
            self._config = {}
            return
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                self._config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load settings.json: %s", e, exc_info=True)
            self._config = {}
            return
        logger.debug("Configuration has been (re)loaded from %s.", config_path)


config_manager = ConfigManager()
