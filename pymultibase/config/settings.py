"""Settings read from the environment."""

import logging
import os
from typing import Any, Mapping, Optional

from ..core.error import BaseError

ENV_PREFIX = "MULTIBASE_"

# environment variable suffix -> settings key
ENV_SETTINGS = {
    "LOG_CONFIG": "log.config",
    "LOG_LEVEL": "log.level",
    "LOG_FILE": "log.file",
}


class ConfigError(BaseError):
    """A base exception for all configuration errors."""


class SettingsError(ConfigError):
    """Raised when a setting holds an unusable value."""


class Settings(Mapping[str, Any]):
    """Read-only settings mapping."""

    def __init__(self, values: Mapping[str, Any] = None):
        """Initialize a Settings object.

        Args:
            values: An optional dictionary of settings
        """
        self._values = dict(values or {})

    @classmethod
    def from_environ(
        cls, environ: Mapping[str, str] = None, prefix: str = ENV_PREFIX
    ) -> "Settings":
        """Build settings from `MULTIBASE_*` environment variables.

        Empty variables are treated as unset.

        Args:
            environ: The environment to read, `os.environ` by default
            prefix: The variable name prefix

        Raises:
            SettingsError: if the log level is not a known logging level

        """
        if environ is None:
            environ = os.environ
        values = {}
        for suffix, key in ENV_SETTINGS.items():
            value = environ.get(prefix + suffix)
            if value:
                values[key] = value
        level = values.get("log.level")
        if level and not isinstance(logging.getLevelName(level.upper()), int):
            raise SettingsError(f"Unknown log level: {level}")
        return cls(values)

    def get_value(self, *var_names, default: Optional[Any] = None) -> Any:
        """Fetch a setting.

        Args:
            var_names: A list of variable name alternatives
            default: The default value to return if none are defined
        """
        for k in var_names:
            if k in self._values:
                return self._values[k]
        return default

    def get_str(self, *var_names, default: Optional[str] = None) -> Optional[str]:
        """Fetch a setting as a string value."""
        value = self.get_value(*var_names, default=default)
        if value is not None:
            value = str(value)
        return value

    def __getitem__(self, index):
        """Fetch a setting by key."""
        if not isinstance(index, str):
            raise TypeError(f"Index {index} must be a string")
        return self._values[index]

    def __iter__(self):
        """Iterate settings keys."""
        return iter(self._values)

    def __len__(self):
        """Fetch the length of the mapping."""
        return len(self._values)
