"""Configuration schema and validation.

The schema (ConfigField / ConfigItems) provides defaults to Configuration
and lets `ConfigValidator` report wrong types and unknown keys, with typo
suggestions.
"""

import difflib
import logging
from dataclasses import dataclass
from typing import Any

from .config import BOOL_STRINGS

__all__ = [
    "CONFIG_SCHEMA",
    "ConfigField",
    "ConfigItems",
    "ConfigValidator",
    "format_config_error",
]


@dataclass
class ConfigField:
    """Describes an expected configuration field.

    Attributes:
        name: The configuration key name
        field_type: Expected type (bool or list)
        default: Default value if not provided
        description: Human-readable description
    """

    name: str
    field_type: type = bool
    default: Any = None
    description: str = ""


class ConfigItems(list):
    """A list of ConfigField items with lookup by name."""

    def __init__(self, *args: ConfigField) -> None:
        super().__init__(args)

    def get(self, name: str) -> ConfigField | None:
        """Return the ConfigField called `name`, if any."""
        for prop in self:
            if prop.name == name:
                return prop
        return None


CONFIG_SCHEMA = ConfigItems(
    ConfigField("spec_paths", list, default=[], description="Extra directories holding spec modules"),
    ConfigField("extra_commands", list, default=[], description="Commands considered available even if not found"),
    ConfigField("builtins", bool, default=True, description="Probe the shells for builtin commands"),
    ConfigField("dedupe", bool, default=False, description="Drop candidates with an already seen label"),
    ConfigField("cache_specs", bool, default=True, description="Keep loaded specs between requests"),
    ConfigField("include", list, default=[], description="Extra configuration files to merge"),
)


def format_config_error(field: str, message: str, suggestion: str = "") -> str:
    """Format a configuration error message."""
    msg = f"Config error for '{field}': {message}"
    if suggestion:
        msg += f" -> {suggestion}"
    return msg


class ConfigValidator:
    """Validates configuration against a schema."""

    def __init__(self, config: dict, logger: logging.Logger) -> None:
        self.config = config
        self.log = logger

    def validate(self, schema: ConfigItems = CONFIG_SCHEMA) -> list[str]:
        """Validate configuration against schema.

        Returns:
            List of error messages (empty if validation passed)
        """
        errors = []
        for field_def in schema:
            value = self.config.get(field_def.name)
            if value is None:
                continue
            error = self._check_type(field_def, value)
            if error:
                errors.append(error)
        return errors

    def _check_type(self, field_def: ConfigField, value: Any) -> str | None:  # noqa: ANN401
        expected = field_def.field_type
        if expected is bool:
            if isinstance(value, bool) or (isinstance(value, str) and value.lower() in BOOL_STRINGS):
                return None
            return format_config_error(field_def.name, f"Expected bool, got {type(value).__name__}", "Use true/false (without quotes)")
        if expected is list:
            if isinstance(value, list) and all(isinstance(item, str) for item in value):
                return None
            return format_config_error(field_def.name, "Expected a list of strings", f'Use {field_def.name} = ["item1", "item2"]')
        return None

    def warn_unknown_keys(self, schema: ConfigItems = CONFIG_SCHEMA) -> list[str]:
        """Log warnings for unknown configuration keys.

        Returns:
            List of warning messages
        """
        warnings = []
        known_keys = [f.name for f in schema]
        for key in self.config:
            if key in known_keys:
                continue
            matches = difflib.get_close_matches(key, known_keys, n=1)
            if matches:
                msg = f"Unknown option '{key}' (did you mean '{matches[0]}'?)"
            else:
                msg = f"Unknown option '{key}' - will be ignored"
            self.log.warning(msg)
            warnings.append(msg)
        return warnings
