"""Configuration file loading.

Handles loading, parsing and merging TOML configuration files.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .config import Configuration
from .constants import CONFIG_FILE
from .models import ConfigError
from .utils import merge
from .validation import CONFIG_SCHEMA, ConfigValidator

if TYPE_CHECKING:
    import logging

__all__ = ["ConfigLoader", "load_configuration"]


class ConfigLoader:
    """Loads and merges configuration files.

    Supports:
    - A single TOML file
    - A directory (all its .toml files merged, in name order)
    - `include` directives listing extra files or directories
    """

    def __init__(self, log: logging.Logger) -> None:
        """Initialize the config loader.

        Args:
            log: Logger instance for status and error messages
        """
        self.log = log
        self._seen: set[Path] = set()

    def load(self, config_filename: str = "") -> dict[str, Any]:
        """Load configuration from a file or directory.

        Args:
            config_filename: Path to a config file or directory.
                           If empty, uses the default CONFIG_FILE location,
                           which may not exist.

        Returns:
            The loaded and merged configuration dictionary

        Raises:
            ConfigError: If an explicit file is missing or a file has syntax errors
        """
        self._seen.clear()
        if not config_filename:
            if not CONFIG_FILE.exists():
                self.log.debug("No config file at %s, using defaults", CONFIG_FILE)
                return {}
            return self._open_config(CONFIG_FILE)
        return self._open_config(Path(os.path.expandvars(config_filename)).expanduser())

    def _open_config(self, fname: Path) -> dict[str, Any]:
        fname = fname.resolve()
        if fname in self._seen:
            self.log.warning("Skipping recursive include of %s", fname)
            return {}
        self._seen.add(fname)

        config = self._load_config_directory(fname) if fname.is_dir() else self._load_config_file(fname)

        for extra_config in list(config.pop("include", [])):
            extra_path = Path(os.path.expandvars(extra_config)).expanduser()
            if not extra_path.is_absolute():
                extra_path = (fname if fname.is_dir() else fname.parent) / extra_path
            merge(config, self._open_config(extra_path))
        return config

    def _load_config_directory(self, directory: Path) -> dict[str, Any]:
        """Load and merge all .toml files from a directory."""
        config: dict[str, Any] = {}
        for toml_file in sorted(f.name for f in directory.iterdir()):
            if not toml_file.endswith(".toml"):
                continue
            merge(config, self._load_config_file(directory / toml_file))
        return config

    def _load_config_file(self, fname: Path) -> dict[str, Any]:
        """Load a single configuration file.

        Raises:
            ConfigError: If file not found or has syntax errors
        """
        if not fname.exists():
            self.log.error("Config file not found: %s", fname)
            msg = f"config file not found: {fname}"
            raise ConfigError(msg)
        self.log.info("Loading %s", fname)
        with fname.open("rb") as f:
            try:
                return tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                self.log.error("Problem reading %s: %s", fname, e)
                msg = f"invalid TOML in {fname}: {e}"
                raise ConfigError(msg) from e


def load_configuration(log: logging.Logger, config_filename: str = "") -> Configuration:
    """Load, validate and wrap the configuration.

    Validation problems are logged, they never prevent loading.

    Raises:
        ConfigError: If the configuration can't be read
    """
    raw = ConfigLoader(log).load(config_filename)
    validator = ConfigValidator(raw, log)
    for error in validator.validate(CONFIG_SCHEMA):
        log.error(error)
    validator.warn_unknown_keys(CONFIG_SCHEMA)
    return Configuration(raw, logger=log, schema=CONFIG_SCHEMA)
