"""Shared constants for termsuggest."""

import os
from pathlib import Path

__all__ = [
    "BUILTIN_PROBE_TIMEOUT",
    "CONFIG_FILE",
    "FILEPATHS_TEMPLATE",
    "SPEC_EXPORT",
    "SPEC_LIBRARY",
    "SPEC_PATH_ENV",
    "SPEC_SUFFIX",
    "SUPPORTED_SHELLS",
]

# Config file path - use XDG_CONFIG_HOME with fallback to ~/.config
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
CONFIG_FILE = _xdg_config_home / "termsuggest" / "config.toml"

# Bundled spec modules, one per command
SPEC_LIBRARY = Path(__file__).parent / "specs" / "library"
SPEC_SUFFIX = ".py"
# Module attribute holding the command spec
SPEC_EXPORT = "spec"
# Extra spec roots, os.pathsep separated
SPEC_PATH_ENV = "TERMSUGGEST_SPEC_PATH"

FILEPATHS_TEMPLATE = "filepaths"

# Shells probed for builtin commands, in order
SUPPORTED_SHELLS = ("bash", "zsh", "fish")
BUILTIN_PROBE_TIMEOUT = 2.0
