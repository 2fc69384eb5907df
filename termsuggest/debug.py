"""Debug mode state."""

import os

__all__ = [
    "is_debug",
    "set_debug",
]


class _DebugState:
    """Holds the mutable debug flag."""

    value: bool = bool(os.environ.get("DEBUG"))


_debug_state = _DebugState()


def is_debug() -> bool:
    """Return True when verbose logging was requested."""
    return _debug_state.value


def set_debug(value: bool) -> None:
    """Turn debug mode on or off."""
    _debug_state.value = value
