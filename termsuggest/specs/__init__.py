"""Command spec loading.

Provides the spec registry and the helpers used to discover, import and
validate per-command spec modules.
"""

from __future__ import annotations

from .loader import SpecRegistry, default_spec_roots, find_spec_files, load_specs, validate_spec

__all__ = [
    "SpecRegistry",
    "default_spec_roots",
    "find_spec_files",
    "load_specs",
    "validate_spec",
]
