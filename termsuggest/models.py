"""Data models for command specs and completion candidates.

Specs are authored data: a CommandSpec describes the completable surface of
a single command (its options, subcommands and argument suggestions).
CompletionCandidate is the per-request output record.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import Any

__all__ = [
    "ArgSpec",
    "CommandSpec",
    "CompletionCandidate",
    "ConfigError",
    "ExitCode",
    "FolderMode",
    "Generator",
    "GeneratorKind",
    "Name",
    "OptionSpec",
    "SpecError",
    "SuggestionSpec",
    "TermSuggestError",
    "filepaths",
    "folders",
    "get_label",
]

Name = str | tuple[str, ...]


class TermSuggestError(Exception):
    """Base class for termsuggest errors."""


class SpecError(TermSuggestError):
    """A command spec is malformed."""


class ConfigError(TermSuggestError):
    """The configuration could not be read."""


class ExitCode(IntEnum):
    """Exit codes for the termsuggest CLI."""

    SUCCESS = 0
    NO_COMPLETIONS = 1
    USAGE_ERROR = 2  # same as argparse
    CONFIG_ERROR = 3


class GeneratorKind(StrEnum):
    """Capability advertised by an argument generator."""

    FILEPATHS = "filepaths"
    OTHER = "other"


class FolderMode(StrEnum):
    """How a filepaths generator treats folders."""

    ALWAYS = "always"
    NEVER = "never"
    ONLY = "only"


def get_label(item: Any) -> str | None:  # noqa: ANN401
    """Return the canonical label of anything carrying a `name`.

    Args:
        item: A spec object, or a mapping with a "name" key

    Returns:
        The name itself, the first alias of a sequence of names, or None
    """
    name = item.get("name") if isinstance(item, Mapping) else getattr(item, "name", None)
    if isinstance(name, str):
        return name or None
    if isinstance(name, Sequence) and name:
        first = name[0]
        return first if isinstance(first, str) and first else None
    return None


def _as_name(value: Any) -> Name:  # noqa: ANN401
    if isinstance(value, str):
        return value
    if isinstance(value, Sequence):
        return tuple(value)
    msg = f"name must be a string or a list of strings, got {type(value).__name__}"
    raise SpecError(msg)


@dataclass(frozen=True)
class Generator:
    """Declarative description of a dynamic suggestion source."""

    kind: GeneratorKind = GeneratorKind.OTHER
    show_folders: FolderMode | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Generator:
        """Build from the mapping form, e.g. {"kind": "filepaths", "showFolders": "only"}."""
        try:
            kind = GeneratorKind(data.get("kind", GeneratorKind.OTHER))
        except ValueError:
            kind = GeneratorKind.OTHER
        show_folders = data.get("showFolders", data.get("show_folders"))
        try:
            mode = FolderMode(show_folders) if show_folders is not None else None
        except ValueError as e:
            msg = f"invalid showFolders value: {show_folders!r}"
            raise SpecError(msg) from e
        return cls(kind=kind, show_folders=mode)


def filepaths(show_folders: FolderMode | str = FolderMode.ALWAYS) -> Generator:
    """Return a filepaths generator."""
    return Generator(kind=GeneratorKind.FILEPATHS, show_folders=FolderMode(show_folders))


def folders() -> Generator:
    """Return a filepaths generator restricted to folders."""
    return filepaths(FolderMode.ONLY)


@dataclass(frozen=True)
class SuggestionSpec:
    """A static suggestion for an argument value."""

    name: Name
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | str) -> SuggestionSpec:
        if isinstance(data, str):
            return cls(name=data)
        return cls(name=_as_name(data.get("name", "")), description=data.get("description") or "")


@dataclass(frozen=True)
class OptionSpec:
    """An option flag, such as `--verbose` or `-v`."""

    name: Name
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OptionSpec:
        return cls(name=_as_name(data.get("name", "")), description=data.get("description") or "")


@dataclass(frozen=True)
class ArgSpec:
    """Describes the arguments of a command.

    Attributes:
        suggestions: Static values offered for this argument
        template: Completion template tag, e.g. "filepaths"
        generators: Dynamic suggestion capability
    """

    suggestions: tuple[SuggestionSpec, ...] = ()
    template: str | None = None
    generators: Generator | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ArgSpec:
        generators = data.get("generators")
        if isinstance(generators, Mapping):
            generators = Generator.from_dict(generators)
        elif generators is not None and not isinstance(generators, Generator):
            generators = Generator()
        template = data.get("template")
        if isinstance(template, (list, tuple)):
            # fig allows a list of templates, we only track the first one
            template = template[0] if template else None
        return cls(
            suggestions=tuple(SuggestionSpec.from_dict(s) for s in data.get("suggestions") or ()),
            template=template,
            generators=generators,
        )


@dataclass(frozen=True)
class CommandSpec:
    """Completable surface of a command (or of a subcommand)."""

    name: Name
    description: str = ""
    options: tuple[OptionSpec, ...] = ()
    subcommands: tuple[CommandSpec, ...] = ()
    args: ArgSpec | None = None

    @property
    def label(self) -> str | None:
        """Canonical label (first alias)."""
        return get_label(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CommandSpec:
        """Build a spec tree from its mapping form.

        Raises:
            SpecError: If a field has the wrong shape
        """
        if not isinstance(data, Mapping):
            msg = f"expected a mapping, got {type(data).__name__}"
            raise SpecError(msg)
        args = data.get("args")
        if isinstance(args, (list, tuple)):
            args = args[0] if args else None
        if args is not None and not isinstance(args, (Mapping, ArgSpec)):
            msg = f"malformed spec {data.get('name')!r}: args must be a mapping, got {type(args).__name__}"
            raise SpecError(msg)
        try:
            return cls(
                name=_as_name(data.get("name", "")),
                description=data.get("description") or "",
                options=tuple(OptionSpec.from_dict(o) for o in data.get("options") or ()),
                subcommands=tuple(cls.from_dict(s) for s in data.get("subcommands") or ()),
                args=ArgSpec.from_dict(args) if isinstance(args, Mapping) else args,
            )
        except (AttributeError, TypeError) as e:
            msg = f"malformed spec {data.get('name')!r}: {e}"
            raise SpecError(msg) from e


@dataclass(frozen=True)
class CompletionCandidate:
    """One completion offered to the host, with its replacement span."""

    label: str
    description: str = ""
    is_file_argument: bool = False
    is_folder_argument: bool = False
    replacement_start: int = 0
    replacement_length: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form used by the CLI."""
        return {
            "label": self.label,
            "description": self.description,
            "isFileArgument": self.is_file_argument,
            "isFolderArgument": self.is_folder_argument,
            "replacementIndex": self.replacement_start,
            "replacementLength": self.replacement_length,
        }
