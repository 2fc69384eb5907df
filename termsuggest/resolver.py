"""Candidate resolution: match a prefix against loaded command specs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .items import build_completion_item
from .models import CommandSpec, CompletionCandidate, get_label

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

__all__ = ["iter_candidates", "resolve"]


def _iter_spec_candidates(
    command_line: str,
    cursor_position: int,
    prefix: str,
    name: str,
    spec: CommandSpec,
) -> Iterator[CompletionCandidate]:
    """Yield the candidates of a single spec: command, options, subcommands, suggestions."""
    if name.startswith(prefix):
        yield build_completion_item(command_line, cursor_position, prefix, name, spec.description, spec.args)

    for option in spec.options:
        option_name = get_label(option)
        if option_name and option_name.startswith(prefix):
            yield build_completion_item(command_line, cursor_position, prefix, option_name, option.description)

    for subcommand in spec.subcommands:
        subcommand_name = get_label(subcommand)
        if not subcommand_name:
            continue
        full_name = f"{name} {subcommand_name}"
        if full_name.startswith(prefix):
            yield build_completion_item(command_line, cursor_position, prefix, full_name, subcommand.description)

    if spec.args is not None:
        for suggestion in spec.args.suggestions:
            suggestion_name = get_label(suggestion)
            if suggestion_name and suggestion_name.startswith(prefix):
                yield build_completion_item(
                    command_line,
                    cursor_position,
                    prefix,
                    suggestion_name,
                    f"Suggestion for {name}: {suggestion.description}",
                    spec.args,
                )


def iter_candidates(
    prefix: str,
    available_commands: set[str] | frozenset[str],
    specs: Iterable[CommandSpec],
    command_line: str = "",
    cursor_position: int | None = None,
) -> Iterator[CompletionCandidate]:
    """Lazily yield every candidate, in spec order.

    Specs whose command is not in `available_commands` are ignored.
    """
    if cursor_position is None:
        cursor_position = len(prefix)
    for spec in specs:
        name = get_label(spec)
        if not name or name not in available_commands:
            continue
        yield from _iter_spec_candidates(command_line, cursor_position, prefix, name, spec)


def resolve(
    prefix: str,
    available_commands: set[str] | frozenset[str],
    specs: Iterable[CommandSpec],
    command_line: str = "",
    cursor_position: int | None = None,
    dedupe: bool = False,
) -> list[CompletionCandidate]:
    """Resolve the completion candidates matching `prefix`.

    Args:
        prefix: The word being typed (case-sensitive prefix match)
        available_commands: Commands present on the system
        specs: Loaded command specs
        command_line: The full command line
        cursor_position: Cursor offset, defaults to the end of the prefix
        dedupe: Keep only the first candidate for each label

    Returns:
        The candidates, in deterministic order
    """
    candidates = iter_candidates(prefix, available_commands, specs, command_line, cursor_position)
    if not dedupe:
        return list(candidates)
    seen: set[str] = set()
    result = []
    for candidate in candidates:
        if candidate.label in seen:
            continue
        seen.add(candidate.label)
        result.append(candidate)
    return result
