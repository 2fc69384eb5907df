"""Build completion candidates with their replacement span."""

from __future__ import annotations

from .constants import FILEPATHS_TEMPLATE
from .models import ArgSpec, CompletionCandidate, FolderMode, GeneratorKind

__all__ = ["build_completion_item", "only_show_folders", "should_show_files"]


def should_show_files(arg: ArgSpec | None) -> bool:
    """Tell if the argument expects file paths."""
    return arg is not None and arg.template == FILEPATHS_TEMPLATE


def only_show_folders(arg: ArgSpec | None) -> bool:
    """Tell if the argument expects directories only.

    Only a filepaths generator restricted to folders qualifies, the template
    is not looked at.
    """
    if arg is None:
        return False
    generator = arg.generators
    return generator is not None and generator.kind is GeneratorKind.FILEPATHS and generator.show_folders is FolderMode.ONLY


def build_completion_item(
    command_line: str,  # noqa: ARG001
    cursor_position: int,
    prefix: str,
    label: str,
    description: str | None = None,
    arg: ArgSpec | None = None,
) -> CompletionCandidate:
    """Create a candidate replacing the typed prefix with `label`.

    Args:
        command_line: The full command line
        cursor_position: Cursor offset in the command line
        prefix: The word typed before the cursor
        label: The completion text
        description: Optional detail text
        arg: Argument spec used for file/folder hinting

    Returns:
        The completion candidate
    """
    folder_argument = only_show_folders(arg)
    return CompletionCandidate(
        label=label,
        description=description or "",
        is_file_argument=should_show_files(arg) and not folder_argument,
        is_folder_argument=folder_argument,
        replacement_start=cursor_position - len(prefix),
        replacement_length=len(label) - len(prefix),
    )
