"""Tests for candidate resolution."""

import pytest

from termsuggest.models import ArgSpec, CommandSpec, OptionSpec, SuggestionSpec
from termsuggest.prefix import extract_prefix
from termsuggest.resolver import resolve


def _labels(candidates):
    return [c.label for c in candidates]


def test_command_name_completion():
    """Typing the start of a command offers it."""
    spec = CommandSpec(name="git", description="the stupid content tracker")
    prefix = extract_prefix("gi", 2)
    assert prefix == "gi"
    result = resolve(prefix, {"git"}, [spec], command_line="gi", cursor_position=2)
    assert len(result) == 1
    assert result[0].label == "git"
    assert result[0].description == "the stupid content tracker"
    assert result[0].replacement_start == 0
    assert result[0].replacement_length == 1


def test_empty_prefix_matches_everything(git_spec):
    prefix = extract_prefix("git ", 4)
    assert prefix == ""
    result = resolve(prefix, {"git"}, [git_spec], command_line="git ", cursor_position=4)
    assert _labels(result) == [
        "git",
        "--version",
        "--help",
        "git commit",
        "git checkout",
        "git push",
        "gitk",
    ]


def test_subcommand_with_parent_prefix(git_spec):
    result = resolve("git c", {"git"}, [git_spec])
    assert _labels(result) == ["git commit", "git checkout"]
    assert result[0].description == "Record changes"


def test_subcommands_need_the_parent_name(git_spec):
    """A bare subcommand prefix does not match the combined label."""
    assert "git commit" not in _labels(resolve("c", {"git"}, [git_spec]))


def test_options(git_spec):
    result = resolve("--", {"git"}, [git_spec])
    assert _labels(result) == ["--version", "--help"]
    assert result[0].description == "Show version"


def test_option_aliases_use_first_name():
    spec = CommandSpec("ls", options=(OptionSpec(("-a", "--all")),))
    assert _labels(resolve("--", {"ls"}, [spec])) == []
    assert _labels(resolve("-", {"ls"}, [spec])) == ["-a"]


def test_suggestion_description(git_spec):
    result = resolve("gitk", {"git"}, [git_spec])
    assert _labels(result) == ["gitk"]
    assert result[0].description == "Suggestion for git: History browser"


def test_unavailable_command_contributes_nothing(git_spec):
    assert resolve("", {"ls"}, [git_spec]) == []
    assert resolve("--", set(), [git_spec]) == []


def test_specs_without_label_are_skipped():
    spec = CommandSpec(name=(), options=(OptionSpec("--x"),))
    assert resolve("", {""}, [spec]) == []


def test_entries_without_label_are_skipped():
    spec = CommandSpec(
        "tool",
        options=(OptionSpec(""),),
        subcommands=(CommandSpec(()),),
        args=ArgSpec(suggestions=(SuggestionSpec(()),)),
    )
    assert _labels(resolve("", {"tool"}, [spec])) == ["tool"]


def test_command_args_used_for_hints(cd_spec):
    result = resolve("c", {"cd"}, [cd_spec])
    assert result[0].is_folder_argument is True
    assert result[0].is_file_argument is False


def test_options_carry_no_hints():
    spec = CommandSpec("ls", options=(OptionSpec("-l"),), args=ArgSpec(template="filepaths"))
    command, option = resolve("", {"ls"}, [spec])
    assert command.is_file_argument is True
    assert option.is_file_argument is False


def test_case_sensitive():
    spec = CommandSpec("Git")
    assert resolve("g", {"Git"}, [spec]) == []
    assert _labels(resolve("G", {"Git"}, [spec])) == ["Git"]


def test_order_follows_specs(git_spec, cd_spec):
    result = resolve("", {"git", "cd"}, [cd_spec, git_spec])
    assert _labels(result)[0] == "cd"
    assert _labels(result)[1] == "git"


def test_duplicates_are_kept_by_default():
    first = CommandSpec("git", "one")
    second = CommandSpec("git", "two")
    result = resolve("g", {"git"}, [first, second])
    assert [(c.label, c.description) for c in result] == [("git", "one"), ("git", "two")]


def test_dedupe_keeps_first():
    first = CommandSpec("git", "one", options=(OptionSpec("--help"),))
    second = CommandSpec("hg", "two", options=(OptionSpec("--help", "other"),))
    result = resolve("", {"git", "hg"}, [first, second], dedupe=True)
    assert _labels(result) == ["git", "--help", "hg"]


def test_resolve_is_idempotent(git_spec, cd_spec):
    args = ("", {"git", "cd"}, [git_spec, cd_spec])
    assert resolve(*args) == resolve(*args)


@pytest.mark.parametrize(
    ("command_line", "cursor"),
    [("g", 1), ("git ", 4), ("git --", 6), ("cd ", 3), ("git gi", 6), ("x c", 3)],
)
def test_labels_start_with_prefix_and_span_ends_at_cursor(git_spec, cd_spec, command_line, cursor):
    prefix = extract_prefix(command_line, cursor)
    assert prefix is not None
    result = resolve(prefix, {"git", "cd"}, [git_spec, cd_spec], command_line=command_line, cursor_position=cursor)
    for candidate in result:
        assert candidate.label.startswith(prefix)
        assert candidate.replacement_start + len(prefix) == cursor
        assert candidate.replacement_length == len(candidate.label) - len(prefix)


def test_default_cursor_is_end_of_prefix():
    result = resolve("gi", {"git"}, [CommandSpec("git")])
    assert result[0].replacement_start == 0
