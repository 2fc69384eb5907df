" generic fixtures "
import logging
from pathlib import Path

import pytest

from termsuggest.models import ArgSpec, CommandSpec, OptionSpec, SuggestionSpec, folders


def pytest_configure():
    "Runs once before all"
    from termsuggest.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture
def test_logger():
    "A logger for the code under test"
    from termsuggest.logging_setup import get_logger

    return get_logger("tests", logging.DEBUG)


@pytest.fixture
def git_spec():
    "A small git spec"
    return CommandSpec(
        name="git",
        description="the stupid content tracker",
        options=(OptionSpec(("--version", "-v"), "Show version"), OptionSpec("--help", "Show help")),
        subcommands=(
            CommandSpec("commit", "Record changes"),
            CommandSpec("checkout", "Switch branches"),
            CommandSpec("push", "Update remote refs"),
        ),
        args=ArgSpec(suggestions=(SuggestionSpec("gitk", "History browser"),)),
    )


@pytest.fixture
def cd_spec():
    "A spec with a folder-only argument"
    return CommandSpec(name="cd", description="Change directory", args=ArgSpec(generators=folders()))


SPEC_MODULES = {
    "git.py": """
from termsuggest.models import CommandSpec, OptionSpec

spec = CommandSpec("git", "the stupid content tracker", options=(OptionSpec("--version"),))
""",
    "npm.py": """
spec = {"name": ["npm", "pnpm"], "subcommands": [{"name": "install", "description": "Install"}]}
""",
    "broken.py": """
raise RuntimeError("this spec can't be imported")
""",
    "noexport.py": """
something = {"name": "noexport"}
""",
    "empty.py": """
spec = {"name": ""}
""",
    "_helpers.py": """
raise RuntimeError("private modules are never imported")
""",
}


@pytest.fixture
def spec_dir(tmp_path: Path) -> Path:
    "A spec root holding valid and invalid spec modules"
    root = tmp_path / "specs"
    nested = root / "nested"
    nested.mkdir(parents=True)
    for name, content in SPEC_MODULES.items():
        (root / name).write_text(content)
    (nested / "ls.py").write_text('spec = {"name": "ls", "description": "List directory contents"}\n')
    (nested / "README.md").write_text("not a spec\n")
    return root


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    "A directory standing for a PATH entry"
    path = tmp_path / "bin"
    path.mkdir()
    for name in ("git", "ls", "npm"):
        (path / name).write_text("#!/bin/sh\n")
        (path / name).chmod(0o755)
    (path / "subdir").mkdir()
    return path
