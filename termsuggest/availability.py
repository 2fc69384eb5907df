"""Discovery of the commands available to the user.

Two sources are merged: executables found in the search path (scanned on
every request) and shell builtins (probed once per process).
"""

from __future__ import annotations

import asyncio
import contextlib
import os
import shutil

from .aioops import aiisdir, list_files
from .constants import BUILTIN_PROBE_TIMEOUT, SUPPORTED_SHELLS
from .logging_setup import get_logger

__all__ = [
    "get_builtin_commands",
    "get_commands_in_path",
    "init_builtin_commands",
    "reset_builtin_commands",
]

# shell -> arguments printing one builtin per line
BUILTIN_PROBES: dict[str, tuple[str, ...]] = {
    "bash": ("-c", "compgen -b"),
    "zsh": ("-c", "print -l ${(k)builtins}"),
    "fish": ("-c", "builtin -n"),
}


class _BuiltinState:
    """Process-wide builtin commands, populated once."""

    commands: tuple[str, ...] | None = None
    initialized: bool = False
    lock: asyncio.Lock | None = None


_builtin_state = _BuiltinState()


async def _scan_directory(path: str) -> list[str]:
    log = get_logger("availability")
    try:
        if not await aiisdir(path):
            return []
        return await list_files(path)
    except OSError as e:
        log.debug("Skipping unreadable directory %s: %s", path, e)
        return []


async def get_commands_in_path(path_env: str | None = None) -> set[str]:
    """Return the names of the files found in the search path.

    Directories are read concurrently, unreadable ones are ignored.

    Args:
        path_env: Search path, defaults to the PATH environment variable

    Returns:
        The set of executable names
    """
    if path_env is None:
        path_env = os.environ.get("PATH", "")
    directories = list(dict.fromkeys(p for p in path_env.split(os.pathsep) if p))
    executables: set[str] = set()
    for names in await asyncio.gather(*(_scan_directory(d) for d in directories)):
        executables.update(names)
    return executables


async def _probe_shell(shell: str) -> list[str]:
    """Return the builtins reported by `shell`, or an empty list."""
    log = get_logger("availability")
    executable = shutil.which(shell)
    if executable is None or shell not in BUILTIN_PROBES:
        return []
    proc = await asyncio.create_subprocess_exec(
        executable,
        *BUILTIN_PROBES[shell],
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.DEVNULL,
    )
    try:
        stdout, _ = await asyncio.wait_for(proc.communicate(), timeout=BUILTIN_PROBE_TIMEOUT)
    except TimeoutError:
        log.warning("Timeout probing %s builtins", shell)
        with contextlib.suppress(ProcessLookupError):
            proc.kill()
        await proc.wait()
        return []
    if proc.returncode != 0:
        log.debug("%s exited with code %s while listing builtins", shell, proc.returncode)
        return []
    return [cmd.strip() for cmd in stdout.decode("utf-8", errors="replace").splitlines() if cmd.strip()]


async def init_builtin_commands(shells: tuple[str, ...] = SUPPORTED_SHELLS) -> tuple[str, ...] | None:
    """Populate the builtin commands cache, once per process.

    Shells are probed in order, the first non-empty answer wins.

    Returns:
        The builtin commands, or None if no shell could provide them
    """
    if _builtin_state.lock is None:
        _builtin_state.lock = asyncio.Lock()
    async with _builtin_state.lock:
        if _builtin_state.initialized:
            return _builtin_state.commands
        log = get_logger("availability")
        commands: tuple[str, ...] | None = None
        for shell in shells:
            try:
                result = await _probe_shell(shell)
            except OSError as e:
                log.warning("Error fetching builtin commands from %s: %s", shell, e)
                continue
            if result:
                log.debug("Found %d builtin commands using %s", len(result), shell)
                commands = tuple(result)
                break
        _builtin_state.commands = commands
        _builtin_state.initialized = True
        return commands


def get_builtin_commands() -> tuple[str, ...] | None:
    """Return the cached builtin commands (None if unknown)."""
    return _builtin_state.commands


def reset_builtin_commands() -> None:
    """Forget the cached builtin commands."""
    _builtin_state.commands = None
    _builtin_state.initialized = False
    _builtin_state.lock = None
