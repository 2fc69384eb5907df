"""Async filesystem helpers built on aiofiles."""

__all__ = ["aiisdir", "find_files", "list_files"]

import os

import aiofiles.os

aiisdir = aiofiles.os.path.isdir


async def list_files(path: str) -> list[str]:
    """Return the names of the regular files (symlinks followed) in a directory.

    Raises:
        OSError: If the directory can't be read
    """
    names = []
    with await aiofiles.os.scandir(path) as entries:
        for entry in entries:
            try:
                if entry.is_file():
                    names.append(entry.name)
            except OSError:
                # dangling symlink or vanished entry
                continue
    return names


async def find_files(path: str, suffix: str) -> list[str]:
    """Recursively collect the absolute paths of files ending with `suffix`.

    Results are sorted so callers get a stable order. Symlinks to
    directories are not descended into.

    Raises:
        OSError: If `path` itself can't be read
    """
    results: list[str] = []
    subdirs: list[str] = []
    with await aiofiles.os.scandir(path) as entries:
        for entry in entries:
            full_path = os.path.abspath(entry.path)
            if entry.is_dir(follow_symlinks=False):
                subdirs.append(full_path)
            elif entry.is_file() and entry.name.endswith(suffix):
                results.append(full_path)
    results.sort()
    for subdir in sorted(subdirs):
        results.extend(await find_files(subdir, suffix))
    return results
