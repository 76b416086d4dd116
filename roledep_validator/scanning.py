"""Discovery of the roles present in a roles directory."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable
from pathlib import Path

Logger = Callable[[str], None]

_default_log: Logger = logging.getLogger(__name__).debug


def is_valid_symlink_to_dir(path: str | os.PathLike) -> tuple[bool, str | None]:
    """Tell whether *path* is a symlink whose target is an existing directory.

    Returns the verdict and the resolved target, or None as the target when
    *path* is not a readable symlink.
    """
    try:
        target = os.readlink(path)
    except OSError:
        return False, None
    if not os.path.isabs(target):
        target = os.path.normpath(os.path.join(os.path.dirname(path), target))
    try:
        info = os.stat(target)
    except OSError:
        return False, target
    return stat.S_ISDIR(info.st_mode), target


def _check_entry(entry_path: Path, log: Logger) -> bool:
    name = entry_path.name
    try:
        info = entry_path.lstat()
    except OSError as exc:
        log(f"Error reading entry {name}: {exc}")
        return False

    if stat.S_ISDIR(info.st_mode):
        log(f"Found role (directory): {name}")
        return True

    if stat.S_ISLNK(info.st_mode):
        is_dir, target = is_valid_symlink_to_dir(entry_path)
        if is_dir:
            log(f"Found role (symlink): {name} -> {target}")
            return True
        if target:
            log(f"Symlink {name} points to {target} which is not a directory")
        else:
            log(f"Found broken symlink: {name}")
    return False


def _log_directory_contents(entries: list[Path], log: Logger) -> None:
    log("Directory contents:")
    for entry in entries:
        try:
            info = entry.lstat()
        except OSError:
            log(f"- {entry.name} (error reading info)")
            continue
        if stat.S_ISLNK(info.st_mode):
            try:
                target = os.readlink(entry)
            except OSError:
                target = ""
            log(f"- {entry.name} (symlink -> {target})")
        else:
            is_dir = "true" if stat.S_ISDIR(info.st_mode) else "false"
            log(f"- {entry.name} (isDir: {is_dir})")


def list_roles(roles_path: str | os.PathLike, log: Logger | None = None) -> list[str]:
    """List the roles in *roles_path*: subdirectories and symlinks to directories.

    Raises OSError when the directory cannot be read and NotADirectoryError
    when *roles_path* is not a directory.
    """
    log = log or _default_log
    abs_path = Path(os.path.abspath(roles_path))
    log(f"Scanning roles directory: {abs_path}")

    if not abs_path.stat().st_mode or not abs_path.is_dir():
        raise NotADirectoryError("roles path is not a directory")

    entries = sorted(abs_path.iterdir(), key=lambda p: p.name)
    log(f"Found {len(entries)} entries in roles directory")

    roles = [entry.name for entry in entries if _check_entry(entry, log)]

    if not roles:
        log(f"WARNING: No roles found in directory {abs_path}")
        _log_directory_contents(entries, log)

    log(f"Found {len(roles)} roles in directory")
    return roles