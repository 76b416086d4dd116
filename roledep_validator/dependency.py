"""Reading the roles a playbook needs and resolving their dependencies."""

from __future__ import annotations

import logging
import os
from collections import deque
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from .models import parse_meta, parse_playbook

Logger = Callable[[str], None]

_default_log: Logger = logging.getLogger(__name__).debug


def _fmt(items: Iterable[str]) -> str:
    return "[" + " ".join(items) + "]"


def get_dependencies(
    role_name: str, roles_path: str | os.PathLike, log: Logger | None = None
) -> list[str]:
    """Return the roles listed as dependencies in the role's ``meta/main.yml``.

    A role without that file has no dependencies. Other read or parse
    problems are raised.
    """
    log = log or _default_log
    meta_file = Path(roles_path, role_name, "meta", "main.yml")
    try:
        data = meta_file.read_bytes()
    except FileNotFoundError:
        return []
    deps = parse_meta(data).dependencies
    if deps:
        log(f"Found dependencies for role {role_name}: {_fmt(deps)}")
    return deps


def get_all_dependencies(
    roles: Iterable[str], roles_path: str | os.PathLike, log: Logger | None = None
) -> set[str]:
    """Return *roles* together with every role they depend on, transitively."""
    log = log or _default_log
    roles = list(roles)
    log(f"Finding all dependencies for roles: {_fmt(roles)}")

    found = set(roles)
    pending = deque(roles)
    while pending:
        role = pending.popleft()
        try:
            deps = get_dependencies(role, roles_path, log)
        except (OSError, ValueError) as exc:
            log(f"Warning: error getting dependencies for role {role}: {exc}")
            continue
        for dep in deps:
            if dep not in found:
                log(f"Adding dependency: {dep}")
                found.add(dep)
                pending.append(dep)

    log(f"All required roles (including dependencies): {_fmt(sorted(found))}")
    return found


def extract_role(value: Any, log: Logger | None = None) -> str | None:
    """Return the role name of one entry of a play's ``roles`` list, if any."""
    log = log or _default_log
    if isinstance(value, str):
        log(f"Found role (string): {value}")
        return value
    if isinstance(value, dict):
        name = value.get("role")
        if isinstance(name, str):
            log(f"Found role (map): {name}")
            return name
        return None
    log(f"Warning: unknown role format: {type(value).__name__}")
    return None


def get_playbook_roles(
    playbook_path: str | os.PathLike, log: Logger | None = None
) -> list[str]:
    """Return the roles named by the plays of a playbook, in order.

    Raises OSError when the file cannot be read, IsADirectoryError when the
    path is a directory and ValueError when the YAML is not a playbook.
    """
    log = log or _default_log
    abs_path = Path(os.path.abspath(playbook_path))
    log(f"Reading playbook: {abs_path}")

    if abs_path.is_dir():
        raise IsADirectoryError("playbook path is a directory, not a file")
    data = abs_path.read_bytes()

    try:
        plays = parse_playbook(data)
    except ValueError as exc:
        raise ValueError(f"error parsing playbook YAML: {exc}") from exc

    log(f"Found {len(plays)} plays in playbook")

    roles = []
    for number, play in enumerate(plays, start=1):
        log(f"Processing play {number}")
        if play.roles is None:
            continue
        if not isinstance(play.roles, list):
            log(f"Warning: roles section has unexpected format in play {number}")
            continue
        for item in play.roles:
            name = extract_role(item, log)
            if name is not None:
                roles.append(name)

    log(f"Extracted {len(roles)} roles from playbook: {_fmt(roles)}")
    return roles