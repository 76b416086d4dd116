"""Data read from playbooks and from role metadata files."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml


@dataclass
class Play:
    """A single play of a playbook; only its ``roles`` section matters here."""

    roles: Any = None


@dataclass
class MetaMain:
    """The parts of a role's ``meta/main.yml`` that describe dependencies."""

    dependencies: list[str] = field(default_factory=list)


def _load(text: str | bytes) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(str(exc)) from exc


def _scalar_to_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        raise ValueError(f"cannot use {type(value).__name__} as a role name")
    return str(value)


def parse_playbook(text: str | bytes) -> list[Play]:
    """Parse playbook YAML into a list of plays.

    Raises ValueError when the document is not a list of mappings.
    """
    data = _load(text)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError("a playbook must be a list of plays")
    plays = []
    for entry in data:
        if entry is None:
            plays.append(Play())
        elif isinstance(entry, dict):
            plays.append(Play(roles=entry.get("roles")))
        else:
            raise ValueError(f"a play must be a mapping, not {type(entry).__name__}")
    return plays


def parse_meta(text: str | bytes) -> MetaMain:
    """Parse a role's ``meta/main.yml`` and collect its dependency role names.

    Raises ValueError when the document does not have the expected shape.
    """
    data = _load(text)
    if data is None:
        return MetaMain()
    if not isinstance(data, dict):
        raise ValueError("role metadata must be a mapping")
    raw = data.get("dependencies")
    if raw is None:
        return MetaMain()
    if not isinstance(raw, list):
        raise ValueError("dependencies must be a list")
    names = []
    for item in raw:
        if item is None:
            names.append("")
        elif isinstance(item, dict):
            names.append(_scalar_to_str(item.get("role")))
        else:
            raise ValueError(
                f"a dependency must be a mapping, not {type(item).__name__}"
            )
    return MetaMain(dependencies=names)