"""Finding roles that a playbook needs but the roles directory lacks."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from .dependency import get_all_dependencies, get_playbook_roles
from .scanning import list_roles


class RoleProcessor:
    """Runs the validation, writing progress messages when verbose."""

    def __init__(self, verbose: bool = False, stream: TextIO | None = None) -> None:
        self.verbose = verbose
        self._stream = stream

    def log(self, message: str) -> None:
        """Write *message* as one line when verbose; otherwise drop it."""
        if self.verbose:
            stream = self._stream if self._stream is not None else sys.stdout
            print(message, file=stream)

    def find_missing_roles(
        self, playbook_path: str | os.PathLike, roles_path: str | os.PathLike
    ) -> list[str]:
        """Return, sorted, the required roles absent from *roles_path*."""
        playbook_roles = get_playbook_roles(playbook_path, self.log)
        available = set(list_roles(roles_path, self.log))
        required = get_all_dependencies(playbook_roles, roles_path, self.log)

        missing = []
        for role in sorted(required):
            if role not in available:
                self.log(f"Role '{role}' is missing (not found in roles directory)")
                missing.append(role)
        return missing