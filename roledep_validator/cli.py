"""Command line entry point."""

from __future__ import annotations

import argparse
import os
import sys

from .processor import RoleProcessor

_USAGE = (
    "Usage: ansible-roledep-validator [-playbook PLAYBOOK_PATH] [-roles ROLES_PATH] [-verbose]\n"
    "   or: ansible-roledep-validator PLAYBOOK_PATH"
)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ansible-roledep-validator")
    parser.add_argument(
        "-playbook", "--playbook", default="",
        help="Path to the Ansible playbook YAML file",
    )
    parser.add_argument(
        "-roles", "--roles", default="roles",
        help="Path to the Ansible roles directory (default: roles)",
    )
    parser.add_argument(
        "-verbose", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument("args", nargs="*", help=argparse.SUPPRESS)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Validate a playbook's roles; return 1 if any are missing or on error."""
    options = _parser().parse_args(argv)
    playbook = options.playbook or (options.args[0] if options.args else "")

    if not playbook:
        print(_USAGE, file=sys.stderr)
        return 1

    processor = RoleProcessor(verbose=options.verbose)

    if options.verbose:
        print("\n=== Ansible Role Dependency Validator ===")
        print(f"Playbook: {playbook}")
        print(f"Roles directory: {options.roles}\n")
        print(f"Current working directory: {os.getcwd()}\n")

    try:
        missing = processor.find_missing_roles(playbook, options.roles)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if options.verbose:
        print("\n=== VALIDATION RESULTS ===")
        if missing:
            print("Missing roles:")
            for role in missing:
                print(f"- {role}")
        else:
            print("All roles are present.")
    else:
        for role in missing:
            print(role)

    return 1 if missing else 0


if __name__ == "__main__":
    raise SystemExit(main())