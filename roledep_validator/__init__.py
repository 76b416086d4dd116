"""Find Ansible roles required by a playbook that are missing from a roles directory."""

__version__ = "0.1.0"

__all__ = ["__version__"]