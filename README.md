# roledep-validator

Checks an Ansible playbook against a roles directory. It finds every role
that the playbook's plays list, follows each role's dependencies as set in
`meta/main.yml`, and then reports the required roles that are not in the
roles directory.

A role counts as present when the roles directory holds a subdirectory of
that name, or a symbolic link of that name that points to a directory. Broken
links and links to plain files are not counted as roles.

Dependencies are followed transitively; circular dependencies are handled.
A role without a `meta/main.yml` has no dependencies. A `meta/main.yml` that
cannot be read or parsed is skipped with a warning in the verbose output.

In a playbook, each entry of a play's `roles` list may be a plain string or a
mapping with a `role` key. Other entries are skipped.

## Installation

```
pip install .
```

## Command line

```
ansible-roledep-validator [-playbook PLAYBOOK_PATH] [-roles ROLES_PATH] [-verbose]
ansible-roledep-validator PLAYBOOK_PATH
```

- `-playbook` (or `--playbook`): path to the playbook YAML file. You can also
  give the path as a positional argument.
- `-roles` (or `--roles`): path to the roles directory. Defaults to `roles`.
- `-verbose` (or `--verbose`): print what is read and found along the way,
  and then the results in a summary.

Without `-verbose` the command prints only the names of the missing roles,
one per line and in sorted order. It exits with status 1 when any role is
missing, when no playbook is given, or when the playbook or roles directory
cannot be read or parsed (the error goes to standard error), and with 0 when
every role is present.

```
$ ansible-roledep-validator -roles ./roles site.yml
common
nginx
$ echo $?
1
```

## Library use

```python
from roledep_validator.processor import RoleProcessor

processor = RoleProcessor()
missing = processor.find_missing_roles("site.yml", "roles")
for role in missing:
    print(role)
```

`RoleProcessor(verbose=True)` writes its progress messages to standard
output, or to the text stream given as `stream`. `find_missing_roles` raises
`OSError` when a file or directory cannot be read and `ValueError` when the
playbook YAML is not a list of plays.

The individual steps are available too:

- `roledep_validator.dependency`: `get_playbook_roles`, `get_dependencies`,
  `get_all_dependencies`, `extract_role`.
- `roledep_validator.scanning`: `list_roles`, `is_valid_symlink_to_dir`.
- `roledep_validator.models`: `parse_playbook`, `parse_meta`, and the
  `Play` and `MetaMain` dataclasses.

Each step takes an optional `log` callable that receives one message string
at a time; without one, messages go to the `logging` module at debug level.

## Tests

```
pip install .[test]
pytest
```