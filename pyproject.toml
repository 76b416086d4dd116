[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roledep-validator"
version = "0.1.0"
description = "Find Ansible roles that a playbook needs, directly or through dependencies, but that are missing from the roles directory"
requires-python = ">=3.10"
keywords = ["ansible", "roles", "dependencies", "playbook", "validation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Quality Assurance",
    "Topic :: System :: Systems Administration",
]
dependencies = [
    "pyyaml>=6.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
ansible-roledep-validator = "roledep_validator.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["roledep_validator"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
