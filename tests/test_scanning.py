import os

import pytest

from roledep_validator.scanning import is_valid_symlink_to_dir, list_roles


@pytest.fixture
def link_layout(tmp_path):
    real = tmp_path / "real-roles"
    real.mkdir()
    valid_role = real / "valid-role"
    valid_role.mkdir()
    non_dir = real / "non-dir-role"
    non_dir.touch()

    links = tmp_path / "roles"
    links.mkdir()
    os.symlink(valid_role, links / "valid-symlink")
    os.symlink(real / "nonexistent", links / "broken-symlink")
    os.symlink(non_dir, links / "non-dir-symlink")
    return links


def test_only_valid_symlink_is_a_role(link_layout):
    assert list_roles(link_layout) == ["valid-symlink"]


def test_is_valid_symlink_to_dir_cases(link_layout):
    assert is_valid_symlink_to_dir(link_layout / "valid-symlink")[0] is True
    assert is_valid_symlink_to_dir(link_layout / "broken-symlink")[0] is False
    assert is_valid_symlink_to_dir(link_layout / "non-dir-symlink")[0] is False


def test_broken_symlink_reports_target(link_layout, tmp_path):
    valid, target = is_valid_symlink_to_dir(link_layout / "broken-symlink")
    assert valid is False
    assert target == str(tmp_path / "real-roles" / "nonexistent")


def test_not_a_symlink_has_no_target(tmp_path):
    (tmp_path / "plain").mkdir()
    assert is_valid_symlink_to_dir(tmp_path / "plain") == (False, None)


def test_relative_symlink_resolved_against_link_directory(tmp_path):
    (tmp_path / "target").mkdir()
    roles = tmp_path / "roles"
    roles.mkdir()
    os.symlink(os.path.join("..", "target"), roles / "rel")
    valid, target = is_valid_symlink_to_dir(roles / "rel")
    assert valid is True
    assert target == str(tmp_path / "target")


def test_directories_listed_files_ignored(tmp_path):
    (tmp_path / "zeta").mkdir()
    (tmp_path / "alpha").mkdir()
    (tmp_path / "README.md").write_text("notes")
    assert list_roles(tmp_path) == ["alpha", "zeta"]


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_roles(tmp_path / "absent")


def test_file_instead_of_directory_raises(tmp_path):
    path = tmp_path / "file"
    path.write_text("x")
    with pytest.raises(NotADirectoryError):
        list_roles(path)


def test_empty_directory_logs_warning(tmp_path):
    (tmp_path / "only-a-file").write_text("x")
    messages = []
    assert list_roles(tmp_path, messages.append) == []
    assert any(m.startswith("WARNING: No roles found") for m in messages)
    assert "- only-a-file (isDir: false)" in messages