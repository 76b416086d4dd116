import pytest

from roledep_validator.cli import main


@pytest.fixture
def project(tmp_path):
    roles = tmp_path / "roles"
    (roles / "app" / "meta").mkdir(parents=True)
    (roles / "app" / "meta" / "main.yml").write_text("dependencies:\n  - role: base\n")
    playbook = tmp_path / "site.yml"
    playbook.write_text("- hosts: all\n  roles:\n    - app\n    - extra\n")
    return playbook, roles


def test_missing_roles_printed_one_per_line(project, capsys):
    playbook, roles = project
    assert main(["-playbook", str(playbook), "-roles", str(roles)]) == 1
    assert capsys.readouterr().out == "base\nextra\n"


def test_positional_playbook(project, capsys):
    playbook, roles = project
    assert main(["--roles", str(roles), str(playbook)]) == 1
    assert capsys.readouterr().out.splitlines() == ["base", "extra"]


def test_all_present_exit_zero(project, capsys):
    playbook, roles = project
    (roles / "base").mkdir()
    (roles / "extra").mkdir()
    assert main(["-playbook", str(playbook), "-roles", str(roles)]) == 0
    assert capsys.readouterr().out == ""


def test_verbose_reports_all_present(project, capsys):
    playbook, roles = project
    (roles / "base").mkdir()
    (roles / "extra").mkdir()
    assert main(["-verbose", "-playbook", str(playbook), "-roles", str(roles)]) == 0
    out = capsys.readouterr().out
    assert "=== VALIDATION RESULTS ===" in out
    assert "All roles are present." in out


def test_verbose_lists_missing(project, capsys):
    playbook, roles = project
    assert main(["-verbose", str(playbook), "-roles", str(roles)]) == 1
    out = capsys.readouterr().out
    assert "Missing roles:\n- base\n- extra\n" in out


def test_no_playbook_prints_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err.startswith("Usage: ansible-roledep-validator")


def test_missing_playbook_is_an_error(tmp_path, capsys):
    (tmp_path / "roles").mkdir()
    code = main([str(tmp_path / "none.yml"), "-roles", str(tmp_path / "roles")])
    assert code == 1
    assert capsys.readouterr().err.startswith("Error: ")