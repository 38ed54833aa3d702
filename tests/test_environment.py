import os

import pytest

from dogesh.environment import (
    SETENV_USAGE,
    cd_command,
    env_command,
    exit_command,
    setenv_command,
    unsetenv_command,
)
from dogesh.state import ShellState


def _state(*entries):
    return ShellState.from_environ(list(entries))


def test_env_prints_each_entry(capsys):
    entries = ["A=1", "B=two"]
    state = _state(*entries)
    assert env_command(state, ["env"]) == 0
    assert capsys.readouterr().out.splitlines() == entries


def test_env_without_environment_reports_not_found(capsys):
    state = ShellState()
    assert env_command(state, ["env"]) == 0
    assert "Command 'env' not found." in capsys.readouterr().err


def test_setenv_usage_error(capsys):
    state = _state("A=1")
    assert setenv_command(state, ["setenv", "A"]) == -1
    assert capsys.readouterr().err == SETENV_USAGE
    assert state.env == ["A=1"]


def test_setenv_adds_variable():
    state = _state("A=1")
    assert setenv_command(state, ["setenv", "FOO", "bar"]) == 0
    assert state.getenv("FOO") == "bar"
    assert state.env[0] == "A=1"


def test_setenv_replaces_and_moves_to_end():
    state = _state("FOO=old", "B=2")
    setenv_command(state, ["setenv", "FOO", "new"])
    assert state.getenv("FOO") == "new"
    assert sum(entry.startswith("FOO=") for entry in state.env) == 1
    assert state.env[-1].startswith("FOO=")


def test_setenv_on_empty_state():
    state = ShellState()
    setenv_command(state, ["setenv", "X", "y"])
    assert state.getenv("X") == "y"
    assert len(state.env) == 1


def test_setenv_path_reloads_search_path():
    state = _state("A=1")
    setenv_command(state, ["setenv", "PATH", "/a:/b"])
    assert state.path == ["/a", "/b"]


def test_unsetenv_removes_variable():
    state = _state("A=1", "B=2", "C=3")
    assert unsetenv_command(state, ["unsetenv", "B"]) == 0
    assert state.getenv("B") is None
    assert state.getenv("A") == "1"
    assert state.getenv("C") == "3"


def test_unsetenv_wrong_arguments():
    state = _state("A=1")
    assert unsetenv_command(state, ["unsetenv"]) == -1
    assert unsetenv_command(state, ["unsetenv", "A", "B"]) == -1
    assert state.getenv("A") == "1"


def test_unsetenv_unknown_leaves_env():
    state = _state("A=1")
    assert unsetenv_command(state, ["unsetenv", "Z"]) == 0
    assert state.env == ["A=1"]


def test_unsetenv_path_clears_search_path():
    state = _state("PATH=/bin:/usr/bin", "A=1")
    assert state.path
    unsetenv_command(state, ["unsetenv", "PATH"])
    assert state.path is None
    assert state.getenv("PATH") is None


def test_cd_changes_directory_and_records(tmp_path, monkeypatch):
    start = tmp_path / "start"
    target = tmp_path / "target"
    start.mkdir()
    target.mkdir()
    monkeypatch.chdir(start)
    state = _state("PWD=x", "OLDPWD=y")
    assert cd_command(state, ["cd", str(target)]) == 0
    assert os.getcwd() == str(target.resolve())
    assert state.getenv("PWD") == os.getcwd()
    assert state.getenv("OLDPWD") == str(start.resolve())


def test_cd_missing_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    state = _state("PWD=x")
    missing = str(tmp_path / "missing")
    assert cd_command(state, ["cd", missing]) == -1
    assert capsys.readouterr().err.startswith(f"dogesh: cd: {missing}: ")
    assert state.getenv("PWD") == "x"


def test_cd_without_argument_goes_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.chdir(tmp_path)
    state = _state(f"HOME={home}")
    assert cd_command(state, ["cd"]) == 0
    assert os.getcwd() == str(home.resolve())


def test_cd_without_home(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    state = _state("A=1")
    assert cd_command(state, ["cd"]) == 0
    assert capsys.readouterr().err == "dogesh: cd: Home not found\n"
    assert os.getcwd() == str(tmp_path.resolve())


def test_cd_minus_returns_to_previous(tmp_path, monkeypatch):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    monkeypatch.chdir(first)
    state = _state("PWD=x", "OLDPWD=y")
    cd_command(state, ["cd", str(second)])
    cd_command(state, ["cd", "-"])
    assert os.getcwd() == str(first.resolve())
    assert state.getenv("OLDPWD") == str(second.resolve())


def test_cd_minus_without_oldpwd(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    state = _state("A=1")
    cd_command(state, ["cd", "-"])
    assert capsys.readouterr().err == "dogesh: cd: OLDPWD not set\n"


def test_exit_without_status():
    state = ShellState()
    assert exit_command(state, ["exit"]) == 0
    assert state.exit_flag is True
    assert state.exit_value == 0


@pytest.mark.parametrize("text, value", [("42", 42), ("-3", -3), ("7", 7)])
def test_exit_with_status(text, value):
    state = ShellState()
    exit_command(state, ["exit", text])
    assert state.exit_flag is True
    assert state.exit_value == value