"""Builtins that manage the environment, the working directory and exit."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from dogesh.errors import NOT_FOUND, command_error
from dogesh.state import ShellState
from dogesh.strings import join_assignment, parse_int

SETENV_USAGE = "USAGE: setenv [NAME] [WORDS]\n"


def _has_variable(env: Sequence[str], name: str) -> bool:
    for entry in env:
        key, sep, _ = entry.partition("=")
        if sep and key == name:
            return True
    return False


def _remove_variable(state: ShellState, name: str) -> None:
    """Drop the first ``NAME=`` entry and reload the search path."""
    prefix = f"{name}="
    env = list(state.env or [])
    index = next((pos for pos, entry in enumerate(env) if entry.startswith(prefix)), None)
    if index is not None:
        del env[index]
    state.env = env
    state.path = None
    state.set_path()


def env_command(state: ShellState, args: Sequence[str]) -> int:
    """Run ``env``: print every environment entry on its own line."""
    if state.env is None:
        sys.stderr.write(command_error(" ".join(args), NOT_FOUND))
        return 0
    sys.stdout.write("".join(f"{entry}\n" for entry in state.env))
    return 0


def setenv_command(state: ShellState, args: Sequence[str]) -> int:
    """Run ``setenv NAME VALUE``; the variable ends up last in the list."""
    if len(args) != 3:
        sys.stderr.write(SETENV_USAGE)
        return -1
    if state.env is not None and _has_variable(state.env, args[1]):
        _remove_variable(state, args[1])
    state.env = [*(state.env or []), join_assignment(args)]
    state.set_path()
    return 0


def unsetenv_command(state: ShellState, args: Sequence[str]) -> int:
    """Run ``unsetenv NAME``."""
    if len(args) != 2:
        return -1
    name = args[1]
    if state.env and any(entry.startswith(name) for entry in state.env):
        _remove_variable(state, name)
    return 0


def _cd_home(state: ShellState) -> None:
    home = state.getenv("HOME")
    if home is None:
        sys.stderr.write("dogesh: cd: Home not found\n")
        return
    try:
        os.chdir(home)
    except OSError as err:
        sys.stderr.write(f"dogesh: cd: {home}: {err.strerror}\n")


def _cd_previous(state: ShellState) -> None:
    previous = state.getenv("OLDPWD")
    if previous is None:
        sys.stderr.write("dogesh: cd: OLDPWD not set\n")
        return
    try:
        os.chdir(previous)
    except OSError as err:
        sys.stderr.write(f"dogesh: cd: {previous}: {err.strerror}\n")


def _record_directories(state: ShellState, old: str, new: str) -> None:
    if not state.env:
        return
    updated = []
    for entry in state.env:
        if entry.startswith("OLDPWD="):
            entry = f"OLDPWD={old}"
        if entry.startswith("PWD="):
            entry = f"PWD={new}"
        updated.append(entry)
    state.env = updated


def cd_command(state: ShellState, args: Sequence[str]) -> int:
    """Run ``cd [DIR|-]`` and update existing ``PWD``/``OLDPWD`` entries."""
    try:
        old = os.getcwd()
    except OSError:
        return -1
    target = args[1] if len(args) > 1 else None
    if target is None:
        _cd_home(state)
    elif target == "-":
        _cd_previous(state)
    else:
        try:
            os.chdir(target)
        except OSError as err:
            sys.stderr.write(f"dogesh: cd: {target}: {err.strerror}\n")
            return -1
    try:
        new = os.getcwd()
    except OSError:
        return -1
    _record_directories(state, old, new)
    return 0


def exit_command(state: ShellState, args: Sequence[str]) -> int:
    """Run ``exit [STATUS]``: ask the shell to stop with that status."""
    state.exit_flag = True
    state.exit_value = parse_int(args[1]) if len(args) > 1 else 0
    return 0