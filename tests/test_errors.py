import os
import signal
import stat

import pytest

from dogesh.errors import (
    NOT_A_DIRECTORY,
    NOT_FOUND,
    PARENTHESIS,
    QUOTE,
    SUGGEST_PACKAGE,
    SYNTAX_ERROR,
    check_access,
    command_error,
    mismatch_message,
    signal_message,
)


def test_signal_messages_from_table():
    assert signal_message(signal.SIGKILL) == "Killed.\n"
    assert signal_message(signal.SIGSEGV) == "Segmentation fault (1.5)\n"
    assert signal_message(signal.SIGTERM) == "Terminated.\n"
    assert signal_message(signal.SIGPIPE) == "Broken pipe.\n"


def test_signal_without_message():
    assert signal_message(0) is None
    assert signal_message(signal.SIGINT) is None


def test_command_error_messages():
    assert command_error("ls", NOT_FOUND) == "Command 'ls' not found.\n"
    assert command_error("dir", NOT_A_DIRECTORY) == "'dir' not a directory.\n"
    assert command_error(";", SYNTAX_ERROR) == (
        "dogesh: syntax error near unexpected token `;'\n"
    )
    suggestion = command_error("foo", SUGGEST_PACKAGE)
    assert suggestion.startswith("If 'foo' is not a typo")
    assert suggestion.endswith("    cnf foo\n")


def test_command_error_unknown_kind_is_empty():
    assert command_error("x", 99) == ""


def test_mismatch_messages():
    assert mismatch_message(PARENTHESIS) == "Mismatch parenthesis\n"
    assert mismatch_message(QUOTE) == "Mismatch quote or double quote\n"
    assert mismatch_message(7) == ""


def test_check_access_accepts_executable(tmp_path):
    program = tmp_path / "prog"
    program.write_text("#!/bin/sh\n")
    program.chmod(stat.S_IRWXU)
    assert check_access(str(program), str(program)) is None


def test_check_access_rejects_directory(tmp_path):
    with pytest.raises(IsADirectoryError, match="Is a directory"):
        check_access(str(tmp_path), "somedir")


def test_check_access_suggests_package_for_bare_name(tmp_path):
    missing = tmp_path / "nosuchcmd"
    with pytest.raises(FileNotFoundError, match="cnf nosuchcmd"):
        check_access(str(missing), "nosuchcmd")


def test_check_access_missing_relative_path(tmp_path):
    missing = tmp_path / "gone"
    with pytest.raises(FileNotFoundError) as info:
        check_access(str(missing), "./gone")
    assert str(info.value) == "dogesh: ./gone: " + os.strerror(2)


def test_check_access_not_executable(tmp_path):
    data = tmp_path / "data"
    data.write_text("x")
    data.chmod(stat.S_IRUSR | stat.S_IWUSR)
    with pytest.raises(PermissionError, match="dogesh: /data"):
        check_access(str(data), "/data")