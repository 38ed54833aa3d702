"""Error and diagnostic messages printed by the shell."""

from __future__ import annotations

import errno
import os
import signal

NOT_FOUND = 1
NOT_A_DIRECTORY = 2
SUGGEST_PACKAGE = 3
SYNTAX_ERROR = 4

PARENTHESIS = 1
QUOTE = 2

_SIGNAL_NAMES = (
    ("SIGHUP", "Hangup.\n"),
    ("SIGQUIT", "Quit.\n"),
    ("SIGILL", "Illegal instruction.\n"),
    ("SIGTRAP", "Trace/breakpoint trap.\n"),
    ("SIGABRT", "Aborted.\n"),
    ("SIGBUS", "Bus error.\n"),
    ("SIGFPE", "Floating point exception\n"),
    ("SIGKILL", "Killed.\n"),
    ("SIGUSR1", "User defined signal 1.\n"),
    ("SIGSEGV", "Segmentation fault (1.5)\n"),
    ("SIGUSR2", "User defined signal 2.\n"),
    ("SIGPIPE", "Broken pipe.\n"),
    ("SIGALRM", "Alarm clock.\n"),
    ("SIGTERM", "Terminated.\n"),
    ("SIGSTKFLT", "Stack fault.\n"),
    ("SIGXCPU", "CPU time limit exceeded.\n"),
    ("SIGXFSZ", "File time limit exceeded.\n"),
    ("SIGVTALRM", "Virtual timer expired.\n"),
    ("SIGPROF", "Profiling timer expired.\n"),
    ("SIGPOLL", "I/O possible.\n"),
    ("SIGPWR", "Power failure.\n"),
    ("SIGSYS", "Bad argument to routine.\n"),
)


def _signal_table() -> dict[int, str]:
    table: dict[int, str] = {}
    for name, message in _SIGNAL_NAMES:
        number = getattr(signal, name, None)
        if number is not None:
            table.setdefault(int(number), message)
    return table


_SIGNAL_MESSAGES = _signal_table()

_COMMAND_MESSAGES = {
    NOT_FOUND: "Command '{0}' not found.\n",
    NOT_A_DIRECTORY: "'{0}' not a directory.\n",
    SUGGEST_PACKAGE: (
        "If '{0}' is not a typo you can use command-not-found to lookup the "
        "package that contains it, like this:\n    cnf {0}\n"
    ),
    SYNTAX_ERROR: "dogesh: syntax error near unexpected token `{0}'\n",
}

_MISMATCH_MESSAGES = {
    PARENTHESIS: "Mismatch parenthesis\n",
    QUOTE: "Mismatch quote or double quote\n",
}


def signal_message(signum: int) -> str | None:
    """Return the report for a child killed by ``signum``, if it has one."""
    return _SIGNAL_MESSAGES.get(int(signum))


def command_error(name: str, kind: int) -> str:
    """Format the diagnostic of the given ``kind`` about ``name``.

    An unknown kind yields an empty string.
    """
    template = _COMMAND_MESSAGES.get(kind)
    return template.format(name) if template else ""


def mismatch_message(kind: int) -> str:
    """Return the message for an unbalanced parenthesis or quote."""
    return _MISMATCH_MESSAGES.get(kind, "")


def check_access(path: str, name: str) -> None:
    """Make sure ``path`` can be run as the command typed as ``name``.

    Raises FileNotFoundError, PermissionError or IsADirectoryError with the
    shell's message when it cannot.
    """
    exists = os.access(path, os.F_OK)
    if not exists and not name.startswith("./") and not name.startswith("/"):
        raise FileNotFoundError(command_error(name, SUGGEST_PACKAGE).rstrip("\n"))
    if exists and os.access(path, os.X_OK):
        if os.path.isdir(path):
            raise IsADirectoryError(f"dogesh: {name}: Is a directory")
        return
    if not exists:
        raise FileNotFoundError(f"dogesh: {name}: {os.strerror(errno.ENOENT)}")
    raise PermissionError(f"dogesh: {name}: {os.strerror(errno.EACCES)}")