"""The echo builtin."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from dogesh.strings import parse_int_base

_SIMPLE_ESCAPES = {
    "\\": "\\",
    "a": "\a",
    "b": "\b",
    "e": "\x1b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}

_ESCAPE_PATTERN = re.compile(
    r"\\(?:(?P<stop>c)|x(?P<hex>.{0,2})|0(?P<oct>.{0,3})|(?P<other>.)|$)|[^\\]+",
    re.DOTALL,
)

ECHO_VERSION = "echo (sm23dubronx) 1.0\n"

ECHO_HELP = (
    "Usage: /usr/bin/echo [SHORT-OPTION]... [STRING]...\n"
    "or:  /usr/bin/echo LONG-OPTION\n"
    "Echo the STRING(s) to standard output.\n\n"
    "\t-n\t\tdo not output the trailing newline\n"
    "\t-e\t\tenable interpretation of backslash escapes\n"
    "\t-E\t\tdisable interpretation of backslash escapes(auto)\n\n"
    "If -e is in effect, the following sequences are recognized:\n"
    "\t\\\\\tbackslash\n"
    "\t\\a\talert(BEL)\n"
    "\t\\b\tbackspace\n"
    "\t\\c\tproduce no further output\n"
    "\t\\e\tescape\n"
    "\t\\f\tform feed\n"
    "\t\\n\tnew line\n"
    "\t\\r\tcarriage return\n"
    "\t\\t\thorizontal tab\n"
    "\t\\v\tvertical tab\n"
    "\t\\0NNN\tbyte with octal value NNN (1 to 3 digits)\n"
    "\t\\xHH\tbyte with hexadecimal value HH (1 to 2 digits)\n"
    "NOTE: your shell may have its own version of echo, which usually"
    " supersedes the version described here.  Please refer to your "
    "shell's documentation for details about the options it supports.\n"
)


def _is_option(arg: str) -> bool:
    return arg.startswith("-") and all(char in "eEn" for char in arg[1:])


def parse_echo_options(args: Sequence[str]) -> tuple[bool, bool, int]:
    """Read leading option words of ``echo ARGS...``.

    Returns ``(interpret, newline, start)``: whether escapes are
    interpreted, whether a trailing newline is printed, and the index of
    the first word to print.
    """
    interpret = False
    newline = True
    start = 1
    for arg in args[1:]:
        if not _is_option(arg):
            break
        for char in arg[1:]:
            if char == "e":
                interpret = True
            elif char == "E":
                interpret = False
            else:
                newline = False
        start += 1
    return interpret, newline, start


def _byte(value: int) -> str:
    return chr(value % 256)


def interpret_escapes(text: str) -> tuple[str, bool]:
    """Expand backslash escapes in ``text``.

    Returns the expanded text and whether a ``\\c`` asked to stop all
    further output; the text then ends just before it.
    """
    pieces: list[str] = []
    for match in _ESCAPE_PATTERN.finditer(text):
        piece = match.group(0)
        if not piece.startswith("\\"):
            pieces.append(piece)
        elif match.group("stop"):
            return "".join(pieces), True
        elif match.group("hex") is not None:
            pieces.append(_byte(parse_int_base(match.group("hex"), "0123456789ABCDEF", 2)))
        elif match.group("oct") is not None:
            pieces.append(_byte(parse_int_base(match.group("oct"), "01234567", 3)))
        elif match.group("other") is not None:
            char = match.group("other")
            pieces.append(_SIMPLE_ESCAPES.get(char, "\\" + char))
        else:
            pieces.append("\\")
    return "".join(pieces), False


def echo_special(arg: str) -> str | None:
    """Text printed for ``echo --version`` or ``echo --help``, else ``None``."""
    if arg == "--version":
        return ECHO_VERSION
    if arg == "--help":
        return ECHO_HELP
    return None


def echo_command(args: Sequence[str]) -> int:
    """Run ``echo`` with ``args`` (including the command name)."""
    if len(args) == 2:
        special = echo_special(args[1])
        if special is not None:
            sys.stdout.write(special)
            return 0
    interpret, newline, start = parse_echo_options(args)
    out: list[str] = []
    for position, word in enumerate(args[start:]):
        if position:
            out.append(" ")
        if interpret:
            text, stop = interpret_escapes(word)
            out.append(text)
            if stop:
                sys.stdout.write("".join(out))
                return 0
        else:
            out.append(word)
    if newline:
        out.append("\n")
    sys.stdout.write("".join(out))
    return 0