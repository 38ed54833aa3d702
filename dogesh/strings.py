"""Small text helpers used throughout the shell."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def split_words(text: str | None, sep: str) -> list[str]:
    """Split ``text`` on runs of ``sep``, dropping empty pieces."""
    if not text:
        return []
    return [word for word in text.split(sep) if word]


def parse_int(text: str | None) -> int:
    """Read a signed decimal number the way the shell's builtins do.

    Leading ``+``/``-`` signs are skipped; the number is negative when the
    sign right before the digits is ``-``. Every remaining character counts
    as a digit by its offset from ``'0'``.
    """
    if not text:
        return 0
    digits = text.lstrip("+-")
    sign_count = len(text) - len(digits)
    negative = sign_count > 0 and text[sign_count - 1] == "-"
    value = sum(
        (ord(char) - ord("0")) * 10**power
        for power, char in enumerate(reversed(digits))
    )
    return -value if negative else value


def parse_int_base(text: str | None, digits: str, limit: int) -> int:
    """Read at most ``limit`` characters of ``text`` as a number in ``digits``.

    A character missing from ``digits`` contributes ``-1``.
    """
    value = 0
    for char in (text or "")[: max(limit, 0)]:
        value = value * len(digits) + digits.find(char)
    return value


def join_assignment(args: Sequence[str]) -> str:
    """Build ``NAME=VALUE`` from the second and third items of ``args``."""
    name = args[1] if len(args) > 1 and args[1] is not None else ""
    value = args[2] if len(args) > 2 and args[2] is not None else ""
    return f"{name}={value}"


def tilde_join(home: str, path: str | None) -> str:
    """Replace the leading character of ``path`` (the tilde) with ``home``."""
    if path is None:
        return home
    return home + path[1:]


def slash_join(left: str | None, right: str | None) -> str:
    """Join two path pieces with a single slash between them."""
    return f"{left or ''}/{right or ''}"


def env_lookup(env: Iterable[str] | None, prefix: str) -> str | None:
    """Return what follows ``prefix`` in the first entry that starts with it."""
    if env is None:
        return None
    for entry in env:
        if entry.startswith(prefix):
            return entry[len(prefix):]
    return None