"""Word expansions: variables, tildes, backslashes and glob patterns."""

from __future__ import annotations

import glob
import os
import pwd
import re
from collections.abc import Iterable, Sequence

from dogesh.strings import env_lookup, slash_join, tilde_join

_NAME_END = ' "@}'
_STATUS_END = ("", " ", "}", '"')
_BACKSLASH = re.compile(r"\\(.?)", re.DOTALL)
_MAGIC = frozenset("*?[")


def _variable(env: Iterable[str] | None, name: str) -> str | None:
    for entry in env or ():
        key, sep, value = entry.partition("=")
        if sep and key == name:
            return value
    return None


def expand_variables(
    line: str, env: Iterable[str] | None, last_status: int = 0
) -> str:
    """Replace ``$NAME``, ``${NAME}`` and ``$?`` outside single quotes.

    An unknown variable becomes a single space. A bare ``$`` not followed by
    a name ends the line.
    """
    env = list(env) if env is not None else None
    pieces: list[str] = []
    i = 0
    n = len(line)
    while i < n:
        char = line[i]
        if char == "'":
            close = line.find("'", i + 1)
            stop = n if close == -1 else close + 1
            pieces.append(line[i:stop])
            i = stop
            continue
        if char != "$":
            pieces.append(char)
            i += 1
            continue
        braced = line[i + 1 : i + 2] == "{"
        start = i + 2 if braced else i + 1
        end = start
        while end < n and line[end] not in _NAME_END:
            end += 1
        name = line[start:end]
        if line[i + 1 : i + 2] == "?" and line[i + 2 : i + 3] in _STATUS_END:
            value: str | None = str(last_status)
        else:
            value = _variable(env, name)
            if value is None:
                value = " "
        pieces.append(value)
        if not braced and not name:
            break
        i = end + 1 if braced else end
    return "".join(pieces)


def expand_tilde(word: str, env: Iterable[str] | None) -> str:
    """Expand a leading ``~`` or ``~user`` in ``word``.

    ``~`` and ``~/...`` use ``HOME``; ``~user`` uses that user's home
    directory. The word is returned unchanged when nothing applies.
    """
    if not word.startswith("~"):
        return word
    if word[1:2] not in ("/", ""):
        try:
            entry = pwd.getpwnam(word[1:])
        except KeyError:
            return word
        return slash_join(entry.pw_dir, word[len(entry.pw_name) + 1 :])
    home = env_lookup(env, "HOME=")
    if home is None:
        return word
    return tilde_join(home, word)


def expand_tildes(words: Sequence[str], env: Iterable[str] | None) -> list[str]:
    """Apply :func:`expand_tilde` to every word that starts with ``~``."""
    env = list(env) if env is not None else None
    return [expand_tilde(word, env) if word.startswith("~") else word for word in words]


def remove_backslashes(word: str) -> str:
    """Drop each escaping backslash, keeping the character it escapes."""
    return _BACKSLASH.sub(r"\1", word)


def _has_magic(word: str) -> bool:
    return any(char in _MAGIC for char in word)


def _split_top(body: str) -> list[str]:
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in body:
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        if char == "," and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return parts


def _expand_braces(pattern: str) -> list[str]:
    depth = 0
    start = 0
    for index, char in enumerate(pattern):
        if char == "{":
            if depth == 0:
                start = index
            depth += 1
        elif char == "}" and depth:
            depth -= 1
            if depth == 0:
                parts = _split_top(pattern[start + 1 : index])
                if len(parts) > 1:
                    prefix, suffix = pattern[:start], pattern[index + 1 :]
                    return [
                        expanded
                        for part in parts
                        for expanded in _expand_braces(prefix + part + suffix)
                    ]
    return [pattern]


def _mark(path: str) -> str:
    if os.path.isdir(path) and not path.endswith("/"):
        return path + "/"
    return path


def _glob_pattern(pattern: str) -> list[str]:
    matches: list[str] = []
    for alternative in _expand_braces(pattern):
        matches.extend(_mark(path) for path in sorted(glob.glob(alternative)))
    return matches


def glob_words(words: Sequence[str]) -> list[str]:
    """Replace pattern words by the paths they match.

    Plain words keep their order and the matches follow them, pattern by
    pattern, each sorted; directories get a trailing slash and ``{a,b}``
    alternatives are expanded. If any pattern matches nothing, the words
    are returned unchanged.
    """
    patterns = [word for word in words if _has_magic(word)]
    if not patterns:
        return list(words)
    matches: list[str] = []
    for pattern in patterns:
        found = _glob_pattern(pattern)
        if not found:
            return list(words)
        matches.extend(found)
    return [word for word in words if not _has_magic(word)] + matches