"""Command aliases and the alias and unalias builtins."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from dogesh.strings import split_words

ALIAS_USAGE = "Usage : alias name value\n"
TOKEN_ERROR = "Alias : invalid token : "
UNALIAS_USAGE = "Please specify an alias\nUSAGE: unalias [alias] ...\n"

_RESERVED_TOKENS = frozenset(
    {"|", "||", "<", ">", "&", "&&", ";", "*", ">>", "<<", "2>>", "2>", "2>&1"}
)

# Number of substitution rounds before expansion gives up.
_MAX_EXPANSIONS = 39


@dataclass
class AliasTable:
    """Named command replacements; the most recently added is listed first."""

    _entries: dict[str, str] = field(default_factory=dict)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return reversed(list(self._entries))

    def define(self, name: str, value: str) -> None:
        """Set ``name`` to ``value``, keeping its place if it already exists."""
        self._entries[name] = value

    def remove(self, name: str) -> None:
        """Delete alias ``name``; raises KeyError if it is not defined."""
        if name not in self._entries:
            raise KeyError(name)
        del self._entries[name]

    def lookup(self, name: str) -> str | None:
        """Return the replacement text for ``name``, or ``None``."""
        return self._entries.get(name)

    def format_lines(self) -> list[str]:
        """Lines shown by ``alias`` without arguments, newest first.

        A ``^`` in a value is shown as a space.
        """
        return [
            f'{name}="{self._entries[name].replace("^", " ")}"' for name in self
        ]

    def expand(self, words: Sequence[str]) -> list[str]:
        """Replace the first word repeatedly while it names an alias.

        Expansion stops when the first word is not an alias, when it comes
        back to a name already expanded, or after a fixed number of rounds.
        """
        current = list(words)
        seen: set[str] = set()
        for _ in range(_MAX_EXPANSIONS):
            if not current:
                break
            head = current[0]
            if head in seen:
                break
            seen.add(head)
            value = self.lookup(head)
            if value is None:
                break
            replacement = split_words(value, " ")
            if not replacement:
                break
            current = replacement + current[1:]
        return current


def _first_reserved(args: Sequence[str]) -> str | None:
    return next((word for word in args if word in _RESERVED_TOKENS), None)


def alias_command(table: AliasTable, args: Sequence[str]) -> int:
    """Run ``alias``: list aliases, or define one from ``alias NAME VALUE``."""
    if len(args) <= 1:
        for line in table.format_lines():
            sys.stdout.write(line + "\n")
        return 0
    if len(args) != 3:
        sys.stderr.write(ALIAS_USAGE)
        return -1
    reserved = _first_reserved(args)
    if reserved is not None:
        sys.stderr.write(f"{TOKEN_ERROR}{reserved}\n")
        return 0
    table.define(args[1], args[2])
    return 0


def unalias_command(table: AliasTable, args: Sequence[str]) -> int:
    """Run ``unalias NAME...``, reporting names that are not defined."""
    if len(args) <= 1:
        sys.stderr.write(UNALIAS_USAGE)
        return 0
    for name in args[1:]:
        try:
            table.remove(name)
        except KeyError:
            sys.stderr.write(f"unalias: Unknown alias: {name}\n")
    return 0