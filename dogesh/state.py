"""Shell-wide state: environment, search path and exit bookkeeping."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from dogesh.strings import env_lookup, split_words


@dataclass
class ShellState:
    """Everything the shell carries from one command line to the next."""

    env: list[str] | None = None
    path: list[str] | None = None
    exit_flag: bool = False
    exit_value: int = 0
    last_status: int = 0
    count: int = 0
    bquote: int = 0

    @classmethod
    def from_environ(
        cls, environ: Mapping[str, str] | Iterable[str] | None
    ) -> ShellState:
        """Build a state from a mapping or from ``NAME=VALUE`` entries.

        An empty environment leaves both ``env`` and ``path`` unset.
        """
        state = cls()
        if environ is None:
            return state
        if isinstance(environ, Mapping):
            entries = [f"{name}={value}" for name, value in environ.items()]
        else:
            entries = list(environ)
        if entries:
            state.env = entries
            state.set_path()
        return state

    def set_path(self) -> list[str] | None:
        """Load ``path`` from the ``PATH`` entry of the environment.

        Returns the new search path, or ``None`` when there is no ``PATH``
        entry; the previous path is then left untouched.
        """
        for entry in self.env or ():
            if entry.startswith("PATH="):
                self.path = split_words(entry[len("PATH="):], ":")
                return self.path
        return None

    def getenv(self, name: str) -> str | None:
        """Return the value of variable ``name``, or ``None`` if unset."""
        return env_lookup(self.env, f"{name}=")


def is_blank(line: str) -> bool:
    """Tell whether ``line`` consists of one or more spaces and nothing else."""
    return bool(line) and line.strip(" ") == ""