"""Building blocks of a small Unix shell: splitting, expansion, aliases, builtins and jobs."""

__version__ = "3.0.0"