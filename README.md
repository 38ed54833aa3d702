# dogesh

`dogesh` is a library of the pieces that make up a small Unix shell: reading
and splitting command lines, expanding words, aliases, a set of builtins and
job bookkeeping. Each piece works on plain Python strings and lists, so any
one of them can be used without the others.

## Modules

| Module | Purpose |
| --- | --- |
| `dogesh.strings` | Helpers: `split_words`, `parse_int`, `parse_int_base`, `join_assignment`, `tilde_join`, `slash_join`, `env_lookup` |
| `dogesh.linereader` | `LineReader`, which reads lines ended by a newline or a NUL character from a text or binary stream; it is iterable |
| `dogesh.state` | `ShellState` (environment as `NAME=VALUE` entries, search path, exit flag and status) and `is_blank` |
| `dogesh.errors` | `signal_message`, `command_error`, `mismatch_message` and `check_access` |
| `dogesh.jobs` | `Job` and `JobTable`: listing, reaping finished jobs, resuming a job with `foreground` or `background` |
| `dogesh.alias` | `AliasTable` and the `alias_command` / `unalias_command` builtins |
| `dogesh.echo` | `echo_command` with `-n`, `-e`, `-E`, `--help`, `--version`, plus `parse_echo_options`, `interpret_escapes`, `echo_special` |
| `dogesh.environment` | `env_command`, `setenv_command`, `unsetenv_command`, `cd_command`, `exit_command` |
| `dogesh.expand` | `expand_variables` (`$VAR`, `${VAR}`, `$?`), `expand_tilde` / `expand_tildes` (`~`, `~user`), `remove_backslashes`, `glob_words` |
| `dogesh.lexing` | `space_operators`, `squeeze_spaces`, `normalize_spaces`, `is_escaped`, `split_line` returning `Word`s; `QuoteMismatchError` |

## Examples

Split text on a separator; empty pieces are dropped:

```python
from dogesh.strings import split_words

split_words("/usr/bin::/bin", ":")   # ["/usr/bin", "/bin"]
```

Build a shell state from the process environment and look up a variable:

```python
import os
from dogesh.state import ShellState

state = ShellState.from_environ(os.environ)
state.getenv("HOME")
state.path          # the PATH entry split on ":"
```

Define an alias and expand a command with it:

```python
from dogesh.alias import AliasTable

aliases = AliasTable()
aliases.define("ll", "ls -l")
aliases.expand(["ll", "/tmp"])   # ["ls", "-l", "/tmp"]
```

Expand variables in a line; the environment is a list of `NAME=VALUE`
entries and an unknown variable becomes a single space:

```python
from dogesh.expand import expand_variables

expand_variables("echo $USER", ["USER=doge"], 0)   # "echo doge"
```

Split a line into words; quoted text stays in one word:

```python
from dogesh.lexing import split_line

split_line("echo 'hello world' again")
# [Word("echo"), Word("hello world", quoted=True), Word("again")]
```

A quote that is never closed raises `dogesh.lexing.QuoteMismatchError`.
`JobTable.foreground` and `JobTable.background` raise `LookupError` when
the requested job does not exist.

## What it does not do

The package has no interactive loop and no command to run: it does not
read a prompt, edit lines or keep a history. It does not parse a line into
pipelines, redirections or `&&` / `||` lists, and it does not start
programs; `split_line` only produces words, with operators as words of
their own. Backquote substitution and a startup configuration file are not
provided.

## Requirements

Python 3.10 or newer on a POSIX system (`dogesh.expand` uses `pwd`; job
control and `cd` use the process and terminal calls of `os`). There are no
third-party dependencies.