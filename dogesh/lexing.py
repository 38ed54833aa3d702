"""Turning a command line into words: operator spacing, quoting and splitting."""

from __future__ import annotations

from dataclasses import dataclass

from dogesh.errors import QUOTE, mismatch_message
from dogesh.strings import split_words

# Checked in this order at every position, so longer forms win where listed first.
OPERATORS = (
    "<<", "<", "2>>", ">>",
    "2>&1", "2>", ">", ";",
    "||", "&&", "|", "&",
    "(", ")",
)

_QUOTES = "\"'"


class QuoteMismatchError(ValueError):
    """Raised when a quote or double quote is left open."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or mismatch_message(QUOTE).rstrip("\n"))


@dataclass(frozen=True)
class Word:
    """One word of a command line; ``quoted`` marks a quoted sentence."""

    text: str
    quoted: bool = False


def is_escaped(text: str, index: int) -> bool:
    """Tell whether the character at ``index`` follows a backslash."""
    return index > 0 and text[index - 1] == "\\"


def _track_quote(text: str, index: int, quote: str | None) -> str | None:
    """Return the quote state after looking at ``text[index]``."""
    if is_escaped(text, index):
        return quote
    char = text[index]
    if char in _QUOTES:
        if quote is None:
            return char
        if char == quote:
            return None
    return quote


def _operator_at(text: str, index: int) -> str | None:
    return next((op for op in OPERATORS if text.startswith(op, index)), None)


def space_operators(line: str) -> str:
    """Put spaces around every operator that is neither quoted nor escaped.

    An operator already surrounded by spaces is left alone. Raises
    QuoteMismatchError when a quote is still open at the end of the line.
    """
    out: list[str] = []
    quote: str | None = None
    i = 0
    length = len(line)
    while i < length:
        quote = _track_quote(line, i, quote)
        op = None
        if quote is None and not is_escaped(line, i):
            op = _operator_at(line, i)
        if op is None:
            out.append(line[i])
            i += 1
            continue
        end = i + len(op)
        space_after = line[end:end + 1] == " "
        space_before = i == 0 or (bool(out) and out[-1] == " ")
        if space_after and space_before:
            out.append(op)
        else:
            if i != 0:
                out.append(" ")
            out.append(op)
            out.append(" ")
        i = end
    if quote is not None:
        raise QuoteMismatchError()
    return "".join(out)


def squeeze_spaces(line: str) -> str:
    """Drop leading and trailing spaces and collapse unquoted runs of spaces."""
    out: list[str] = []
    quote: str | None = None
    length = len(line)
    i = length - len(line.lstrip(" "))
    while i < length:
        quote = _track_quote(line, i, quote)
        if quote is None:
            while i + 1 < length and line[i] == " " and line[i + 1] == " ":
                i += 1
        if i == length - 1 and line[i] == " ":
            break
        out.append(line[i])
        i += 1
    return "".join(out)


def normalize_spaces(line: str) -> str:
    """Rejoin the space-separated words of ``line`` with single spaces."""
    return " ".join(split_words(line, " "))


def _word_end(text: str, start: int) -> int:
    end = start
    while end < len(text) and not (text[end] == " " and not is_escaped(text, end)):
        end += 1
    return end


def split_line(line: str) -> list[Word]:
    """Split a command line into words.

    Operators become words of their own, a quoted sentence becomes one
    word without its quotes, a backslash-escaped space stays inside its
    word and empty words are dropped. Raises QuoteMismatchError for an
    unbalanced quote.
    """
    text = squeeze_spaces(space_operators(line))
    words: list[Word] = []
    length = len(text)
    i = 0
    while i < length:
        char = text[i]
        if char in _QUOTES:
            close = text.find(char, i + 1)
            end = length if close == -1 else close
            words.append(Word(text[i + 1:end], quoted=True))
            i = min(end + 1, length)
        else:
            end = _word_end(text, i)
            words.append(Word(text[i:end]))
            i = end
        if i < length and text[i] == " ":
            i += 1
    return [word for word in words if word.text]