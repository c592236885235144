# src/task_tracker/cli/parsing.py

"""
Tokenizing and argument parsing for interactive commands.

Parsers return ParseResult values instead of raising, so command handlers
check `.ok` and print a message on failure.
"""

from __future__ import annotations

import re
import shlex
from dataclasses import dataclass
from typing import Generic, TypeVar

from ..tasks.task_models import Priority

T = TypeVar("T")

PRIORITY_FLAG = "-p"

# Ids are small; the digit cap also keeps int() below its conversion limit.
_INT_RE = re.compile(r"[+-]?\d{1,18}", re.ASCII)


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> ParseResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> ParseResult[T]:
        return cls(error=error)


def split_command(line: str) -> ParseResult[list[str]]:
    """
    Split a command line into tokens.

    Double quotes group words ("Buy milk" is one token); apostrophes are
    ordinary characters so `add don't forget` works. '#' is not a comment.
    """
    lexer = shlex.shlex(line, posix=True)
    lexer.whitespace_split = True
    lexer.quotes = '"'
    lexer.escapedquotes = '"'
    lexer.commenters = ""
    try:
        return ParseResult.success(list(lexer))
    except ValueError as e:
        # shlex reports an unterminated quote as ValueError("No closing quotation")
        return ParseResult.failure(str(e))


def parse_task_id(token: str) -> ParseResult[int]:
    token = token.strip()
    if not _INT_RE.fullmatch(token):
        return ParseResult.failure(f"not an integer: {token!r}")
    return ParseResult.success(int(token))


def parse_add_args(args: list[str]) -> ParseResult[tuple[str, Priority]]:
    """
    `<description words...> [-p high|medium|low]`

    Every non-flag token joins the description. `-p` takes the next token as
    the priority name; unknown names mean MEDIUM. A trailing `-p` with no
    value is kept as description text.
    """
    words: list[str] = []
    priority = Priority.MEDIUM

    i = 0
    while i < len(args):
        tok = args[i]
        if tok == PRIORITY_FLAG and i + 1 < len(args):
            priority = Priority.from_name(args[i + 1])
            i += 2
            continue
        words.append(tok)
        i += 1

    description = " ".join(words).strip()
    if not description:
        return ParseResult.failure("description is required")
    return ParseResult.success((description, priority))
