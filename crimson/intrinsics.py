"""Intrinsic library for Crimson.

Three built-in operations are available inside ``main``:

- ``crym(text)`` writes a line to standard output.
- ``inp(prompt)`` writes a prompt, reads one line from standard input and
  discards it. No variable receives the input.
- ``Sleep(seconds)`` blocks the interpreter for a whole number of seconds.

Arguments arrive as resolved text. String literals keep their quotes, so
``crym`` and ``inp`` strip one surrounding pair before writing. Every
intrinsic is a no-op when called without arguments.


File: intrinsics.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import re
import sys
import time
from typing import Callable

from crimson.exceptions import InvalidSleepArgumentException

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')
INT_MIN = -2**31
INT_MAX = 2**31 - 1


def strip_quotes(text: str) -> str:
    """
    Remove one layer of surrounding double quotes, if present.
    """
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text


def parse_seconds(text: str, line=None, file=None) -> int:
    """
    Parse the leading integer of ``text``.

    Leading whitespace and a sign are accepted and trailing characters are
    ignored, so ``"2.5"`` reads as ``2``. The value must fit a 32-bit int.

    Raises:
        InvalidSleepArgumentException: If ``text`` does not start with an
            integer, or the integer is out of range.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        raise InvalidSleepArgumentException(text, line, file)
    seconds = int(match.group(1))
    if not INT_MIN <= seconds <= INT_MAX:
        raise InvalidSleepArgumentException(text, line, file)
    return seconds


def crym(args: list[str], line=None, file=None) -> None:
    """Write the first argument followed by a newline."""
    if not args:
        return
    print(strip_quotes(args[0]))


def inp(args: list[str], line=None, file=None) -> None:
    """Prompt, then read and discard one line of input."""
    if not args:
        return
    print(strip_quotes(args[0]), end='', flush=True)
    discarded = sys.stdin.readline()
    logger.debug("inp() on line %s discarded %r", line, discarded)


def sleep(args: list[str], line=None, file=None) -> None:
    """Suspend execution for the given number of seconds."""
    if not args:
        return
    seconds = parse_seconds(args[0], line, file)
    logger.debug("Sleep(%d) on line %s", seconds, line)
    time.sleep(max(seconds, 0))


INTRINSICS: dict[str, Callable[..., None]] = {
    'crym': crym,
    'inp': inp,
    'Sleep': sleep,
}

INTRINSIC_NAMES = frozenset(INTRINSICS)


__all__ = ["INTRINSICS", "INTRINSIC_NAMES", "strip_quotes", "parse_seconds"]
