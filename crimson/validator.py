"""Entry-block validation.

A Crimson program must contain exactly one ``void main() { ... }`` or
``int main() { ... }`` block, and intrinsic calls may only appear inside it.
:func:`locate_entry_block` checks both before anything executes and returns
the token bounds of the block.


File: validator.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass

from crimson.exceptions import (
    CodeOutsideEntryPointException,
    MissingEntryPointException,
    UnterminatedEntryPointException,
)
from crimson.intrinsics import INTRINSIC_NAMES
from crimson.lexer import Token


@dataclass(frozen=True)
class EntryBlock:
    """
    Token bounds of the main block.

    ``start`` indexes the ``void``/``int`` keyword and ``end`` the closing
    brace; both are inclusive.
    """
    start: int
    end: int

    def __contains__(self, index: int) -> bool:
        return self.start <= index <= self.end


def find_entry_start(tokens: list[Token]) -> int | None:
    """
    Return the index of the first ``void main`` or ``int main`` pair.
    """
    for i, tok in enumerate(tokens[:-1]):
        if tok.type == 'KEYWORD' and tok.value in ('void', 'int'):
            if tokens[i + 1].value == 'main':
                return i
    return None


def find_entry_end(tokens: list[Token], start: int) -> int | None:
    """
    Return the index of the brace closing the block opened after ``main(``.
    """
    depth = 0
    in_main = False
    for i in range(start, len(tokens)):
        tok = tokens[i]
        if (
            not in_main
            and tok.value == 'main'
            and i + 1 < len(tokens)
            and tokens[i + 1].value == '('
        ):
            in_main = True
            continue
        if not in_main or tok.type != 'DELIM':
            continue
        if tok.value == '{':
            depth += 1
        elif tok.value == '}':
            depth -= 1
            if depth == 0:
                return i
    return None


def locate_entry_block(tokens: list[Token], file: str | None = None) -> EntryBlock:
    """
    Validate the entry block and return its bounds.

    Parameters:
        tokens (list[Token]): The full token list of the program.
        file (str | None): The script name used in diagnostics.

    Returns:
        EntryBlock: Inclusive token bounds of ``main``.

    Raises:
        MissingEntryPointException: If there is no ``void|int main``.
        UnterminatedEntryPointException: If the main block never closes.
        CodeOutsideEntryPointException: If an intrinsic appears outside main.
    """
    start = find_entry_start(tokens)
    if start is None:
        raise MissingEntryPointException(file)

    end = find_entry_end(tokens, start)
    if end is None:
        raise UnterminatedEntryPointException(tokens[start].line, file)

    entry = EntryBlock(start, end)
    for i, tok in enumerate(tokens):
        if i in entry:
            continue
        if tok.type == 'ID' and tok.value in INTRINSIC_NAMES:
            raise CodeOutsideEntryPointException(tok.value, tok.line, file)

    return entry
