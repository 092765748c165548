"""Lexer for Crimson.

The lexer works line by line. Each line is matched against a combined regular
expression of named groups and every match yields a :class:`Token` carrying
its type, text, line number and column.

Tokens cover literals (numbers, strings), keywords (``int``, ``if``, ``main`` …),
operators, delimiters, ``//`` comments and ``#`` directives. A directive
swallows the rest of its line as one ``KEYWORD`` token, so ``#include <io>``
reaches the parser verbatim. Characters that match nothing are dropped; the
lexer never raises.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import re
from dataclasses import dataclass


KEYWORDS = frozenset({
    'int', 'float', 'bool', 'string', 'void',
    'if', 'else', 'switch', 'main', 'include',
    'true', 'false',
})

TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Whitespace
    ('SKIP',      r'\s+'),

    # Comments and directives run to the end of the line
    ('COMMENT',   r'//.*'),
    ('DIRECTIVE', r'\#.*'),

    # Literals
    ('STRING',    r'"(?:\\.|[^"\\])*(?:"|\\?$)'),
    ('NUMBER',    r'[0-9.]+'),

    # Identifiers and keywords
    ('ID',        r'[A-Za-z_][A-Za-z0-9_]*'),

    # Operators, two-character forms first
    ('OP',        r'==|!=|<=|>=|&&|\|\||[+\-*/=!<>&|]'),

    # Delimiters
    ('DELIM',     r'[(){};,]'),

    # Miscellaneous
    ('MISMATCH',  r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a type, text value and source position.
    """
    type: str
    value: str
    line: int
    column: int = 1

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, line={self.line}, col={self.column})"


def split_lines(code: str) -> list[str]:
    """
    Split source text into lines the way a line reader would see them.

    A trailing newline does not produce an extra empty line and a carriage
    return left over from CRLF endings is dropped.
    """
    lines = code.split('\n')
    if lines and lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances terminated by an ``EOF`` token.
    """
    tokens: list[Token] = []
    lines = split_lines(code)

    for line_num, line in enumerate(lines, start=1):
        for match_obj in TOKEN_REGEX.finditer(line):
            kind = match_obj.lastgroup
            value = match_obj.group()
            column = match_obj.start() + 1

            if kind in ('SKIP', 'MISMATCH'):
                continue
            if kind == 'DIRECTIVE':
                tokens.append(Token('KEYWORD', value, line_num, column))
            elif kind == 'ID':
                kind = 'KEYWORD' if value in KEYWORDS else 'ID'
                tokens.append(Token(kind, value, line_num, column))
            else:
                tokens.append(Token(kind, value, line_num, column))

    tokens.append(Token('EOF', '', len(lines) + 1, 1))
    return tokens
