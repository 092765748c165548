"""
Main parser entry point for Crimson.

This module defines the `Parser` class, which owns the token cursor and
coordinates parsing. The actual parsing routines are split across
`crimson.parser.expressions` and `crimson.parser.statements`.

Parsing never fails. Tokens that cannot start a statement are stepped over,
missing semicolons are tolerated and malformed constructs yield no node.
"""

from crimson.lexer import Token
from crimson.validator import EntryBlock

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """Crimson parser."""

    def __init__(self, tokens: list[Token], entry: EntryBlock, file: str):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with ``EOF``.
            entry (EntryBlock): Validated bounds of the main block.
            file (str): The name of the script.
        """
        self.tokens = tokens
        self.entry = entry
        self.source_file = file
        self.position = 0
        self.limit = len(tokens) - 1
        self.curr_token = self.tokens[self.position]

    def advance(self) -> Token:
        """
        Consume the current token and return it.

        The cursor never moves past the region limit, where an ``EOF`` token
        stands in for the real one.
        """
        tok = self.curr_token
        if self.position < self.limit:
            self.position += 1
            self.curr_token = self._token_at(self.position)
        return tok

    def accept(self, value: str) -> bool:
        """
        Consume the current token if it is the delimiter or operator ``value``.
        """
        if self.curr_token.type in ('DELIM', 'OP') and self.curr_token.value == value:
            self.advance()
            return True
        return False

    def check(self, value: str) -> bool:
        """
        Return True if the current token is the delimiter or operator ``value``.
        """
        return self.curr_token.type in ('DELIM', 'OP') and self.curr_token.value == value

    def at_end(self) -> bool:
        """Return True once the cursor reaches the end of its region."""
        return self.curr_token.type == 'EOF'

    def _token_at(self, index: int) -> Token:
        if index >= self.limit:
            last = self.tokens[self.limit]
            if last.type == 'EOF':
                return last
            return Token('EOF', '', last.line, last.column)
        return self.tokens[index]

    def _enter_region(self, start: int, stop: int) -> None:
        """
        Restrict the cursor to ``tokens[start:stop]``.
        """
        self.position = start
        self.limit = stop
        self.curr_token = self._token_at(start)

    def matching_brace(self) -> int | None:
        """
        Return the index of the brace closing a block whose ``{`` was consumed.
        """
        depth = 1
        for index in range(self.position, self.limit):
            tok = self.tokens[index]
            if tok.type != 'DELIM':
                continue
            if tok.value == '{':
                depth += 1
            elif tok.value == '}':
                depth -= 1
                if depth == 0:
                    return index
        return None

    def bounded_block(self) -> tuple:
        """
        Parse a block confined to the tokens before its matching brace.

        Statements inside cannot read past the closing brace, however
        malformed they are. The cursor resumes after the brace.
        """
        close = self.matching_brace()
        if close is None:
            return self.block()
        saved_limit = self.limit
        self._enter_region(self.position, close)
        node = self.block()
        self.limit = saved_limit
        self.position = close + 1
        self.curr_token = self._token_at(self.position)
        return node

    # Expression wrappers
    def expression(self) -> tuple:
        """
        Parse a single operand: a literal, identifier or boolean keyword.
        """
        return _expr.parse_expression(self)

    def condition(self) -> tuple:
        """
        Parse a condition: one operand, optionally compared with a second.
        """
        return _expr.parse_condition(self)

    # Statement wrappers
    def statement(self) -> tuple | None:
        """
        Parse the statement at the cursor, or step over a token that starts none.
        """
        return _stmt.parse_statement(self)

    def block(self) -> tuple:
        """
        Parse statements up to the closing brace of an opened block.
        """
        return _stmt.parse_block(self)

    def parse_include(self) -> tuple | None:
        """Parse an ``#include`` directive."""
        return _stmt.parse_include(self)

    def parse_declaration(self) -> tuple | None:
        """Parse a typed variable declaration."""
        return _stmt.parse_declaration(self)

    def parse_func_def(self) -> tuple | None:
        """Parse a ``void`` function declaration."""
        return _stmt.parse_func_def(self)

    def parse_if(self) -> tuple | None:
        """Parse an if / else if / else chain."""
        return _stmt.parse_if(self)

    def parse_call(self) -> tuple | None:
        """Parse a call statement."""
        return _stmt.parse_call(self)

    def parse_prelude(self) -> list[tuple]:
        """Parse the declarations ahead of ``main``."""
        self._enter_region(0, self.entry.start)
        return _stmt.parse_prelude(self)

    def parse_main(self) -> tuple:
        """Parse the main block."""
        self._enter_region(self.entry.start, self.entry.end + 1)
        return _stmt.parse_main(self)

    def parse(self) -> list[tuple]:
        """
        Parse the program.

        Returns:
            list[tuple]: The prelude statements followed by one ``main`` node.
        """
        statements = self.parse_prelude()
        statements.append(self.parse_main())
        return statements
