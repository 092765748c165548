"""Shared definitions for condition operator identifiers.

The parser tags comparison nodes with these values and the interpreter
dispatches on them, so both sides agree on one spelling per operator.
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of operators the lexer can produce.
    """

    # Comparison
    EQ = "=="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    # Boolean
    AND = "&&"
    OR = "||"
    NOT = "!"

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    # Bitwise
    AND_BITS = "&"
    OR_BITS = "|"

    # Assignment
    ASSIGN = "="

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


ORDERING_OPS = frozenset({Op.GT, Op.LT, Op.GE, Op.LE})


__all__ = ["Op", "ORDERING_OPS"]
