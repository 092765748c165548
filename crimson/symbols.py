"""Runtime data model for Crimson.

Values are stored as text regardless of their declared type. A declared type
only chooses the default text used when a declaration has no initializer.

The interpreter owns exactly one :class:`SymbolTable`. There are no nested
scopes: a declaration inside a nested block writes to the same table as one
at the top of ``main``.


File: symbols.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass, field
from enum import Enum

from crimson.lexer import Token


class DataType(str, Enum):
    """
    Declarable types.
    """

    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"
    VOID = "void"

    @property
    def default_value(self) -> str:
        """
        Text bound to a variable declared without an initializer.
        """
        return _DEFAULTS[self]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


_DEFAULTS = {
    DataType.INT: "0",
    DataType.FLOAT: "0.0",
    DataType.BOOL: "false",
    DataType.STRING: "",
    DataType.VOID: "",
}

VARIABLE_TYPES = frozenset({DataType.INT, DataType.FLOAT, DataType.BOOL, DataType.STRING})


@dataclass
class Variable:
    """Runtime representation of a declared variable."""

    type: DataType
    value: str


@dataclass
class Function:
    """
    A declared ``void`` function.

    The body tokens are kept for inspection only; calling the function never
    executes them.
    """

    return_type: DataType
    params: list[str]
    body: list[Token] = field(default_factory=list)


class SymbolTable:
    """Flat variable and function tables for a single run."""

    def __init__(self):
        self.variables: dict[str, Variable] = {}
        self.functions: dict[str, Function] = {}

    def declare(self, name: str, type_: DataType, value: str | None = None) -> Variable:
        """
        Bind ``name``, replacing any previous binding.

        Parameters:
            name (str): The variable name.
            type_ (DataType): The declared type.
            value (str | None): The initial text, or None for the type default.
        """
        variable = Variable(type_, type_.default_value if value is None else value)
        self.variables[name] = variable
        return variable

    def resolve(self, name: str) -> str:
        """
        Return the text bound to ``name``, or the name itself when unbound.
        """
        variable = self.variables.get(name)
        if variable is None:
            return name
        return variable.value

    def define_function(self, name: str, function: Function) -> None:
        """Register a declared function."""
        self.functions[name] = function

    def __contains__(self, name: str) -> bool:
        return name in self.variables
