"""Errors.

Every fatal condition in a Crimson run is raised as a subclass of
:class:`CrimsonException`. Structural errors are raised before any statement
executes; runtime errors abort execution at the failing statement.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


def _locate(message: str, line=None, file=None) -> str:
    if line is not None:
        message += f" on line {line}"
    if file is not None:
        message += f" in {file}"
    return message


class CrimsonException(Exception):
    """
    Base class for errors that abort a Crimson run.
    """
    def __init__(self, message, line=None, file=None):
        self.line = line
        self.file = file
        super().__init__(message)


class MissingEntryPointException(CrimsonException):
    """
    Error for sources without a ``void main`` or ``int main`` block.
    """
    def __init__(self, file=None):
        message = (
            "No main function found. "
            "Code must be inside void main() or int main() to execute."
        )
        if file is not None:
            message += f" ({file})"
        super().__init__(message, file=file)


class UnterminatedEntryPointException(CrimsonException):
    """
    Error for a main block whose braces never balance.
    """
    def __init__(self, line=None, file=None):
        message = "Main function not properly closed with }"
        if line is not None:
            message += f" (opened on line {line})"
        if file is not None:
            message += f" in {file}"
        super().__init__(message, line, file)


class CodeOutsideEntryPointException(CrimsonException):
    """
    Error for intrinsic calls placed outside the main block.
    """
    def __init__(self, name, line=None, file=None):
        self.name = name
        message = (
            f"Line {line}: Code outside main function is not allowed. "
            f"All executable code must be inside main()."
        )
        if file is not None:
            message += f" Found '{name}' in {file}"
        super().__init__(message, line, file)


class NonNumericOperandException(CrimsonException):
    """
    Error for ordering comparisons on text that is not a number.
    """
    def __init__(self, operand, op, line=None, file=None):
        self.operand = operand
        self.op = op
        message = _locate(
            f"Cannot compare non-numeric operand '{operand}' with '{op}'",
            line,
            file,
        )
        super().__init__(message, line, file)


class InvalidSleepArgumentException(CrimsonException):
    """
    Error for ``Sleep`` arguments that are not an integer.
    """
    def __init__(self, value, line=None, file=None):
        self.value = value
        message = _locate(
            f"Sleep() expects an integer number of seconds, got '{value}'",
            line,
            file,
        )
        super().__init__(message, line, file)
