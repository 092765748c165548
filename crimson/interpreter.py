"""Interpreter.

This is a tree-walk interpreter for the statement nodes produced by the parser.
It supports typed declarations, if / else if / else chains, include notices,
function declarations and calls to the intrinsic library.

1. Execution Model
Statements are executed in source order by `execute()`. Conditions are
evaluated by `eval_condition()` and operands by `eval_expr()`. All three
operate over the tuple nodes described in `crimson.parser.statements` and
`crimson.parser.expressions`.

2. Environment
The interpreter holds one flat `SymbolTable`. Every declaration, at any
nesting depth, writes to it; nothing is ever popped. A table can be passed in
to inspect or pre-seed the state of a run.

3. Values
Every value is text. Declared types only pick the default text of a
declaration without initializer. `==` and `!=` compare text verbatim; the
ordering operators read both sides as floats and fail on anything else.

4. Control Flow
In an if-chain the first branch whose condition holds runs and the remaining
conditions are never evaluated. A trailing `else` runs only when no branch
ran.

5. Entry Block Validation
Before parsing, `check_entry_block()` requires a `void main` or `int main`
block and rejects intrinsic calls outside it.

6. Error Handling
Runtime errors (non-numeric ordering operands, bad `Sleep` arguments) abort
the run with typed exceptions carrying line numbers and file context. Output
written before the failure stays written.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import math

from crimson.exceptions import NonNumericOperandException
from crimson.intrinsics import INTRINSICS
from crimson.lexer import Token
from crimson.operations import Op, ORDERING_OPS
from crimson.symbols import DataType, Function, SymbolTable
from crimson.validator import EntryBlock, locate_entry_block

logger = logging.getLogger(__name__)


class Interpreter:
    """Tree-walk interpreter for Crimson."""

    def __init__(self, file: str, symbols: SymbolTable | None = None):
        """Initialize the interpreter."""
        self.file = file
        self.symbols = symbols if symbols is not None else SymbolTable()

    @property
    def vars(self) -> dict:
        """
        Mapping of variable names to their current text.
        """
        return {name: var.value for name, var in self.symbols.variables.items()}

    def check_entry_block(self, tokens: list[Token]) -> EntryBlock:
        """
        Ensure the program has a well-formed main block.

        Raises:
            CrimsonException: If the entry block is missing, unterminated, or
                intrinsics are called outside it.
        """
        return locate_entry_block(tokens, self.file)

    def _format_expr(self, node) -> str:
        """
        Convert a condition or expression node back to source-like text.
        """
        op = node[0]
        match op:
            case 'string' | 'number' | 'ident' | 'bool':
                return node[1]
            case 'empty':
                return ''
            case 'truthy':
                return self._format_expr(node[1])
            case Op():
                return f"{self._format_expr(node[1])} {op.value} {self._format_expr(node[2])}"
            case _:
                return f"<expr {op}>"

    def eval_expr(self, node) -> str:
        """
        Evaluate an operand node to its text.

        Identifiers resolve to their bound text, or to their own name when
        unbound.

        Raises:
            RuntimeError: If the node is not an expression node.
        """
        op = node[0]
        if op in ('string', 'number', 'bool'):
            return node[1]
        if op == 'ident':
            return self.symbols.resolve(node[1])
        if op == 'empty':
            return ''
        raise RuntimeError(f"Invalid expression node: {node}")

    @staticmethod
    def truthy(value: str) -> bool:
        """
        Interpret text as a boolean.

        ``"false"``, ``"0"`` and empty text are false; anything else is true.
        """
        return value not in ('false', '0', '')

    def _to_number(self, value: str, op: Op, line: int) -> float:
        try:
            number = float(value)
        except ValueError:
            number = math.nan
        if not math.isfinite(number):
            raise NonNumericOperandException(value, op.value, line, self.file)
        return number

    def eval_condition(self, node) -> bool:
        """
        Evaluate a condition node.

        Raises:
            NonNumericOperandException: If an ordering comparison has an
                operand that is not numeric text.
        """
        kind = node[0]
        line = node[-1]

        if kind == 'truthy':
            return self.truthy(self.eval_expr(node[1]))

        if not isinstance(kind, Op):
            raise RuntimeError(f"Invalid condition node: {node}")

        lhs = self.eval_expr(node[1])
        rhs = self.eval_expr(node[2])

        if kind in ORDERING_OPS:
            left = self._to_number(lhs, kind, line)
            right = self._to_number(rhs, kind, line)
            match kind:
                case Op.LT:
                    return left < right
                case Op.GT:
                    return left > right
                case Op.LE:
                    return left <= right
                case Op.GE:
                    return left >= right

        match kind:
            case Op.EQ:
                return lhs == rhs
            case Op.NE:
                return lhs != rhs
            case _:
                logger.debug(
                    "Operator '%s' is not a comparison on line %s in %s: %s",
                    kind.value, line, self.file, self._format_expr(node),
                )
                return False

    def call(self, name: str, args: list[str], line: int) -> None:
        """
        Dispatch a call to an intrinsic or a declared function.

        Declared functions only report that they were called; their bodies
        are never executed. Unknown names are ignored.
        """
        intrinsic = INTRINSICS.get(name)
        if intrinsic is not None:
            intrinsic(args, line, self.file)
        elif name in self.symbols.functions:
            print(f"Executing function: {name}")
        else:
            logger.debug("Call to undefined function '%s' on line %s in %s", name, line, self.file)

    def execute(self, statements: list):
        """
        Executes a list of statements.

        Parameters:
            statements (list):
                A list of ('include' | 'decl' | 'func_def' | 'if' | 'call' | 'block' | 'main', ...)
                tuples.

        Raises:
            TypeError: For unknown statement types.
        """
        for stmt in statements:
            kind = stmt[0]
            line = stmt[-1]

            if kind == 'include':
                _, library, _ = stmt
                print(f"Including library: {library}")

            elif kind == 'decl':
                _, data_type, var_name, expr_node, _ = stmt
                value = None if expr_node is None else self.eval_expr(expr_node)
                self.symbols.declare(var_name, data_type, value)

            elif kind == 'func_def':
                _, name, params, body, _ = stmt
                self.symbols.define_function(name, Function(DataType.VOID, list(params), list(body)))

            elif kind == 'if':
                _, cond_node, then_block, else_node, _ = stmt
                if self.eval_condition(cond_node):
                    self.execute([then_block])
                elif else_node:
                    self.execute([else_node])

            elif kind == 'call':
                _, name, arg_nodes, _ = stmt
                args = [self.eval_expr(arg) for arg in arg_nodes]
                self.call(name, args, line)

            elif kind in ('block', 'main'):
                _, block_statements, _ = stmt
                self.execute(block_statements)

            else:
                raise TypeError(
                    f"Unknown statement type: {kind} "
                    f"On line {line} in {self.file}"
                )
