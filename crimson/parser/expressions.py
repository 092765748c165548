"""
Expression parsing utilities for Crimson.

These functions operate on a `crimson.parser.parser.Parser` instance. The
language has no arithmetic: an expression is a single operand, and a
condition is one operand optionally compared with a second one.

Expression nodes:

    ('string', text, line)    text keeps its surrounding quotes
    ('number', text, line)
    ('ident', name, line)
    ('bool', 'true' | 'false', line)
    ('empty', line)

Condition nodes:

    (Op, lhs, rhs, line)
    ('truthy', expr, line)
"""

from typing import TYPE_CHECKING

from crimson.operations import Op

if TYPE_CHECKING:
    from crimson.parser import Parser


_LITERAL_NODES = {
    'STRING': 'string',
    'NUMBER': 'number',
    'ID': 'ident',
}


def parse_expression(parser: 'Parser') -> tuple:
    """
    Parse one operand.

    Literals, identifiers and the ``true``/``false`` keywords consume one
    token. Any other token is left in place and yields an ``empty`` node.
    """
    tok = parser.curr_token
    kind = _LITERAL_NODES.get(tok.type)
    if kind is not None:
        parser.advance()
        return (kind, tok.value, tok.line)

    if tok.type == 'KEYWORD' and tok.value in ('true', 'false'):
        parser.advance()
        return ('bool', tok.value, tok.line)

    return ('empty', tok.line)


def parse_condition(parser: 'Parser') -> tuple:
    """
    Parse a condition.

    Syntax:
        <expression> [<operator> <expression>]
    """
    tok = parser.curr_token
    left = parser.expression()
    if parser.curr_token.type != 'OP':
        return ('truthy', left, tok.line)

    op = Op(parser.advance().value)
    right = parser.expression()
    return (op, left, right, tok.line)
