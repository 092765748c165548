"""Statement parsing utilities for Crimson.

These functions operate on a `crimson.parser.parser.Parser` instance and
handle the statement forms of the language: directives, declarations,
conditionals and calls.

Statement nodes are tuples whose first element names the node and whose last
element is the source line:

    ('include', name, line)
    ('decl', data_type, name, expr_node | None, line)
    ('func_def', name, params, body_tokens, line)
    ('if', condition, then_block, else_node | None, line)
    ('call', name, arg_nodes, line)
    ('block', statements, line)
    ('main', statements, line)


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import re
from typing import TYPE_CHECKING

from crimson.symbols import DataType, VARIABLE_TYPES

if TYPE_CHECKING:
    from crimson.parser import Parser

logger = logging.getLogger(__name__)

_INCLUDE = re.compile(r'#include[^<]*<([^>]*)')

_PRELUDE_NODES = ('include', 'decl', 'func_def')

_TYPE_KEYWORDS = frozenset(t.value for t in VARIABLE_TYPES)


def parse_statement(parser: 'Parser') -> tuple | None:
    """
    Parse a single statement.

    Tokens that cannot start a statement are consumed and yield None.

    Args:
        parser: The parser instance.

    Returns:
        tuple | None: representing the AST node.
    """
    tok = parser.curr_token
    if tok.type == 'KEYWORD':
        if tok.value.startswith('#'):
            return parser.parse_include()
        if tok.value in _TYPE_KEYWORDS:
            return parser.parse_declaration()
        if tok.value == 'void':
            return parser.parse_func_def()
        if tok.value == 'if':
            return parser.parse_if()
    elif tok.type == 'ID':
        return parser.parse_call()
    parser.advance()
    return None


def parse_block(parser: 'Parser') -> tuple:
    """
    Parse the statements of a block whose opening brace was consumed.

    Bare nested braces are transparent: their statements belong to this
    block. The closing brace is consumed.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('block', list_of_statements, line_number)
    """
    line = parser.curr_token.line
    statements = []
    depth = 0
    while not parser.at_end():
        if parser.accept('{'):
            depth += 1
            continue
        if parser.accept('}'):
            if depth == 0:
                break
            depth -= 1
            continue
        stmt = parser.statement()
        if stmt is not None:
            statements.append(stmt)
    return ('block', statements, line)


def parse_include(parser: 'Parser') -> tuple | None:
    """
    Parse an include directive.

    The lexer keeps the whole directive line as one token, so the library
    name is taken from the text between ``<`` and ``>``. Directives other
    than ``#include <...>`` are skipped.

    Syntax:
        #include <name>

    Args:
        parser: The parser instance.

    Returns:
        tuple | None: ('include', name, line_number)
    """
    tok = parser.advance()
    match = _INCLUDE.match(tok.value)
    if match is None:
        logger.debug("Skipping directive %r on line %d", tok.value, tok.line)
        return None
    return ('include', match.group(1).strip(), tok.line)


def parse_declaration(parser: 'Parser') -> tuple | None:
    """
    Parse a typed variable declaration.

    Only a single operand is read after ``=``; anything following it is left
    for the statement loop to step over.

    Syntax:
        <type> <identifier> [= <expression>] [;]

    Args:
        parser: The parser instance.

    Returns:
        tuple | None: ('decl', data_type, name, expr_node, line_number)
    """
    type_tok = parser.advance()
    data_type = DataType(type_tok.value)
    id_tok = parser.curr_token
    if id_tok.type != 'ID':
        return None
    parser.advance()

    expr_node = None
    if parser.accept('='):
        expr_node = parser.expression()
    parser.accept(';')
    return ('decl', data_type, id_tok.value, expr_node, id_tok.line)


def parse_func_def(parser: 'Parser') -> tuple | None:
    """
    Parse a function declaration.

    The body is captured as raw tokens by counting braces; it is not parsed.

    Syntax:
        void <name>(<params>) { <tokens> }

    Args:
        parser: The parser instance.

    Returns:
        tuple | None: ('func_def', name, params, body_tokens, line_number)
    """
    start_tok = parser.advance()
    name_tok = parser.curr_token
    if name_tok.type != 'ID':
        return None
    parser.advance()
    if not parser.accept('('):
        return None

    params = []
    while not parser.at_end() and not parser.check(')'):
        tok = parser.advance()
        if tok.type == 'ID':
            params.append(tok.value)
    parser.accept(')')

    if not parser.accept('{'):
        return None

    body = []
    depth = 1
    while not parser.at_end():
        if parser.check('{'):
            depth += 1
        elif parser.check('}'):
            depth -= 1
            if depth == 0:
                parser.advance()
                break
        body.append(parser.advance())

    return ('func_def', name_tok.value, params, body, start_tok.line)


def _parse_guarded_block(parser: 'Parser') -> tuple | None:
    """
    Parse ``( <condition> ) { <block> }``.

    Returns:
        tuple | None: (condition, block), or None when the shape is broken.
    """
    if not parser.accept('('):
        return None
    condition = parser.condition()
    if not parser.accept(')'):
        return None
    if not parser.accept('{'):
        return None
    return condition, parser.bounded_block()


def parse_if(parser: 'Parser') -> tuple | None:
    """
    Parse a conditional 'if' statement with optional else if and else blocks.

    Scanning of the chain stops at the first plain ``else``. Branches whose
    shape is broken are dropped.

    Syntax:
        if (<condition>) { <block> }
        else if (<condition>) { <block> }
        else { <block> }

    Args:
        parser: The parser instance.

    Returns:
        tuple | None: representing the AST node.
    """
    tok = parser.advance()
    head = _parse_guarded_block(parser)
    if head is None:
        return None
    condition, then_block = head

    elif_cases = []
    else_block = None
    while parser.curr_token.type == 'KEYWORD' and parser.curr_token.value == 'else':
        parser.advance()
        if parser.curr_token.value == 'if':
            parser.advance()
            case = _parse_guarded_block(parser)
            if case is not None:
                elif_cases.append(case)
        elif parser.accept('{'):
            else_block = parser.bounded_block()
            break

    tail = else_block
    for cond_node, block_node in reversed(elif_cases):
        tail = ('if', cond_node, block_node, tail, cond_node[-1])

    return ('if', condition, then_block, tail, tok.line)


def parse_call(parser: 'Parser') -> tuple | None:
    """
    Parse a call statement.

    Arguments are string or number literals and identifiers; commas and any
    other tokens inside the parentheses are skipped. An identifier that is
    not followed by ``(`` is consumed on its own.

    Syntax:
        <identifier>(<args>) [;]

    Args:
        parser: The parser instance.

    Returns:
        tuple | None: ('call', name, arg_nodes, line_number)
    """
    id_tok = parser.advance()
    if not parser.accept('('):
        return None

    args = []
    while not parser.at_end() and not parser.check(')'):
        tok = parser.curr_token
        if tok.type in ('STRING', 'NUMBER', 'ID'):
            args.append(parser.expression())
        else:
            parser.advance()
    parser.accept(')')
    parser.accept(';')
    return ('call', id_tok.value, args, id_tok.line)


def parse_prelude(parser: 'Parser') -> list[tuple]:
    """
    Parse the region ahead of ``main``.

    Only directives and declarations are kept; other statements there have
    no effect.

    Args:
        parser: The parser instance, restricted to the prelude region.

    Returns:
        list[tuple]: The kept statements.
    """
    statements = []
    while not parser.at_end():
        stmt = parser.statement()
        if stmt is None:
            continue
        if stmt[0] in _PRELUDE_NODES:
            statements.append(stmt)
        else:
            logger.debug("Ignoring %s statement outside main on line %d", stmt[0], stmt[-1])
    return statements


def parse_main(parser: 'Parser') -> tuple:
    """
    Parse the main block.

    The header up to and including the opening brace is consumed without
    binding anything.

    Syntax:
        (void|int) main ( ... ) { <statement>* }

    Args:
        parser: The parser instance, restricted to the main region.

    Returns:
        tuple: ('main', list_of_statements, line_number)
    """
    tok = parser.curr_token
    while not parser.at_end() and not parser.accept('{'):
        parser.advance()
    _, statements, _ = parser.block()
    return ('main', statements, tok.line)
