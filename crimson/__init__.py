"""Crimson language interpreter.

Source units (``.crm``) are tokenized by :mod:`crimson.lexer`, checked for a
single ``main`` entry block by :mod:`crimson.validator`, parsed into tuple
nodes by :mod:`crimson.parser` and executed by :mod:`crimson.interpreter`.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"
