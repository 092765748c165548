"""
Utility functions shared across Crimson Language tests.
"""
from pathlib import Path
import sys

from crimson.lexer import tokenize
from crimson.parser import Parser
from crimson.interpreter import Interpreter

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

import crm  # noqa: E402


def parse_source(source: str):
    """
    Validate and parse source code and return the AST.
    """
    tokens = tokenize(source)
    entry = Interpreter("<test>").check_entry_block(tokens)
    parser = Parser(tokens, entry, "<test>")
    return parser.parse()


def main_body(source: str) -> list:
    """
    Return the statements of the main block.
    """
    ast = parse_source(source)
    assert ast[-1][0] == "main"
    return ast[-1][1]


def wrap_main(body: str) -> str:
    """
    Place statements inside a void main block.
    """
    return "void main() {\n" + body + "\n}\n"


def run_source(source: str) -> Interpreter:
    """
    Run source code and return the interpreter instance after execution.
    """
    return crm.run_source(source, "<test>")


def run_file(path: Path) -> Interpreter:
    """
    Run a file and return the interpreter instance after execution.
    """
    return crm.run_source(path.read_text(), str(path))
