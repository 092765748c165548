"""
Crimson Language Interpreter

This is the main entry point for the Crimson language interpreter.

Workflow:
1. The command line must name exactly one ``.crm`` source file.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Interpreter verifies the program has a single ``main`` entry block and
   that intrinsics are only called inside it.
4. The Parser processes tokens into an AST following the language grammar.
5. The Interpreter walks the AST, evaluating conditions and executing statements.

Set ``CRIMSONDEBUG`` in the environment to log the tokens and AST to stderr
before execution.
"""
import logging
import os
import sys
from pathlib import Path

from crimson.exceptions import CrimsonException
from crimson.interpreter import Interpreter
from crimson.lexer import tokenize
from crimson.parser import Parser

SOURCE_SUFFIX = ".crm"

logger = logging.getLogger("crm")


def print_usage():
    """
    Print usage.
    """
    print("Usage: crm <filename.crm>")
    print()
    print("Arguments:")
    print("    <filename.crm>")
    print("        Path to a Crimson source file to execute. The program must")
    print("        contain a single void main() or int main() block.")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def configure_logging():
    """
    Send log records to stderr, at DEBUG level when ``CRIMSONDEBUG`` is set.
    """
    level = logging.DEBUG if os.environ.get("CRIMSONDEBUG") else logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def debug_log_tokens_ast(tokens, ast):
    """
    Log tokenized source and AST
    """
    logger.debug("Tokens: %s", tokens)
    logger.debug("AST: %s", ast)


def run_source(code: str, script_name: str) -> Interpreter:
    """
    Tokenize, validate, parse and execute Crimson source code.

    Raises:
        CrimsonException: On a structural or runtime error in the program.
    """
    interpreter = Interpreter(script_name)

    tokens = tokenize(code)
    entry = interpreter.check_entry_block(tokens)
    parser = Parser(tokens, entry, script_name)
    ast = parser.parse()

    debug_log_tokens_ast(tokens, ast)

    interpreter.execute(ast)
    return interpreter


def run_script(script_name: str) -> int:
    """
    Run a Crimson script and return the process exit code.
    """
    if Path(script_name).suffix != SOURCE_SUFFIX:
        print(f"Error: File must have {SOURCE_SUFFIX} extension", file=sys.stderr)
        return 1

    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except (OSError, UnicodeDecodeError):
        print(f"Error: Could not open file {script_name}", file=sys.stderr)
        return 1

    try:
        run_source(code, script_name)
    except CrimsonException as e:
        sys.stdout.flush()
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    return 0


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    configure_logging()
    args = argv[1:]
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def cli():
    """Console script wrapper around :func:`main`."""
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
