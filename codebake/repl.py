"""
Read loop and console entry point for codebake.

Lines are accumulated until the parentheses balance (parentheses inside
string literals and `;` comments are ignored), then the text is submitted as
one top-level form. Errors are printed and the loop continues with the environment intact.

    codebake                 # interactive
    codebake recipe.cb       # run a script, print the last result
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from codebake.config import get_log_level, get_prompt
from codebake.errors import CodebakeError
from codebake.interpreter import Interpreter
from codebake.printer import display

logger = logging.getLogger(__name__)


def paren_depth(text: str) -> int:
    """Open parentheses outside strings and comments.

    Negative as soon as one closes early.
    """
    depth = 0
    in_string = False
    in_comment = False
    for ch in text:
        if in_comment:
            in_comment = ch != "\n"
        elif ch == '"':
            in_string = not in_string
        elif in_string:
            continue
        elif ch == ";":
            in_comment = True
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                return depth
    return depth


def check_parens(text: str) -> bool:
    """True when every '(' outside a string is closed and none closes early."""
    return paren_depth(text) == 0


def run_repl(
    interp: Optional[Interpreter] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """Run until stdin is exhausted. Streams default to the process stdio."""
    interp = interp or Interpreter()
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    prompt = get_prompt()
    while True:
        stdout.write(prompt)
        stdout.flush()
        source = ""
        while True:
            line = stdin.readline()
            if not line:
                return
            source += line
            # a stray ')' is submitted so the parser can report it
            if paren_depth(source) <= 0:
                break
        if not source.strip():
            continue
        logger.debug("submitting %r", source)
        try:
            stdout.write(display(interp.parse_eval(source)) + "\n")
        except CodebakeError as e:
            stdout.write(f"error: {e}\n")


def run_file(path: Path, interp: Optional[Interpreter] = None, stdout: Optional[TextIO] = None) -> int:
    interp = interp or Interpreter()
    stdout = stdout or sys.stdout
    try:
        result = interp.eval(path.read_text(encoding="utf-8"))
    except CodebakeError as e:
        stdout.write(f"error: {e}\n")
        return 1
    if result is not None:
        stdout.write(display(result) + "\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="codebake", description="codebake lisp interpreter")
    parser.add_argument("script", nargs="?", type=Path, help="file of forms to evaluate")
    parser.add_argument("--no-prelude", action="store_true", help="skip loading prelude files")
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level())
    interp = Interpreter(prelude=None if args.no_prelude else "auto")
    if args.script is not None:
        return run_file(args.script, interp)
    run_repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
