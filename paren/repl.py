"""Interactive read-eval-print loop for Paren.

Lines are buffered until parentheses balance, then the buffered input is
evaluated against a single session Interpreter. Input that is not wrapped in
parentheses is wrapped before evaluation, so `+ 1 2` behaves like `(+ 1 2)`.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from paren.config import get_history_file
from paren.debug_utils.pprint import DEFAULT_OPTIONS, pprint_tree
from paren.errors import ParenError
from paren.interpreter import Interpreter, read
from paren.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)

PROMPT = "> "
CONTINUATION_PROMPT = ".. "
EXIT_COMMANDS = frozenset({"exit", "quit"})


def is_complete_expression(text: str) -> bool:
    return text.count("(") == text.count(")")


def wrap_expression(text: str) -> str:
    if text.startswith("(") and text.endswith(")"):
        return text
    return f"({text})"


class Repl:
    def __init__(
        self,
        interpreter: Optional[Interpreter] = None,
        *,
        input_fn: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
        history_file: Optional[Path] = None,
        show_ast: bool = False,
        ast_options: Optional[dict] = None,
    ):
        self.interp = interpreter if interpreter is not None else Interpreter()
        self.input_fn = input_fn
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.history_file = history_file
        self.show_ast = show_ast
        self.ast_options = ast_options if ast_options is not None else DEFAULT_OPTIONS
        self.buffer = ""

    def feed(self, line: str) -> bool:
        """Add one input line; evaluate once the buffer is complete. False means exit."""
        trimmed = line.strip()
        if not self.buffer and trimmed in EXIT_COMMANDS:
            return False
        self.buffer += trimmed
        if not self.buffer:
            return True
        if not is_complete_expression(self.buffer):
            self.buffer += " "
            return True

        source, self.buffer = wrap_expression(self.buffer), ""
        self._add_history(source)
        self.run_source(source)
        return True

    def run_source(self, source: str) -> bool:
        try:
            root = read(source)
            if self.show_ast:
                print(pprint_tree(root, options=self.ast_options), file=self.out)
            result = evaluate(root, self.interp.env)
        except ParenError as e:
            logger.debug("Evaluation of %r failed", source, exc_info=True)
            print(f"Error: {e.message}", file=self.err)
            return False
        print(result, file=self.out)
        return True

    def run(self) -> None:
        self._load_history()
        try:
            while True:
                prompt = CONTINUATION_PROMPT if self.buffer else PROMPT
                try:
                    line = self.input_fn(prompt)
                except (EOFError, KeyboardInterrupt):
                    break
                if not self.feed(line):
                    break
        finally:
            self._save_history()

    # ------------------------
    # History (stdlib readline, when the platform provides it)
    # ------------------------
    def _add_history(self, source: str) -> None:
        readline = _readline()
        if readline is not None:
            readline.add_history(source)

    def _load_history(self) -> None:
        readline = _readline()
        if readline is None or self.history_file is None or not self.history_file.exists():
            return
        try:
            readline.read_history_file(self.history_file)
        except OSError as e:
            logger.warning("Failed to load history from %s: %s", self.history_file, e)

    def _save_history(self) -> None:
        readline = _readline()
        if readline is None or self.history_file is None:
            return
        try:
            readline.write_history_file(self.history_file)
        except OSError as e:
            logger.warning("Failed to save history to %s: %s", self.history_file, e)


def _readline():
    try:
        import readline
    except ImportError:
        return None
    return readline


def run_repl(show_ast: bool = False, ast_options: Optional[dict] = None) -> None:
    Repl(history_file=get_history_file(), show_ast=show_ast, ast_options=ast_options).run()
