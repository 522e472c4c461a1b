"""CLI entry point for the Paren interpreter.

Usage:
    python -m paren [-v|-vv] [--show-ast [--ast-options JSON]]
    python -m paren [-v|-vv] [--show-ast] -c "(+ 1 2)"

Options:
  -v            Increase log verbosity (can be repeated)
  --show-ast    Print the parsed tree before each result
  --ast-options JSON
                Tree display options, e.g. '{"max_depth": 4, "color_root": false}'
  -c CODE       Evaluate CODE once, print the result and exit

Without -c an interactive session is started; its history is kept in the
file named by PAREN_HISTORY_FILE (default `.repl_history`).
"""

import argparse
import logging
import sys

from paren.config import get_log_level
from paren.debug_utils.pprint import load_options_from_json
from paren.repl import Repl, run_repl, wrap_expression


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Paren expression interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase log verbosity (can be repeated)')
    parser.add_argument('--show-ast', action='store_true', help='print the parsed tree before each result')
    parser.add_argument('--ast-options', metavar='JSON', help='tree display options as a JSON object')
    parser.add_argument('-c', dest='command', metavar='CODE', help='evaluate CODE and exit')
    args = parser.parse_args(argv)

    level = get_log_level()
    if args.v == 1:
        level = logging.INFO
    elif args.v >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    ast_options = load_options_from_json(args.ast_options) if args.ast_options else None

    if args.command is not None:
        repl = Repl(show_ast=args.show_ast, ast_options=ast_options)
        if not repl.run_source(wrap_expression(args.command.strip())):
            sys.exit(1)
        return

    run_repl(show_ast=args.show_ast, ast_options=ast_options)


if __name__ == '__main__':
    main()
