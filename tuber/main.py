"""Command-line entry point of the tuber interpreter. Runs a single command given as an argument, or the interactive
shell when there is none. Called from the tuber executable script.
"""

import argparse
import contextlib

from tuber.lang import config
from tuber.lang.error import ErrorHandler
from tuber.lang.history import Logger, history_file, rebuild_context
from tuber.lang.prelude import default_context
from tuber.lang.session import Session
from tuber.lang.shell import Shell


def positive_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{text}' is not an integer")
    if value < 1:
        raise argparse.ArgumentTypeError(f"'{text}' is not positive")
    return value


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="tuber", description="Evaluates lambda calculus terms step by step.")
    parser.add_argument("command", help="command to run (if empty, goes to interactive mode)", nargs="?")
    parser.add_argument("--style", choices=[style.value for style in config.DisplayStyle],
                        help=f"display style (default: ${config.STYLE_VAR} or Lazy_K)")
    parser.add_argument("--limit", type=positive_int,
                        help=f"maximum number of steps shown (default: ${config.LIMIT_VAR} or "
                             f"{config.DEFAULT_STEP_LIMIT})")
    parser.add_argument("--no-history", action="store_true", help="neither read nor write the history file")
    return parser.parse_args(argv)


def main(argv=None):
    """Runs tuber interpreter. Called from tuber executable script."""
    args = parse_args(argv)

    style = config.DisplayStyle.parse(args.style) if args.style else config.display_style()
    limit = args.limit if args.limit else config.step_limit()

    with ErrorHandler() as error_handler:
        context = default_context()

        if args.no_history:
            log = contextlib.nullcontext()
        else:
            path = history_file(config.history_dir())
            with open(path, "r") as file:
                rebuild_context(file, context, error_handler, path)
            log = open(path, "a")

        with log as file:
            logger = Logger(file) if file is not None else None
            sess = Session(context, error_handler, style, limit, logger)

            if args.command is not None:
                sess.interpret(args.command)
            else:
                Shell(sess).cmdloop()


if __name__ == "__main__":
    main()
