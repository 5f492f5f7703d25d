"""Uses the bfi interpreter to run a program from a file or from the command line. Also uses the error handling
context manager. Called from the bfi executable script.
"""

import argparse

from bfi.lang.error import ErrorHandler
from bfi.lang.session import Session
from bfi.lang.shell import launch_repl


def main(argv=None):
    """Runs bfi interpreter. Called from bfi executable script."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="bfi", description="Interpreter for the eight-operator byte tape language.")
        parser.add_argument("file", help="file to interpret and run (if empty, goes to interactive mode)", nargs="?")
        parser.add_argument("-c", "--code", help="program passed in as a string instead of a file")
        args = parser.parse_args(argv)

        if args.file is not None and args.code is not None:
            parser.error("cannot run both a file and -c CODE")

        if args.code is not None:
            Session(error_handler, Session.CODE_FILE, args.code).run()

        elif args.file is not None:
            Session(error_handler, args.file).run()

        else:
            launch_repl(error_handler)
