"""Error handling for bfi. Only GenericExceptions should be encountered during running: if another type of error is
raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Program output owns stdout, so every diagnostic is written to stderr.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a bfi error/warning. Each "{}" in msg is
    filled by the matching item of exprs, bolded in the colored message.
    """

    def __init__(self, msg, exprs=None, internal=False):
        """Parses args for GenericException or warning."""
        if exprs is None:
            exprs = []
        if isinstance(exprs, (str, int)):
            exprs = [exprs]

        super().__init__(msg.format(*exprs))
        self.msg = msg.format(*(colored(str(expr), attrs=["bold"]) for expr in exprs))  # color expr snippets

        self.internal = internal


class BracketError(GenericException):
    """Raised while building the jump table when a '[' or ']' has no partner."""


class InputError(GenericException):
    """Raised when a ',' cannot read a byte, either because input ran out or because reading failed."""


class ErrorHandler:
    """Reports bfi errors on stderr as '<file>: error: <msg>', where <file> is the program registered last. A fatal
    handler exits with status 1 after reporting. Used as a context manager around a whole run.
    """
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.file = None

    def register_file(self, path):
        """Registers path as the origin of any following error."""
        self.file = path

    def _prefix(self):
        return colored(f"{self.file}: ", attrs=["bold"]) if self.file else ""

    def warn(self, *args, **kwargs):
        """Prints '<file>: warning: <msg>' to stderr. Takes the same arguments as GenericException; never exits."""
        warning = GenericException(*args, **kwargs)
        print(self._prefix() + colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + warning.msg,
              file=sys.stderr)

    def throw(self, error):
        """Prints error to stderr, tagged '[internal]' if it is one. Exits with status 1 if this handler is fatal."""
        error_msg = self._prefix()

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg, file=sys.stderr)

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Reports GenericExceptions and Ctrl-C. SystemExit passes through untouched; anything else is reported as an
        internal error and then re-raised if the handler is not fatal.
        """
        if exc_type is None or issubclass(exc_type, SystemExit):
            return False

        if issubclass(exc_type, GenericException):
            self.throw(exc_val)
            return True

        if issubclass(exc_type, KeyboardInterrupt):
            self.throw(GenericException("keyboard interrupt"))
            return True

        self.throw(GenericException("unknown error: '{}: {}'", [exc_type.__name__, exc_val], internal=True))
        return False
