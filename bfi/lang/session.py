"""Session control for bfi. Loads a program from a file or a string and runs it, reporting through an ErrorHandler."""

from bfi.interpreter import Interpreter
from bfi.lang.error import GenericException


class Session:
    """Governs a single bfi run."""
    SH_FILE = "<in>"        # interactive mode filename
    CODE_FILE = "<string>"  # filename used for programs passed with -c

    def __init__(self, error_handler, path, source=None):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path  # used for error messages

        if source is not None:
            self.source = source
        elif path in (Session.SH_FILE, Session.CODE_FILE):
            raise GenericException("'{}' is a reserved filename", path)
        else:
            self.source = Session.read(path)

    @staticmethod
    def read(path):
        """Returns the contents of the file at path as text."""
        try:
            with open(path, "r", encoding="utf-8", newline="") as file:
                return file.read()
        except (OSError, UnicodeDecodeError):
            raise GenericException("'{}' could not be opened", path)

    def run(self, stdin=None, stdout=None):
        """Builds an Interpreter for this session's source and runs it to completion. Bracket errors are raised before
        anything is executed.
        """
        interpreter = Interpreter(self.source, stdin, stdout)
        interpreter.interpret()
        return interpreter
