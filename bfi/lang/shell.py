"""Interactive/command-line mode for the bfi interpreter. Reserved: running bfi without a program lands here."""

from bfi.lang.session import Session


def launch_repl(error_handler):
    """Entry point for interactive mode, which is not implemented. Warns and returns without reading any input."""
    error_handler.register_file(Session.SH_FILE)
    error_handler.warn("interactive mode is not implemented; pass a file or use '{}'", "-c CODE")
