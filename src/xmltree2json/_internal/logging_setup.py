"""CLI logging configuration (internal).

JSON goes to stdout or the output file; diagnostics go to stderr through
logging so they never mix with the document.
"""

import logging
import sys


def setup_cli_logging(*, trace: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for a CLI run.

    - quiet=True: ERROR only
    - trace=True: DEBUG
    - default: WARNING
    """
    if quiet:
        level = logging.ERROR
    elif trace:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    root = logging.getLogger()

    # Replace handlers so repeated runs in one process (tests) do not duplicate output
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))

    root.addHandler(handler)
    root.setLevel(level)
