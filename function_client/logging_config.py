import logging
import os
import sys
from typing import Optional

HANDLER_NAME = "function_client"
DEFAULT_LEVEL = "INFO"


def configure_logging(level: Optional[str] = None) -> None:
    """Send diagnostics to stderr so stdout only carries the function's answer.

    Args:
        level: logging level name. Defaults to LOG_LEVEL env or 'INFO'.
            An empty or unknown name falls back to 'INFO'.
    """

    requested = (level or os.getenv("LOG_LEVEL") or DEFAULT_LEVEL).strip().upper()
    unknown = not isinstance(logging.getLevelName(requested), int)
    root = logging.getLogger()
    root.setLevel(DEFAULT_LEVEL if unknown or not requested else requested)

    # Replace only our own handler; others (pytest, embedding apps) stay put
    for h in list(root.handlers):
        if h.get_name() == HANDLER_NAME:
            root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    )
    root.addHandler(handler)

    # urllib3 logs every connection at DEBUG, which is noise here
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    if unknown and requested:
        logging.getLogger(__name__).warning(
            "Unknown log level %r, using %s", requested, DEFAULT_LEVEL
        )
