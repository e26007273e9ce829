"""Logging configuration for the org showcase site."""

import logging
import sys
from pathlib import Path

# Name prefix of every handler installed by setup_logging
HANDLER_PREFIX = "org_showcase."


def _remove_own_handlers(root_logger: logging.Logger) -> None:
    for handler in list(root_logger.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root_logger.removeHandler(handler)
            handler.close()


def setup_logging(log_level: str = "INFO", log_dir: Path = Path("logs")) -> None:
    """Send logs to logs/org_showcase.log and INFO and above to stdout.

    Safe to call more than once; earlier handlers from this function are
    replaced, handlers added by anything else are left alone.
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_dir / "org_showcase.log")
    file_handler.set_name(f"{HANDLER_PREFIX}file")
    file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.set_name(f"{HANDLER_PREFIX}stdout")
    stream_handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    stream_handler.setLevel(logging.INFO)

    root_logger = logging.getLogger()
    _remove_own_handlers(root_logger)
    root_logger.setLevel(getattr(logging, log_level.upper()))
    root_logger.addHandler(file_handler)
    root_logger.addHandler(stream_handler)

    # Request lines from httpx would drown out the build log
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
