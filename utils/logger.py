# utils/logger.py
import logging
import sys
from config.paths import LOG_PATH


def setup_logging(level: int = logging.INFO) -> None:
    """
    Attach the file and stdout handlers to the root logger so that every
    module-level ``logging.getLogger(__name__)`` logger is captured.

    Safe to call more than once; handlers are only added the first time.
    """
    # Ensure directory exists
    LOG_PATH.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level)

    # Prevent duplicate handlers if called multiple times
    if not any(getattr(h, "_timetable_handler", False) for h in root.handlers):
        # File handler
        file_handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
        file_formatter = logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_formatter)
        file_handler._timetable_handler = True

        # Stream handler (stdout -> docker logs)
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_formatter = logging.Formatter("[%(levelname)s] %(message)s")
        stream_handler.setFormatter(stream_formatter)
        stream_handler._timetable_handler = True

        # Add both handlers
        root.addHandler(file_handler)
        root.addHandler(stream_handler)
