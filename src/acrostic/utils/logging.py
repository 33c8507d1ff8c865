"""
Root logger configuration for the Hydra entry point.
"""
import logging
import os
import sys
from typing import Optional

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Log records go to stderr so streamed text on stdout stays clean. Hydra
    may already have attached handlers to the root logger; they are kept,
    and repeated calls do not add duplicates.

    Args:
        level: Logging level name (e.g., "INFO", "DEBUG")
        log_file: Optional path of an extra log file
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    root = logging.getLogger()
    root.setLevel(numeric_level)
    formatter = logging.Formatter(_FORMAT)

    if not any(type(h) is logging.StreamHandler and h.stream is sys.stderr for h in root.handlers):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if log_file:
        log_path = os.path.abspath(log_file)
        if not any(isinstance(h, logging.FileHandler) and h.baseFilename == log_path for h in root.handlers):
            os.makedirs(os.path.dirname(log_path), exist_ok=True)
            file_handler = logging.FileHandler(log_path)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    logging.getLogger(__name__).debug(f"Logging configured with level {level.upper()}")
