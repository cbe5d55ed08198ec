# logger_utils.py -  logging setup and timing metrics for the detector tools

import logging
import time
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "hotspot_detector"
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(level: str = "INFO", console: Optional[Console] = None) -> logging.Logger:
    """
    Attach a RichHandler to the package logger.
    Calling it again only changes the level (no duplicate handlers).
    Raises ValueError for a level name outside LEVELS.
    """
    name = level.strip().upper() if isinstance(level, str) else None
    if name not in LEVELS:
        raise ValueError(f"unknown log level {level!r}, expected one of {', '.join(LEVELS)}")
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(name)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        # the RichHandler is the only output, a configured root logger would print twice
        logger.propagate = False
    return logger


class Log:
    """Small helpers for recording metrics through the package logger."""

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (like timing, counts, or performance stats).
        Example: index wordlist done: 0.123s
        """
        logging.getLogger(LOGGER_NAME).info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("index wordlist"):
                detector.add_leaked_passwords(lines)
        It logs how long the block took when it exits.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.perf_counter() - self.start, 3)  # seconds
        Log.metric(f"{self.label} done", self.elapsed, "s")
