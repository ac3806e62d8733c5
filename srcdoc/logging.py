"""Logger hierarchy and console/file sinks for srcdoc runs."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

ROOT_LOGGER = "srcdoc"
CONSOLE_PREFIX = "[srcdoc]"
FILE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class ProgressFormatter(logging.Formatter):
    """Plain progress lines for INFO; level tag for anything louder or quieter.

    In verbose mode the emitting component (``orchestrator``, ``llm`` ...) is
    shown as well.
    """

    def __init__(self, *, show_component: bool = False) -> None:
        super().__init__()
        self.show_component = show_component

    def format(self, record: logging.LogRecord) -> str:
        parts = [CONSOLE_PREFIX]
        if record.levelno != logging.INFO:
            parts.append(record.levelname)
        if self.show_component:
            component = record.name.removeprefix(f"{ROOT_LOGGER}.")
            if component != ROOT_LOGGER:
                parts.append(f"({component})")
        parts.append(record.getMessage())
        line = " ".join(parts)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``srcdoc.<name>``, or the root srcdoc logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Send srcdoc records to stderr (or ``stream``) and optionally append them to ``log_file``.

    Calling it again replaces the previous handlers. The file sink always
    records DEBUG, whatever the console level.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    console_level = logging.DEBUG if verbose else logging.INFO
    console = logging.StreamHandler(stream or sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(ProgressFormatter(show_component=verbose))
    logger.addHandler(console)

    logger.setLevel(console_level)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    return logger


__all__ = ["ProgressFormatter", "configure_logging", "get_logger"]
