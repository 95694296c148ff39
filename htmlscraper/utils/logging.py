"""Logging configuration for htmlscraper."""

import logging
from pathlib import Path

import logfire
from rich.logging import RichHandler


def setup_logging(level: str = 'INFO', log_file: str | Path | None = None, logfire_token: str | None = None) -> None:
    """Configure the root logger.

    Writes to ``log_file`` when given, otherwise to the console through rich.

    Args:
        level: Logging level (e.g., 'DEBUG', 'INFO', 'ALL'). Defaults to 'INFO'.
        log_file: Path of a log file. Defaults to None.
        logfire_token: Logfire write token. Defaults to None (logfire left unconfigured).

    """
    if level.upper() == 'ALL':
        numeric_level = logging.NOTSET
    else:
        numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    handler: logging.Handler
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path)
        handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    else:
        handler = RichHandler(rich_tracebacks=True)
    handler.setLevel(numeric_level)
    root_logger.addHandler(handler)

    if logfire_token:
        logfire.configure(token=logfire_token)
