"""Logging configuration for the command line."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    verbose: bool = False,
    log_file: str | Path | None = None,
    console: Console | None = None,
) -> None:
    """Route log records to the terminal (and optionally a file).

    Args:
        verbose: DEBUG instead of WARNING on the terminal
        log_file: Also write INFO and above to this file
        console: Console to render to (stderr by default)
    """
    handlers: list[logging.Handler] = [
        RichHandler(
            console=console or Console(stderr=True),
            level=logging.DEBUG if verbose else logging.WARNING,
            show_path=False,
        )
    ]

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,
    )
