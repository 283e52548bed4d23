"""Unified logging for Rig with console and file output."""
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)

# Log file configuration
LOG_DIR = Path.home() / ".rig"
LOG_FILE = LOG_DIR / "rig.log"

# Track if file logging has been set up
_file_logging_configured = False


def setup_file_logging(log_file: str = None, verbose: bool = False):
    """Set up file logging for Rig runs.

    Args:
        log_file: Path to log file (defaults to ~/.rig/rig.log)
        verbose: Enable debug-level logging

    Note:
        Creates log directory if it doesn't exist.
        Falls back to /tmp if the home directory is not writable.
        Only the first call in a process attaches a file handler; later
        calls, including ones naming another log_file, are ignored.
    """
    global _file_logging_configured

    if _file_logging_configured:
        return

    target_log_file = Path(log_file) if log_file else LOG_FILE

    try:
        target_log_file.parent.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        target_log_file = Path("/tmp/rig.log")
        target_log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger("rig")
    file_handler = logging.FileHandler(target_log_file)
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)

    file_formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    _file_logging_configured = True

    root_logger.info(f"Rig logging initialized: {target_log_file}")


def set_verbose(verbose: bool) -> None:
    """Switch every ``rig`` logger between INFO and DEBUG."""
    level = logging.DEBUG if verbose else logging.INFO
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name == "rig" or name.startswith("rig."):
            if isinstance(logger, logging.Logger):
                logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance with console output.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger with Rich console handler

    Note:
        File logging must be enabled separately via setup_file_logging()
    """
    logger = logging.getLogger(name)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
