import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified pagelinker logging.

    Args:
        home: Path to the pagelinker home directory. If None, derived from environment.
        level: One of DEBUG, INFO, WARN, ERROR (as in LogConfig)
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        env_home = os.environ.get("PAGELINKER_HOME")
        home = Path(env_home).expanduser().resolve() if env_home else Path.home() / ".pagelinker"

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "pagelinker.log"

    root_logger = logging.getLogger("pagelinker")
    root_logger.setLevel(_LEVELS.get(level, logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Does not configure handlers; the CLI entry point calls configure_logging.
    """
    return logging.getLogger(f"pagelinker.{name}")
