import sys
from os.path import expanduser
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = "<level>{level: <8}</level> {message}"


def _get_log_file_path() -> Path:
    home = expanduser("~")
    log_dir = Path(home) / ".chakra-next" / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "chakra-next.log"


def setup_logger():
    log_file_path = _get_log_file_path()
    logger.remove()
    logger.add(log_file_path, rotation="10 MB", retention="7 days", compression="zip")


def enable_console_logging(level: str = "DEBUG") -> int:
    """Mirror log records to stderr (used by --verbose). Returns the sink id."""
    return logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)
