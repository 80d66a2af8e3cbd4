import logging
import logging.handlers
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "draft_assistant.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3

DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[Path] = None,
    force: bool = False,
) -> Path:
    """Configure root logging for the draft assistant.

    Console output honors ``log_level``; the rotating log file always
    captures DEBUG so value-score breakdowns can be inspected after a draft.
    A second call is a no-op unless ``force`` replaces existing handlers.

    Returns:
        Path to the log file.
    """
    log_dir = Path(log_dir) if log_dir else DEFAULT_LOG_DIR
    log_file = log_dir / LOG_FILE_NAME

    root_logger = logging.getLogger()
    if root_logger.handlers and not force:
        return log_file  # Already configured

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    log_dir.mkdir(parents=True, exist_ok=True)
    level = getattr(logging, log_level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Root must pass DEBUG records through to the file handler
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info(
        "Logging initialized (console level=%s, file=%s)", log_level, log_file
    )
    return log_file
