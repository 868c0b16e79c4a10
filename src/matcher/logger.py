"""Structured debug logging (timestamp, document, timing)."""

import logging
import logging.handlers
from pathlib import Path

LOG_FILE_PATH = Path(__file__).parent.parent.parent / "logs/matcher.log"
_LOG_LEVEL = logging.INFO

_FORMAT = (
    "level=%(levelname)s | time=%(asctime)s | process=%(process)d | "
    "thread=%(thread)d | module=%(module)s | funcName=%(funcName)s | "
    "lineno=%(lineno)d | message=%(message)s"
)


def setup_logging(
    log_file_path: Path = LOG_FILE_PATH,
    level: int = _LOG_LEVEL,
) -> logging.Handler:
    """Configure the root logger to write to a rotating log file.

    Any handler already attached to the root logger is removed first, so
    calling this more than once does not duplicate records.

    Args:
        log_file_path (Path): The file to write log records to.
        level (int): The minimum level of the records to keep.

    Returns:
        logging.Handler: The installed file handler.

    """
    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"),
    )
    root_logger.addHandler(file_handler)

    return file_handler


def log(
    time_stamp: str,
    source: str,
    keyword_count: int,
    execution_time_ms: float,
) -> None:
    """Log the details of a keyword extraction using the configured
    logging system.

    Args:
        time_stamp (str): The timestamp of the extraction.
        source (str): The scanned document (a file path or '<text>').
        keyword_count (int): The number of keywords found.
        execution_time_ms (float): The execution time in milliseconds.

    """
    logging.info(
        "Timestamp: %s, Source: '%s', Keywords found: %d, "
        "Execution Time: %.2f ms",
        time_stamp,
        source,
        keyword_count,
        execution_time_ms,
    )
