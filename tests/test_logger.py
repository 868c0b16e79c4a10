import logging
import logging.handlers

from src.matcher import logger


def test_setup_logging_installs_rotating_handler(tmp_path, restore_root_logger):
    log_path = tmp_path / "logs" / "matcher.log"

    handler = logger.setup_logging(log_path)

    assert isinstance(handler, logging.handlers.RotatingFileHandler)
    assert restore_root_logger.handlers == [handler]
    assert restore_root_logger.level == logging.INFO
    assert log_path.parent.is_dir()


def test_setup_logging_twice_keeps_one_handler(tmp_path, restore_root_logger):
    log_path = tmp_path / "matcher.log"

    logger.setup_logging(log_path)
    handler = logger.setup_logging(log_path)

    assert restore_root_logger.handlers == [handler]


def test_log_writes_structured_record(tmp_path, restore_root_logger):
    log_path = tmp_path / "matcher.log"
    handler = logger.setup_logging(log_path)

    logger.log("2024-01-01T00:00:00", "document.txt", 3, 1.5)
    handler.flush()

    content = log_path.read_text(encoding="utf-8")
    assert "level=INFO" in content
    assert "Source: 'document.txt'" in content
    assert "Keywords found: 3" in content
    assert "Execution Time: 1.50 ms" in content
