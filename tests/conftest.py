import logging

import pytest

from tests.keyword_constants import KEYWORDS


@pytest.fixture
def keywords_file(tmp_path):
    """Write a keyword list file with a comment and a blank line."""
    file_path = tmp_path / "keywords.txt"
    file_path.write_text(
        "# keywords used by the tests\n\n" + "\n".join(KEYWORDS) + "\n",
        encoding="utf-8",
    )
    return file_path


@pytest.fixture
def config_file(tmp_path, keywords_file):
    """Write a valid configuration file pointing at `keywords_file`."""
    config_path = tmp_path / "config.txt"
    config_path.write_text(
        f"keywordspath = {keywords_file}\ncase_sensitive = false\n",
        encoding="utf-8",
    )
    return config_path


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after the test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
