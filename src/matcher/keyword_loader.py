"""Helpers that read keyword lists and documents from disk and feed them
to a `KeywordMatcher`.
"""

from pathlib import Path

from .config import MatcherConfig
from .keyword_matcher import KeywordMatcher


class FileReadError(Exception):
    """Raised when a keyword list or a document exists but can't be
    read, such as a directory or a file that isn't valid UTF-8.
    """


def load_keywords(keywords_path: Path) -> list[str]:
    """Read a keyword list file.

    The file holds one keyword per line. Surrounding whitespace is
    stripped, and blank lines and lines starting with '#' are skipped.

    Args:
        keywords_path (Path): The path of the keyword list file.

    Raises:
        FileNotFoundError: If the file specified by `keywords_path` does
        not exist.
        FileReadError: If an error occurs while reading the file.

    Returns:
        list[str]: The keywords in file order.

    """
    try:
        with keywords_path.open("r", encoding="utf-8") as file:
            keywords = []
            for line in file:
                keyword = line.strip()
                if not keyword or keyword.startswith("#"):
                    continue
                keywords.append(keyword)
            return keywords

    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {keywords_path}") from e

    except Exception as e:
        raise FileReadError(f"An error occurred: {e!s}") from e


def build_matcher(config: MatcherConfig) -> KeywordMatcher:
    """Build a matcher holding every keyword listed in the configuration.

    Args:
        config (MatcherConfig): The parsed configuration settings.

    Returns:
        KeywordMatcher: The populated matcher.

    """
    matcher = KeywordMatcher(config.case_sensitive)
    matcher.add_keywords(load_keywords(config.keywords_path))
    return matcher


def extract_from_file(matcher: KeywordMatcher, document_path: Path) -> set[str]:
    """Scan a whole UTF-8 document file for keywords.

    Args:
        matcher (KeywordMatcher): The matcher to scan with.
        document_path (Path): The path of the document.

    Raises:
        FileNotFoundError: If the document does not exist.
        FileReadError: If an error occurs while reading the document.

    Returns:
        set[str]: The keywords found in the document.

    """
    try:
        document = document_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {document_path}") from e
    except Exception as e:
        raise FileReadError(f"An error occurred: {e!s}") from e

    return matcher.extract_keywords(document)
