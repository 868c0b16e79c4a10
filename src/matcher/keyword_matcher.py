"""Trie-based multi-keyword matcher.

The matcher stores every registered keyword in a trie and scans a document
once, reporting the keywords that occur as whole words. A word is a maximal
run of alphabetic characters; anything else (digits, punctuation, whitespace,
symbols) is a boundary.

A matcher is safe to share between threads for concurrent calls to
`extract_keywords` as long as no `add_keyword` call runs at the same time.
No locking is done internally, so callers should build the matcher first and
only then hand it out for scanning.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from src.custom_data_structures.Trie.Trie import TrieNode

logger = logging.getLogger(__name__)


class KeywordMatcher:
    """Match a set of keywords against documents in a single pass."""

    def __init__(self, case_sensitive: bool) -> None:
        """Initialize an empty matcher.

        Args:
            case_sensitive (bool): Whether keywords and documents are compared
            as-is. When False both are lowercased before use.

        """
        self.root = TrieNode()
        self.case_sensitive = case_sensitive
        self._keyword_count = 0

    def _normalize(self, text: str) -> str:
        """Bring `text` into the case domain of the trie."""
        if self.case_sensitive:
            return text
        return text.lower()

    def add_keyword(self, keyword: str) -> None:
        """Register a keyword in the trie.

        Registering the same keyword twice has no further effect. The empty
        string is ignored since it can never be reported by a scan.

        A keyword holding a non-alphabetic character (e.g. "new york" or
        "c++") is stored, but a scan treats that character as a word
        boundary, so the keyword is never reported. A warning is logged
        for it.

        Args:
            keyword (str): The keyword to register.

        """
        if not keyword:
            logger.warning("Ignoring empty keyword registration.")
            return

        actual_keyword = self._normalize(keyword)
        if not all(char.isalpha() for char in actual_keyword):
            logger.warning(
                "Keyword '%s' contains non-alphabetic characters and "
                "will never be matched.",
                keyword,
            )

        node = self.root
        for char in actual_keyword:
            # If the character is not already a child, add a new TrieNode
            if char not in node.children:
                node.children[char] = TrieNode()
            # Move to the child node
            node = node.children[char]

        if node.terminal_value is None:
            self._keyword_count += 1
        # Mark the end of the keyword
        node.terminal_value = actual_keyword

    def add_keywords(self, keywords: Iterable[str]) -> None:
        """Register every keyword of an iterable.

        Args:
            keywords (Iterable[str]): The keywords to register.

        """
        for keyword in keywords:
            self.add_keyword(keyword)

    def extract_keywords(self, document: str) -> set[str]:
        """Return the registered keywords found as whole words in a document.

        The document is walked once. Alphabetic characters advance a cursor
        through the trie; the cursor is lost as soon as no edge matches and
        stays lost until the next boundary. At each boundary, and at the end
        of the document, the keyword stored at the cursor (if any) is
        collected and the cursor goes back to the root.

        Args:
            document (str): The text to scan.

        Returns:
            set[str]: The distinct keywords found, in the case domain of the
            matcher (lowercased when not case sensitive).

        """
        actual_document = self._normalize(document)

        extracted_keywords: set[str] = set()
        # None means the cursor is lost for the rest of the current word
        node: Optional[TrieNode] = self.root

        for char in actual_document:
            if char.isalpha():
                if node is not None:
                    node = node.children.get(char)
                continue

            if node is not None and node.terminal_value is not None:
                extracted_keywords.add(node.terminal_value)
            node = self.root

        # The end of the document is a boundary as well
        if node is not None and node.terminal_value is not None:
            extracted_keywords.add(node.terminal_value)

        return extracted_keywords

    def __contains__(self, keyword: object) -> bool:
        """Check whether `keyword` is registered as a complete keyword."""
        if not isinstance(keyword, str) or not keyword:
            return False

        node = self.root
        for char in self._normalize(keyword):
            # If the character is not found, the keyword does not exist
            if char not in node.children:
                return False
            node = node.children[char]
        return node.terminal_value is not None

    def __len__(self) -> int:
        """Return the number of distinct registered keywords."""
        return self._keyword_count

    def __repr__(self) -> str:
        return (
            f"KeywordMatcher(case_sensitive={self.case_sensitive}, "
            f"keywords={self._keyword_count})"
        )
