"""This module represents the node of the keyword trie that's used by the
keyword matcher to store all registered keywords with shared prefixes.
"""

from typing import Optional


class TrieNode:
    """Represent a node in the keyword trie structure."""

    def __init__(self) -> None:
        """Initialize a new, empty Trie node.

        Attributes:
            children (dict): A dictionary mapping characters to
            their corresponding child TrieNode instances.
            terminal_value (Optional[str]): The full keyword spelled by the
            path from the root to this node, or None if no registered
            keyword ends here.

        """
        # A dictionary to store child nodes (character: TrieNode)
        self.children: dict[str, TrieNode] = {}
        # The keyword ending at this node, if any
        self.terminal_value: Optional[str] = None
