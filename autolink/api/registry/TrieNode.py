"""Prefix tree node (UNO: single class)."""


class TrieNode:
    """Node holding child edges and, when terminal, the key ending here."""

    __slots__ = ("children", "key")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.key: str | None = None

    def insert(self, key: str, ignore_case: bool) -> bool:
        """Insert ``key``; return False when the terminal is already owned."""
        node = self
        for ch in key:
            edge = ch.lower() if ignore_case else ch
            child = node.children.get(edge)
            if child is None:
                child = TrieNode()
                node.children[edge] = child
            node = child
        if node.key is not None:
            return False
        node.key = key
        return True
