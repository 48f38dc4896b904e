"""A trie mapping text and byte-string keys to values; see ``bytetrie.trie``."""

__version__ = "1.2.0"
__all__ = ["trie"]