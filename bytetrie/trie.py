"""A trie mapping byte-string keys to values.

Keys are walked one byte at a time.  Text keys are encoded as UTF-8 and
end at the first NUL character.  Binary keys are used whole, NUL bytes
included.  Both kinds of key share the same tree, so the text key
``"abc"`` and the binary key ``b"abc"`` name the same entry.

``None`` stands for "no value" and cannot be stored.
"""

from __future__ import annotations

from typing import Any, Union

KeyLike = Union[str, bytes, bytearray, memoryview]


class _Node:
    """One node of the trie; ``use_count`` counts the entries at or below it."""

    __slots__ = ("value", "use_count", "children")

    def __init__(self) -> None:
        self.value: Any = None
        self.use_count = 0
        self.children: dict[int, _Node] = {}


def _text_key(key: KeyLike) -> bytes:
    """Turn a text key into bytes, ending it at the first NUL."""
    if isinstance(key, str):
        data = key.encode("utf-8")
    elif isinstance(key, (bytes, bytearray, memoryview)):
        data = bytes(key)
    else:
        raise TypeError(f"trie key must be str or bytes, not {type(key).__name__}")
    end = data.find(b"\0")
    return data if end < 0 else data[:end]


def _binary_key(key: KeyLike) -> bytes:
    """Turn a binary key into bytes, keeping every byte."""
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise TypeError(f"binary trie key must be bytes-like, not {type(key).__name__}")


def _any_key(key: KeyLike) -> bytes:
    """Text semantics for ``str``, binary semantics for bytes-like keys."""
    if isinstance(key, str):
        return _text_key(key)
    return _binary_key(key)


class Trie:
    """Fast mapping of strings and byte strings to values."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def _find(self, key: bytes) -> _Node | None:
        node = self._root
        for byte in key:
            if node is None:
                return None
            node = node.children.get(byte)
        return node

    def _insert(self, key: bytes, value: Any) -> None:
        if value is None:
            raise ValueError("cannot store None in a trie")

        node = self._find(key)
        if node is not None and node.value is not None:
            node.value = value
            return

        if self._root is None:
            self._root = _Node()
        node = self._root
        node.use_count += 1
        for byte in key:
            child = node.children.get(byte)
            if child is None:
                child = _Node()
                node.children[byte] = child
            node = child
            node.use_count += 1
        node.value = value

    def _lookup(self, key: bytes) -> Any:
        node = self._find(key)
        return None if node is None else node.value

    def _remove(self, key: bytes) -> None:
        end = self._find(key)
        if end is None or end.value is None:
            raise KeyError(key)
        end.value = None

        node = self._root
        assert node is not None
        node.use_count -= 1
        if node.use_count <= 0:
            self._root = None
            return
        for byte in key:
            child = node.children[byte]
            child.use_count -= 1
            if child.use_count <= 0:
                # Everything below is unused as well; unlink the branch.
                del node.children[byte]
                return
            node = child

    def insert(self, key: KeyLike, value: Any) -> None:
        """Store *value* under a text key, replacing any existing value."""
        self._insert(_text_key(key), value)

    def insert_binary(self, key: KeyLike, value: Any) -> None:
        """Store *value* under a binary key, replacing any existing value."""
        self._insert(_binary_key(key), value)

    def lookup(self, key: KeyLike) -> Any:
        """Return the value for a text key, or ``None`` if absent."""
        return self._lookup(_text_key(key))

    def lookup_binary(self, key: KeyLike) -> Any:
        """Return the value for a binary key, or ``None`` if absent."""
        return self._lookup(_binary_key(key))

    def remove(self, key: KeyLike) -> None:
        """Remove the entry for a text key; raise KeyError if absent."""
        self._remove(_text_key(key))

    def remove_binary(self, key: KeyLike) -> None:
        """Remove the entry for a binary key; raise KeyError if absent."""
        self._remove(_binary_key(key))

    def __len__(self) -> int:
        return 0 if self._root is None else self._root.use_count

    def __contains__(self, key: object) -> bool:
        try:
            return self._lookup(_any_key(key)) is not None  # type: ignore[arg-type]
        except TypeError:
            return False

    def __getitem__(self, key: KeyLike) -> Any:
        value = self._lookup(_any_key(key))
        if value is None:
            raise KeyError(key)
        return value

    def __setitem__(self, key: KeyLike, value: Any) -> None:
        self._insert(_any_key(key), value)

    def __delitem__(self, key: KeyLike) -> None:
        try:
            self._remove(_any_key(key))
        except KeyError:
            raise KeyError(key) from None