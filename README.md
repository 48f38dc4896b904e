# bytetrie

A trie (prefix tree) that maps keys to values. Keys may be text strings or
arbitrary byte strings, including ones that contain zero bytes.

## Installation

```
pip install bytetrie
```

## Usage

```python
from bytetrie.trie import Trie

trie = Trie()

trie.insert("hello", "there")
trie.insert("hell", "testing")
trie.insert("", "the empty key is allowed too")

trie.lookup("hello")      # "there"
trie.lookup("missing")    # None
len(trie)                 # 3

trie.remove("hell")       # removes the entry
trie.remove("hell")       # raises KeyError: no longer present
```

### Text keys

`insert`, `lookup` and `remove` take text keys. A `str` key is encoded as
UTF-8; a bytes-like key is used as it is. Either way the key ends at its
first zero byte, so `"abc\0def"` and `"abc"` name the same entry.

### Binary keys

`insert_binary`, `lookup_binary` and `remove_binary` take bytes-like keys
(`bytes`, `bytearray` or `memoryview`). Every byte, zero included, is part
of the key, so `b"abc"` and `b"abc\x00"` are two different keys:

```python
trie.insert_binary(b"abc\x00\x01\x02\xff", "hello world")
trie.lookup_binary(b"abc\x00\x01\x02\xff")   # "hello world"
trie.lookup_binary(b"abc")                   # None
```

Passing a `str` to the binary methods raises `TypeError`.

Text and binary keys share one tree: the text key `"abc"` and the binary
key `b"abc"` refer to the same entry.

### Mapping-style access

A `Trie` also supports the familiar mapping operations. A `str` key is
treated as a text key and a bytes-like key as a binary key:

```python
trie["key"] = 42
"key" in trie             # True
trie["key"]               # 42
del trie["key"]
trie["key"]               # raises KeyError
del trie["key"]           # raises KeyError
```

`in` returns `False` for keys that are neither text nor bytes-like.

### Values

`None` marks an absent entry, so it cannot be stored: inserting `None`
raises `ValueError` and leaves the trie unchanged. Storing a value under a
key that is already present replaces the old value, and the number of
entries stays the same.

## What it does not do

A `Trie` offers lookup by exact key only. It has no iteration over its keys
or values and no prefix search, and it keeps its entries in memory only.

## Running the tests

```
pip install -e ".[test]"
pytest
```