"""Module for word list management and the word connectivity graph."""

from collections.abc import Iterable, Mapping, Sequence
from os import PathLike
from pathlib import Path
from typing import TypeAlias

from bitarray import bitarray
from bitarray.util import zeros

ConnectivityGraph: TypeAlias = dict[str, list[str]]
"""Maps each word to the words that may immediately follow it in a chain."""

WordIndex: TypeAlias = dict[str, int]
"""Maps each word to its bit position in a word mask."""

OVERLAP = 2
"""Number of letters shared by two consecutive words in a chain."""


def normalize_words(tokens: str | Iterable[str], *, min_len: int = 2) -> list[str]:
    """Normalize raw tokens into a vocabulary.

    Strings are split on whitespace, case-folded to uppercase, and tokens shorter than
    `min_len` are dropped.  Duplicates are removed, keeping the first occurrence, so the
    result keeps the caller's order.

    Args:
        tokens: A whitespace-separated string, or an iterable of such strings.
        min_len: Minimum word length to include (defaults to 2, since words overlap by two).

    Returns:
        A list of distinct uppercase words.
    """
    if isinstance(tokens, str):
        tokens = [tokens]

    words: dict[str, None] = {}
    for token in tokens:
        for word in token.split():
            word = word.upper()
            if len(word) < min_len:
                continue
            words.setdefault(word, None)
    return list(words)


def load_word_list(path: str | PathLike, *, min_len: int = 2) -> list[str]:
    """Load a vocabulary from a word list file.

    Args:
        path: Path to a text file with one or more words per line.
        min_len: Minimum word length to include.

    Returns:
        A list of distinct uppercase words, in file order.
    """
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    with word_list_path.open("r", encoding="utf-8") as f:
        return normalize_words(f, min_len=min_len)


def build_connections(words: Sequence[str]) -> ConnectivityGraph:
    """Create the connectivity graph for a vocabulary.

    `word` is followed by `other` if the last two letters of `word` equal the first two
    letters of `other`.  A word never follows itself, but every word is a key, even
    when it has no successors.  Successor lists keep vocabulary order.
    """
    by_prefix: dict[str, list[str]] = {}
    for word in words:
        by_prefix.setdefault(word[:OVERLAP], []).append(word)

    connections: ConnectivityGraph = {}
    for word in words:
        connections[word] = [
            other for other in by_prefix.get(word[-OVERLAP:], []) if other != word
        ]
    return connections


def index_words(words: Iterable[str], connections: Mapping[str, Iterable[str]]) -> WordIndex:
    """Assign a bit position to every word in the vocabulary or the graph."""
    index: WordIndex = {}
    for word in words:
        index.setdefault(word, len(index))
    for word, successors in connections.items():
        index.setdefault(word, len(index))
        for other in successors:
            index.setdefault(other, len(index))
    return index


def words_to_mask(words: Iterable[str], index: WordIndex) -> bitarray:
    """Return a mask with the bits of `words` set.

    Words unknown to `index` cannot be placed in a chain and are ignored.
    """
    mask = zeros(len(index))
    for word in words:
        pos = index.get(word)
        if pos is not None:
            mask[pos] = 1
    return mask
