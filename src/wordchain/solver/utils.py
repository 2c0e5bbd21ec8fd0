"""Utility functions for the word chain solver."""

from collections.abc import Sequence
from functools import reduce

from wordchain.wordlist import OVERLAP

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


def append_word(decoded: str, word: str) -> str:
    """Return the letters spelled after appending a word to a decoded chain prefix.

    The first word is taken in full; every following word contributes all but its
    first two letters, which overlap the previous word.
    """
    if not decoded:
        return word
    return decoded + word[OVERLAP:]


def decode_words(words: Sequence[str]) -> str:
    """Return the letters spelled by a word sequence."""
    return reduce(append_word, words, "")


def format_word_chain(words: Sequence[str]) -> str:
    """Format a word sequence for display, e.g. "TOAST -> STOP -> OPEN"."""
    return " -> ".join(words)


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.sss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"
