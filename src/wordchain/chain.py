"""Classes and functions for representing a chain of letter slots."""

from collections.abc import Hashable, Iterable, Mapping
from typing import TypeAlias

SlotId: TypeAlias = Hashable
"""Opaque identifier of a slot.  The same identifier always holds the same letter."""

Letters: TypeAlias = Mapping[SlotId, str | None]
"""Partial assignment of letters to slots.  `None` or "" marks an unknown letter."""


class InvalidPuzzleError(ValueError):
    """Exception raised for malformed puzzle input."""

    pass


def validate_letters(letters: Letters) -> dict[SlotId, str]:
    """Return the known letters of an assignment, upper-cased.

    Raises:
        InvalidPuzzleError: If a letter is neither unknown nor exactly one character.
    """
    known: dict[SlotId, str] = {}
    for slot_id, letter in letters.items():
        if letter is None or letter == "":
            continue
        # Some characters upper-case to several, e.g. "ß" to "SS"
        if not isinstance(letter, str) or len(letter.upper()) != 1:
            raise InvalidPuzzleError(
                f"Letter for slot {slot_id!r} must be a single character, got {letter!r}."
            )
        known[slot_id] = letter.upper()
    return known


class Chain:
    """An ordered sequence of slots to be filled by a word sequence.

    Precomputes the two kinds of constraints a decoded string must satisfy:

    - crossovers: positions sharing one slot identifier must hold the same letter;
    - known letters: positions whose slot has a pre-filled letter.
    """

    def __init__(self, slots: Iterable[SlotId], letters: Letters | None = None) -> None:
        self.slots: tuple[SlotId, ...] = tuple(slots)
        """Slot identifiers, in reading order."""

        known = validate_letters(letters or {})

        positions: dict[SlotId, list[int]] = {}
        for idx, slot_id in enumerate(self.slots):
            positions.setdefault(slot_id, []).append(idx)

        self.crossovers: tuple[tuple[int, ...], ...] = tuple(
            tuple(idxs) for idxs in positions.values() if len(idxs) > 1
        )
        """Groups of (ascending) positions that share a slot identifier."""

        self.known_letters: tuple[tuple[int, str], ...] = tuple(
            (idx, known[slot_id]) for idx, slot_id in enumerate(self.slots) if slot_id in known
        )
        """(position, letter) pairs for pre-filled slots."""

    def __len__(self) -> int:
        return len(self.slots)

    def __str__(self) -> str:
        """Returns the chain as a pattern, e.g. "T...1..1" ('.' unknown, digits crossovers)."""
        pattern = ["."] * len(self.slots)
        for group_no, idxs in enumerate(self.crossovers, start=1):
            for idx in idxs:
                pattern[idx] = str(group_no % 10)
        for idx, ch in self.known_letters:
            pattern[idx] = ch
        return "".join(pattern)

    def is_consistent(self, decoded: str) -> bool:
        """Check the positions of `decoded` decided so far against all constraints.

        Positions beyond the end of `decoded` are not yet decided and are ignored.
        """
        n = len(decoded)
        for idx, ch in self.known_letters:
            if idx < n and decoded[idx] != ch:
                return False
        for idxs in self.crossovers:
            first: str | None = None
            for idx in idxs:
                if idx >= n:
                    break
                if first is None:
                    first = decoded[idx]
                elif decoded[idx] != first:
                    return False
        return True

    def is_satisfied(self, decoded: str) -> bool:
        """Check that `decoded` fills the whole chain and meets every constraint."""
        if len(decoded) != len(self.slots):
            return False
        if any(decoded[idx] != ch for idx, ch in self.known_letters):
            return False
        return all(len({decoded[idx] for idx in idxs}) == 1 for idxs in self.crossovers)

    def letters_at(self, decoded: str) -> dict[SlotId, str]:
        """Map each slot to the letter `decoded` places there."""
        return {
            slot_id: decoded[idx] for idx, slot_id in enumerate(self.slots) if idx < len(decoded)
        }
