"""Loader for puzzle files."""

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from wordchain.chain import InvalidPuzzleError, validate_letters
from wordchain.wordlist import normalize_words

PUZZLE_SEPARATOR = "---"
"""A line with only this text separates puzzles within one file."""


@dataclass
class PuzzleConfig:
    """A puzzle configuration."""

    name: str
    """Name of the puzzle, used for the log file name."""

    words: list[str] = field(default_factory=list)
    """The vocabulary.  Normalized to distinct uppercase words of length > 1."""

    chains: dict[str, list[str]] = field(default_factory=dict)
    """Slot identifiers of each chain, in reading order.

    Chains are solved in declaration order.  An identifier that appears more than once,
    in one chain or across chains, is a single slot holding a single letter.
    """

    letters: dict[str, str] = field(default_factory=dict)
    """Pre-filled letters, by slot identifier."""

    def __post_init__(self) -> None:
        """Validate the puzzle."""
        self.words = normalize_words(self.words)

        for chain_id, slots in self.chains.items():
            if not isinstance(chain_id, str) or not chain_id:
                raise InvalidPuzzleError(f"Invalid chain name: {chain_id!r}.")
            bad_slots = [s for s in slots if not isinstance(s, str) or not s]
            if bad_slots:
                raise InvalidPuzzleError(f"Chain {chain_id!r} has invalid slot ids: {bad_slots}.")

        self.letters = validate_letters(self.letters)

        # Every pre-filled slot must belong to some chain
        all_slots = {s for slots in self.chains.values() for s in slots}
        unknown = sorted(s for s in self.letters if s not in all_slots)
        if unknown:
            raise InvalidPuzzleError(f"Letters given for slots in no chain: {unknown}.")

    def __str__(self) -> str:
        """Return a string representation of the PuzzleConfig."""
        chain_lines = "\n".join(
            f"  {chain_id} ({len(slots)}): {' '.join(slots)}"
            for chain_id, slots in self.chains.items()
        )
        letters = " ".join(f"{s}={ch}" for s, ch in self.letters.items()) or "(none)"
        return (
            f"{self.name}: {len(self.words)} words, {len(self.chains)} chain(s)\n"
            f"{chain_lines}\n"
            f"  letters: {letters}"
        )

    def to_dict(self) -> dict:
        """Return a dictionary representation of the PuzzleConfig for serialization."""
        return {
            "name": self.name,
            "words": list(self.words),
            "chains": {chain_id: list(slots) for chain_id, slots in self.chains.items()},
            "letters": dict(self.letters),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PuzzleConfig":
        """Create a PuzzleConfig instance from a dictionary representation."""
        return cls(
            name=data["name"],
            words=list(data.get("words", [])),
            chains={chain_id: list(slots) for chain_id, slots in data["chains"].items()},
            letters=dict(data.get("letters", {})),
        )


def parse_puzzle(text: str, *, name: str) -> PuzzleConfig:
    """Parse the text of a single puzzle.

    Each non-blank line is one of:

    - a chain: ``name: id id id ...`` (no ids means an empty chain);
    - letters: ``id=L`` pairs separated by whitespace;
    - words: any other line, whitespace-separated.

    Lines starting with '#' are comments.  Blank lines are ignored.
    """
    words: list[str] = []
    chains: dict[str, list[str]] = {}
    letters: dict[str, str] = {}

    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        if ":" in line:
            chain_id, _, slots = line.partition(":")
            chain_id = chain_id.strip()
            if not chain_id:
                raise InvalidPuzzleError(f"Line {line_no}: missing chain name: '{line}'")
            if chain_id in chains:
                raise InvalidPuzzleError(f"Line {line_no}: duplicate chain '{chain_id}'")
            chains[chain_id] = slots.split()
        elif "=" in line:
            for pair in line.split():
                slot_id, sep, letter = pair.partition("=")
                if not sep or not slot_id:
                    raise InvalidPuzzleError(f"Line {line_no}: invalid letter '{pair}'")
                letters[slot_id] = letter
        else:
            words.append(line)

    return PuzzleConfig(name=name, words=words, chains=chains, letters=letters)


def load_configs(configs_path: str | PathLike, *, print_configs: bool = False) -> list[PuzzleConfig]:
    """Load puzzle configurations from the given path.

    A file may hold several puzzles separated by '---' lines.  Puzzles are named after the
    file, with a numeric suffix from the second puzzle on.

    Args:
        configs_path: Path to the puzzle file.
        print_configs: Whether to print loaded puzzles for debugging.
    """
    path = Path(configs_path).resolve()
    if not path.is_file():
        raise FileNotFoundError(f"Puzzle file not found: {path}")
    print()
    print(f"Loading configs from {path}")
    print()

    sections: list[list[str]] = [[]]
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            if line.strip() == PUZZLE_SEPARATOR:
                sections.append([])
            else:
                sections[-1].append(line)

    configs = []
    for section in sections:
        text = "".join(section)
        if not text.strip():
            continue
        name = path.stem if not configs else f"{path.stem}-{len(configs) + 1}"
        config = parse_puzzle(text, name=name)
        if print_configs:
            print(config)
            print(config.to_dict())
            print()
        configs.append(config)

    return configs
