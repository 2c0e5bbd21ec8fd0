"""Prepared inputs for one solver run."""

from datetime import datetime
from time import time

from wordchain.puzzle_config import PuzzleConfig
from wordchain.solver.utils import TIMESTAMP_FMT
from wordchain.wordlist import ConnectivityGraph, build_connections


class TaskArgs:
    """Wrapper for the arguments of one solver run."""

    def __init__(self, *, config: PuzzleConfig, words: list[str]) -> None:
        """Prepare the solver inputs for the given configuration and word list.

        Args:
            config (PuzzleConfig): The configuration for the puzzle.
            words (list[str]): The vocabulary, already normalized.
        """
        self.puzzle_config = config.to_dict()
        """dict representing the puzzle configuration."""

        self.chains = {chain_id: list(slots) for chain_id, slots in config.chains.items()}
        """Slot identifiers of each chain."""

        self.letters = dict(config.letters)
        """Pre-filled letters, by slot identifier."""

        self.words = list(words)
        """The vocabulary, in order."""

        self.connections: ConnectivityGraph = build_connections(self.words)
        """Connectivity graph of the vocabulary."""

        self.start_time = time()
        """Timestamp when the solver started, in seconds since the epoch."""

    def summary(self) -> dict[str, object]:
        """Return a dictionary-based summary of the task arguments."""
        n_edges = sum(len(successors) for successors in self.connections.values())
        return {
            "name": self.puzzle_config["name"],
            "chain_lengths": {chain_id: len(slots) for chain_id, slots in self.chains.items()},
            "letters": self.letters,
            "words_count": len(self.words),
            "connections_count": n_edges,
            "dead_ends": sum(1 for successors in self.connections.values() if not successors),
            "start_time": datetime.fromtimestamp(self.start_time)
            .astimezone()
            .strftime(TIMESTAMP_FMT),
        }
