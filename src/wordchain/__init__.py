"""Word Chain Puzzle Solver.

Fills an ordered sequence of letter slots with vocabulary words, where each word
overlaps the next by two letters.  Slots may be pre-filled, and a slot may repeat
within a chain or be shared between chains.  Uses backtracking to enumerate the
word sequences that satisfy every constraint.
"""

from sys import argv, exit

from .puzzle_config import load_configs
from .solver import solver


def main() -> None:
    """Main entry point for the word chain solver."""
    # Expect a single argument: path to the puzzle file
    if len(argv) != 2:
        print("Usage: python -m wordchain <path_to_puzzle_file>")
        exit(1)
    config_path = argv[1]
    configs = load_configs(config_path)

    for config in configs:
        solver.run(config)
