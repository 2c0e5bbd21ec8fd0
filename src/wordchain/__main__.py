"""Main entry point for the word chain solver: ``python -m wordchain <puzzle_file>``."""

from wordchain import main

main()
