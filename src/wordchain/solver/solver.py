"""Main solver module for word chain puzzles."""

import sys
from datetime import datetime
from pathlib import Path
from pprint import pprint
from typing import TextIO

from wordchain.puzzle_config import PuzzleConfig
from wordchain.solver.config import config as solver_config
from wordchain.solver.multi import (
    MultiChainResult,
    MultiSolution,
    assign_letters,
    solve_multi_chain,
    solve_multi_chain_first,
)
from wordchain.solver.stats import SolverStats
from wordchain.solver.task_args import TaskArgs
from wordchain.solver.utils import TIMESTAMP_FMT, format_word_chain, time_str
from wordchain.wordlist import load_word_list


def format_solution(solution: MultiSolution) -> list[str]:
    """Format one multi-chain solution as display lines, one per chain."""
    return [
        f"{chain_id}: {chain_solution.decoded} ({format_word_chain(chain_solution.words)})"
        + (" [looped]" if chain_solution.looped else "")
        for chain_id, chain_solution in solution.items()
    ]


def run(config: PuzzleConfig) -> MultiChainResult:
    """Run the solver on the given configuration.

    Progress is written to a log file under the configured log directory; the outcome is
    printed to stdout.

    Args:
        config (PuzzleConfig): The configuration for the puzzle to solve.
    """
    print(f"config: {config.name}")

    logfile = Path(solver_config.log_dir) / f"{config.name}.log"
    print(f"Log file: {logfile}")

    logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            result = solve_one(config, logf=logf)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.")
            sys.exit(1)

    print(result.reasoning)
    for i, solution in enumerate(result.solutions[: solver_config.max_solutions_shown], start=1):
        print(f"Solution {i}:")
        for line in format_solution(solution):
            print(f"  {line}")
    n_hidden = len(result.solutions) - solver_config.max_solutions_shown
    if n_hidden > 0:
        print(f"... and {n_hidden} more (see log file).")
    print()
    return result


def solve_one(puzzle_config: PuzzleConfig, *, logf: TextIO) -> MultiChainResult:
    """Attempt to solve a word chain puzzle given a starting configuration.

    Args:
        puzzle_config (PuzzleConfig): The configuration for the puzzle to solve.
        logf: File object to log the solving process.
    """
    print(f"Selected puzzle: {puzzle_config.name}", file=logf, flush=True)
    print(str(puzzle_config), file=logf, flush=True)
    print("", file=logf, flush=True)

    words = puzzle_config.words
    if not words and solver_config.word_list_path:
        print(f"Loading word list from {solver_config.word_list_path}", file=logf, flush=True)
        words = load_word_list(solver_config.word_list_path)

    task_args = TaskArgs(config=puzzle_config, words=words)

    print("Solver config:", file=logf, flush=True)
    pprint(solver_config.model_dump(), stream=logf, width=120)
    print("Solver initialized with:", file=logf, flush=True)
    pprint(task_args.summary(), stream=logf, width=120)
    print("", file=logf, flush=True)
    print("#" * 80, file=logf, flush=True)
    print("", file=logf, flush=True)

    # Start time as formatted string (in local timezone)
    start_time_str = (
        datetime.fromtimestamp(task_args.start_time).astimezone().strftime(TIMESTAMP_FMT)
    )
    print(f"Start time: {start_time_str}", file=logf, flush=True)

    stats = SolverStats.from_config(solver_config, out=logf)
    solve = solve_multi_chain_first if solver_config.first_only else solve_multi_chain
    result = solve(
        task_args.chains,
        task_args.letters,
        task_args.words,
        task_args.connections,
        stats=stats,
    )

    print(result.reasoning, file=logf, flush=True)
    for i, solution in enumerate(result.solutions, start=1):
        print(f"Solution {i}:", file=logf, flush=True)
        for line in format_solution(solution):
            print(f"  {line}", file=logf, flush=True)
        letters = assign_letters(task_args.chains, solution)
        print(
            "  letters: " + " ".join(f"{slot_id}={ch}" for slot_id, ch in letters.items()),
            file=logf,
            flush=True,
        )

    print("", file=logf, flush=True)
    print("Search statistics:", file=logf, flush=True)
    pprint(stats.summary(), stream=logf, width=120)
    print(f"Time taken: {time_str(stats.elapsed)}", file=logf, flush=True)
    return result
