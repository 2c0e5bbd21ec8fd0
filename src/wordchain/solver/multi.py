"""Combination of single-chain solutions across several chains.

Chains are solved one after another, in declaration order.  Letters decoded by the
chains accepted so far are carried to the slots they share with later chains, and words
used by an accepted chain are blocked for all later chains.
"""

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

from bitarray import bitarray
from bitarray.util import zeros

from wordchain.chain import Chain, Letters, SlotId, validate_letters
from wordchain.solver.single import ChainSolution, search_chain
from wordchain.solver.stats import SearchBudgetExceeded, SolverStats
from wordchain.solver.utils import int_comma
from wordchain.wordlist import WordIndex, index_words, words_to_mask

MultiSolution: TypeAlias = dict[str, ChainSolution]
"""Maps each (non-empty) chain to its solution."""

Chains: TypeAlias = Mapping[str, Sequence[SlotId]]
"""Maps chain names to their slot identifiers, in declaration order."""

FOUND_MSG = "Successfully found {n} solution(s)."
NOT_FOUND_MSG = "Could not find a valid solution that satisfies all chain constraints."
BUDGET_MSG = "Search budget exhausted after {nodes} nodes; results may be incomplete."


@dataclass
class MultiChainResult:
    """Result of a multi-chain solve."""

    solutions: list[MultiSolution] = field(default_factory=list)
    """Complete solutions, in depth-first discovery order."""

    reasoning: str = ""
    """Diagnostic message for display."""

    budget_exhausted: bool = False
    """Whether the search was cut short by the search budget."""

    @property
    def solution(self) -> MultiSolution | None:
        """The first solution found, if any."""
        return self.solutions[0] if self.solutions else None


def iter_multi_solutions(
    chains: Chains,
    letters: Letters,
    words: Sequence[str],
    connections: Mapping[str, Sequence[str]],
    *,
    stats: SolverStats | None = None,
) -> Iterator[MultiSolution]:
    """Lazily generate every complete multi-chain solution, in depth-first order.

    Empty chains are ignored and never appear in a solution.

    Args:
        chains: Slot identifiers of each chain.  Identifiers shared between chains must
            decode to the same letter in every chain.
        letters: Known letters by slot identifier, shared by all chains.
        words: The vocabulary.  No word may be used by more than one chain.
        connections: Connectivity graph of the vocabulary.
        stats: Statistics and search budget.  The iterator raises `SearchBudgetExceeded`
            when the budget runs out.

    Raises:
        InvalidPuzzleError: If a letter is not a single character.
    """
    known = validate_letters(letters)
    entries = [(chain_id, tuple(slots)) for chain_id, slots in chains.items() if len(slots) > 0]
    index = index_words(words, connections)
    return _search_chains(
        entries,
        known,
        words,
        connections,
        index=index,
        stats=SolverStats() if stats is None else stats,
    )


def _search_chains(
    entries: list[tuple[str, tuple[SlotId, ...]]],
    known: dict[SlotId, str],
    words: Sequence[str],
    connections: Mapping[str, Sequence[str]],
    *,
    index: WordIndex,
    stats: SolverStats,
) -> Iterator[MultiSolution]:
    def _assign(
        chain_no: int,
        solved: MultiSolution,
        inferred: dict[SlotId, str],
        used: bitarray,
    ) -> Iterator[MultiSolution]:
        if chain_no >= len(entries):
            yield solved
            return

        chain_id, slots = entries[chain_no]
        # Explicit letters always win over letters inferred from other chains
        chain = Chain(slots, {**inferred, **known})

        for solution in search_chain(
            chain, words, connections, index=index, blocked=used, stats=stats
        ):
            next_inferred = dict(inferred)
            for slot_id, ch in chain.letters_at(solution.decoded).items():
                next_inferred.setdefault(slot_id, ch)
            yield from _assign(
                chain_no + 1,
                {**solved, chain_id: solution},
                next_inferred,
                used | words_to_mask(solution.words, index),
            )

    yield from _assign(0, {}, {}, zeros(len(index)))


def solve_multi_chain(
    chains: Chains,
    letters: Letters,
    words: Sequence[str],
    connections: Mapping[str, Sequence[str]],
    *,
    stats: SolverStats | None = None,
) -> MultiChainResult:
    """Return every complete multi-chain solution.

    When `stats` carries a budget and it runs out, the solutions found so far are
    returned with `budget_exhausted` set.
    """
    stats = SolverStats() if stats is None else stats
    solutions: list[MultiSolution] = []
    try:
        for solution in iter_multi_solutions(chains, letters, words, connections, stats=stats):
            solutions.append(solution)
    except SearchBudgetExceeded:
        pass
    return _make_result(solutions, stats)


def solve_multi_chain_first(
    chains: Chains,
    letters: Letters,
    words: Sequence[str],
    connections: Mapping[str, Sequence[str]],
    *,
    stats: SolverStats | None = None,
) -> MultiChainResult:
    """Return the first complete multi-chain solution in depth-first order, if any."""
    stats = SolverStats() if stats is None else stats
    solutions: list[MultiSolution] = []
    solution_iter = iter_multi_solutions(chains, letters, words, connections, stats=stats)
    try:
        first = next(solution_iter, None)
    except SearchBudgetExceeded:
        first = None
    if first is not None:
        solutions.append(first)
    return _make_result(solutions, stats)


def _make_result(solutions: list[MultiSolution], stats: SolverStats) -> MultiChainResult:
    if solutions:
        reasoning = FOUND_MSG.format(n=len(solutions))
    else:
        reasoning = NOT_FOUND_MSG
    if stats.budget_exhausted:
        reasoning += " " + BUDGET_MSG.format(nodes=int_comma(stats.nodes_visited))
    return MultiChainResult(
        solutions=solutions,
        reasoning=reasoning,
        budget_exhausted=stats.budget_exhausted,
    )


def assign_letters(chains: Chains, solution: MultiSolution) -> dict[SlotId, str]:
    """Map every slot of the solved chains to its letter, for painting back onto the puzzle."""
    letters: dict[SlotId, str] = {}
    for chain_id, chain_solution in solution.items():
        for slot_id, ch in zip(chains[chain_id], chain_solution.decoded):
            letters.setdefault(slot_id, ch)
    return letters
