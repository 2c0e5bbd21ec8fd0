"""Depth-first search for the word sequences that fill a single chain."""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import NamedTuple

from bitarray import bitarray

from wordchain.chain import Chain, Letters, SlotId
from wordchain.solver.stats import SearchBudgetExceeded, SolverStats
from wordchain.solver.utils import append_word, format_word_chain
from wordchain.wordlist import WordIndex, index_words, words_to_mask


class ChainSolution(NamedTuple):
    """A word sequence that fills one chain."""

    words: tuple[str, ...]
    """The words, in chain order."""

    decoded: str
    """The letters the words spell, one per slot."""

    looped: bool = False
    """Whether the last word also connects back to the first one."""

    @property
    def reasoning(self) -> str:
        """Human-readable description of the solution."""
        kind = "looped solution" if self.looped else "solution"
        return f"Found a {kind} with the word chain: {format_word_chain(self.words)}"


def iter_chain_solutions(
    chain: Sequence[SlotId],
    letters: Letters,
    words: Sequence[str],
    connections: Mapping[str, Sequence[str]],
    forbidden: Iterable[str] = (),
    *,
    stats: SolverStats | None = None,
) -> Iterator[ChainSolution]:
    """Lazily generate every solution for a chain, in depth-first order.

    The input is validated before the search starts; the caller may stop consuming the
    iterator at any time, e.g. after the first solution.

    Args:
        chain: Slot identifiers, in reading order.  A repeated identifier is a crossover.
        letters: Known letters by slot identifier.
        words: The vocabulary: distinct uppercase words of length > 1.  The first word of
            a solution is tried in this order.
        connections: Connectivity graph of the vocabulary (see `build_connections`).
        forbidden: Words that may not be used, e.g. because another chain uses them.
        stats: Statistics and search budget.  The iterator raises `SearchBudgetExceeded`
            when the budget runs out.

    Raises:
        InvalidPuzzleError: If a letter is not a single character.
    """
    target = Chain(chain, letters)
    index = index_words(words, connections)
    blocked = words_to_mask(forbidden, index)
    return search_chain(
        target,
        words,
        connections,
        index=index,
        blocked=blocked,
        stats=SolverStats() if stats is None else stats,
    )


def solve_single_chain(
    chain: Sequence[SlotId],
    letters: Letters,
    words: Sequence[str],
    connections: Mapping[str, Sequence[str]],
    forbidden: Iterable[str] = (),
    *,
    stats: SolverStats | None = None,
) -> list[ChainSolution]:
    """Return all solutions for a chain.

    An empty list means the chain cannot be filled.  When `stats` carries a budget and it
    runs out, the solutions found so far are returned and `stats.budget_exhausted` is set.
    """
    solutions: list[ChainSolution] = []
    try:
        for solution in iter_chain_solutions(
            chain, letters, words, connections, forbidden, stats=stats
        ):
            solutions.append(solution)
    except SearchBudgetExceeded:
        pass
    return solutions


def search_chain(
    chain: Chain,
    words: Sequence[str],
    connections: Mapping[str, Sequence[str]],
    *,
    index: WordIndex,
    blocked: bitarray,
    stats: SolverStats,
) -> Iterator[ChainSolution]:
    """Generate the solutions of a prepared chain.

    Args:
        chain: The chain, with its constraints precomputed.
        words: The vocabulary.
        connections: Connectivity graph of the vocabulary.
        index: Bit positions of all words in `words` and `connections`.
        blocked: Mask of words that may not be used.  Never modified.
        stats: Statistics and search budget.
    """
    total_length = len(chain)
    if total_length == 0:
        return

    def _extend(decoded: str, placed: tuple[str, ...], used: bitarray) -> Iterator[ChainSolution]:
        # A chain of full length is either a solution or a dead end; it is never extended.
        if len(decoded) == total_length:
            if chain.is_satisfied(decoded):
                stats.solutions_found += 1
                looped = placed[0] in connections.get(placed[-1], ())
                yield ChainSolution(placed, decoded, looped)
            return

        if placed:
            last_word = placed[-1]
            candidates: Sequence[str] = connections.get(last_word, ())
        else:
            candidates = words

        for word in candidates:
            pos = index[word]
            if used[pos]:
                continue
            stats.visit(len(placed) + 1)

            new_decoded = append_word(decoded, word)
            if len(new_decoded) > total_length:
                continue
            if not chain.is_consistent(new_decoded):
                continue

            branch_used = used.copy()
            branch_used[pos] = 1
            yield from _extend(new_decoded, placed + (word,), branch_used)

    yield from _extend("", (), blocked)
