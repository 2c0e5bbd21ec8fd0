"""Search statistics and the optional search budget."""

from dataclasses import dataclass, field
from time import time
from typing import TextIO

from wordchain.solver.config import SolverConfig
from wordchain.solver.utils import int_comma, time_str


class SearchBudgetExceeded(Exception):
    """Raised inside the search when the node or time budget runs out."""

    pass


@dataclass(kw_only=True)
class SolverStats:
    """Statistics collected during solving, and the limits the search must respect.

    One node is one tentative word placement.  A single instance may be shared by
    several single-chain searches so that the budget covers a whole multi-chain solve.
    """

    max_nodes: int | None = None
    """Stop searching after this many nodes.  None means unlimited."""

    time_limit: float | None = None
    """Stop searching after this many seconds.  None means unlimited."""

    report_interval: int = 100_000
    """Report progress to `out` every this many nodes."""

    out: TextIO | None = None
    """Stream for progress reports, or None for a silent search."""

    nodes_visited: int = 0
    """Number of nodes visited so far."""

    solutions_found: int = 0
    """Number of complete single-chain solutions accepted."""

    max_depth_reached: int = 0
    """Maximum number of words placed in one chain."""

    budget_exhausted: bool = False
    """Whether the search was cut short by the budget."""

    start_time: float = field(default_factory=time)
    """Timestamp when solving started."""

    @classmethod
    def from_config(cls, config: SolverConfig, *, out: TextIO | None = None) -> "SolverStats":
        """Create stats with the limits given in the solver configuration."""
        return cls(
            max_nodes=config.max_nodes,
            time_limit=config.time_limit,
            report_interval=config.report_interval,
            out=out,
        )

    @property
    def elapsed(self) -> float:
        """Seconds since solving started."""
        return time() - self.start_time

    def visit(self, depth: int) -> None:
        """Count one node at the given depth, enforcing the budget.

        Raises:
            SearchBudgetExceeded: If the node or time budget is used up.
        """
        self.nodes_visited += 1
        if depth > self.max_depth_reached:
            self.max_depth_reached = depth

        if self.max_nodes is not None and self.nodes_visited > self.max_nodes:
            self.budget_exhausted = True
            raise SearchBudgetExceeded(f"Node budget of {int_comma(self.max_nodes)} exceeded.")
        if self.time_limit is not None and self.elapsed > self.time_limit:
            self.budget_exhausted = True
            raise SearchBudgetExceeded(f"Time limit of {self.time_limit}s exceeded.")

        if (
            self.out is not None
            and self.report_interval > 0
            and self.nodes_visited % self.report_interval == 0
        ):
            print(
                f"[{time_str(self.elapsed)}] nodes={int_comma(self.nodes_visited)}, "
                f"solutions={int_comma(self.solutions_found)}, "
                f"max depth={self.max_depth_reached}",
                file=self.out,
                flush=True,
            )

    def summary(self) -> dict[str, object]:
        """Return a dictionary-based summary of the statistics."""
        return {
            "nodes_visited": self.nodes_visited,
            "solutions_found": self.solutions_found,
            "max_depth_reached": self.max_depth_reached,
            "budget_exhausted": self.budget_exhausted,
            "elapsed": time_str(self.elapsed),
        }
