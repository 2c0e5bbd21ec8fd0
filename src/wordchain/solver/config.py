"""Word chain solver configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the word chain solver."""

    first_only: bool = False
    """Whether to stop at the first complete multi-chain solution. Default: False."""

    max_nodes: int | None = None
    """Maximum number of search nodes (tentative word placements). If None (default), no limit."""

    time_limit: float | None = None
    """Wall-clock limit for one solve, in seconds. If None (default), no limit."""

    report_interval: int = 100_000
    """Interval (in number of search nodes) at which to report progress. Default: 100,000."""

    max_solutions_shown: int = 20
    """Maximum number of solutions printed by the runner. Default: 20."""

    log_dir: str = "logs"
    """Directory in which per-puzzle log files are written. Default: "logs"."""

    word_list_path: str | None = None
    """Word list used for puzzle files without a words block. Default: None."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
