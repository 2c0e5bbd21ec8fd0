"""Tests for the command-line runner."""

import pytest

import wordchain
from wordchain.puzzle_config import parse_puzzle
from wordchain.solver import solver as solver_module
from wordchain.solver.config import SolverConfig


@pytest.fixture
def use_config(monkeypatch, tmp_path):
    """Install a solver configuration that writes logs under tmp_path."""

    def _use(**kwargs) -> SolverConfig:
        cfg = SolverConfig(log_dir=str(tmp_path / "logs"), **kwargs)
        monkeypatch.setattr(solver_module, "solver_config", cfg)
        return cfg

    return _use


@pytest.fixture
def puzzle():
    return parse_puzzle(
        "TOAST STOP OPEN ENTER COAST\nmain: " + " ".join(f"c{i}" for i in range(12)),
        name="toast",
    )


class TestRun:
    """Tests for solver.run."""

    def test_run_writes_log(self, use_config, puzzle, tmp_path, capsys):
        use_config()

        result = solver_module.run(puzzle)

        assert len(result.solutions) == 2
        out = capsys.readouterr().out
        assert "Successfully found 2 solution(s)." in out
        assert "main: TOASTOPENTER (TOAST -> STOP -> OPEN -> ENTER)" in out

        log = (tmp_path / "logs" / "toast.log").read_text(encoding="utf-8")
        assert "Selected puzzle: toast" in log
        assert "letters: c0=T c1=O" in log
        assert "Search statistics:" in log

    def test_first_only(self, use_config, puzzle):
        use_config(first_only=True)

        result = solver_module.run(puzzle)

        assert [s["main"].decoded for s in result.solutions] == ["TOASTOPENTER"]

    def test_solutions_shown_are_capped(self, use_config, puzzle, capsys):
        use_config(max_solutions_shown=1)

        solver_module.run(puzzle)

        assert "... and 1 more (see log file)." in capsys.readouterr().out

    def test_node_budget(self, use_config, puzzle, capsys):
        use_config(max_nodes=1)

        result = solver_module.run(puzzle)

        assert result.budget_exhausted
        assert "budget exhausted" in capsys.readouterr().out

    def test_word_list_fallback(self, use_config, tmp_path):
        word_file = tmp_path / "words.txt"
        word_file.write_text("LEADER\nERASER\n", encoding="utf-8")
        use_config(word_list_path=str(word_file))
        config = parse_puzzle("x: c0 c1 c2 c3 c4 c5 c6 c7 c1 c5", name="leader")

        result = solver_module.run(config)

        assert result.solution["x"].words == ("LEADER", "ERASER")


class TestMain:
    """Tests for the command-line entry point."""

    def test_usage(self, monkeypatch, capsys):
        monkeypatch.setattr(wordchain, "argv", ["wordchain"])

        with pytest.raises(SystemExit) as exc_info:
            wordchain.main()

        assert exc_info.value.code == 1
        assert "Usage" in capsys.readouterr().out

    def test_main_solves_every_puzzle(self, monkeypatch, use_config, tmp_path, capsys):
        use_config()
        path = tmp_path / "pair.txt"
        path.write_text(
            "TOAST STOP OPEN ENTER\nmain: " + " ".join(f"c{i}" for i in range(12))
            + "\n---\nLEADER ERASER\nx: c0 c1 c2 c3 c4 c5 c6 c7 c1 c5\n",
            encoding="utf-8",
        )
        monkeypatch.setattr(wordchain, "argv", ["wordchain", str(path)])

        wordchain.main()

        assert (tmp_path / "logs" / "pair.log").is_file()
        assert (tmp_path / "logs" / "pair-2.log").is_file()
        assert capsys.readouterr().out.count("Successfully found 1 solution(s).") == 2
