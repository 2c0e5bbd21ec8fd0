"""Tests for vocabulary handling and the connectivity graph."""

import pytest

from wordchain.wordlist import (
    build_connections,
    index_words,
    load_word_list,
    normalize_words,
    words_to_mask,
)


class TestNormalizeWords:
    """Tests for normalize_words."""

    def test_uppercases_and_splits(self):
        assert normalize_words("toast Stop\nOPEN") == ["TOAST", "STOP", "OPEN"]

    def test_drops_short_tokens(self):
        assert normalize_words(["a TOAST I", "x"]) == ["TOAST"]

    def test_removes_duplicates_keeping_first(self):
        assert normalize_words(["stop toast", "STOP open toast"]) == ["STOP", "TOAST", "OPEN"]

    def test_empty(self):
        assert normalize_words("") == []
        assert normalize_words([]) == []


class TestLoadWordList:
    """Tests for load_word_list."""

    def test_load(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("toast\nstop open\n\nA\nenter\n", encoding="utf-8")
        assert load_word_list(path) == ["TOAST", "STOP", "OPEN", "ENTER"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_word_list(tmp_path / "missing.txt")


class TestBuildConnections:
    """Tests for build_connections."""

    def test_connections(self):
        words = ["TOAST", "STAND", "STOP", "OPEN", "ENTER"]
        assert build_connections(words) == {
            "TOAST": ["STAND", "STOP"],
            "STAND": [],
            "STOP": ["OPEN"],
            "OPEN": ["ENTER"],
            "ENTER": [],
        }

    def test_successors_keep_vocabulary_order(self):
        connections = build_connections(["STOP", "TOAST", "STAND"])
        assert connections["TOAST"] == ["STOP", "STAND"]

    def test_word_never_follows_itself(self):
        connections = build_connections(["ABAB", "ABC"])
        assert connections["ABAB"] == ["ABC"]

    def test_separate_vocabularies_do_not_connect(self):
        first = build_connections(["CAST", "MAST"])
        second = build_connections(["STEP", "MIST"])
        assert "STEP" not in first["CAST"]
        assert "STEP" not in first["MAST"]
        assert "CAST" not in second["MIST"]

    def test_empty_vocabulary(self):
        assert build_connections([]) == {}


class TestWordMasks:
    """Tests for index_words and words_to_mask."""

    def test_index_covers_graph_words(self):
        index = index_words(["TOAST"], {"TOAST": ["STOP"]})
        assert index == {"TOAST": 0, "STOP": 1}

    def test_mask(self):
        index = index_words(["TOAST", "STOP", "OPEN"], {})
        mask = words_to_mask(["OPEN", "UNKNOWN"], index)
        assert mask.tolist() == [0, 0, 1]
