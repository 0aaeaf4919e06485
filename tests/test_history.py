# tests/test_history.py
"""Tests for the history fallback matcher."""
import pytest
from rapidfuzz.distance import Levenshtein

from wut.corrector.history import history_confidence, match_history


def test_closest_entry_wins():
    correction = match_history("git stauts", ["docker ps", "git status", "git stash"])
    assert correction.corrected == "git status"
    assert correction.confidence == pytest.approx(0.5)
    assert "git status" in correction.explanation


def test_identical_entry_is_never_returned():
    assert match_history("git status", ["git status"]) is None


def test_identical_entry_is_skipped_for_a_near_one():
    correction = match_history("git status", ["git status", "git statu"])
    assert correction.corrected == "git statu"
    assert correction.confidence == pytest.approx(0.6)


def test_tie_goes_to_earliest_entry():
    assert match_history("abc", ["abd", "abe"]).corrected == "abd"


def test_cutoff_is_exclusive():
    assert match_history("abcdef", ["abcxyz"], max_distance=3) is None
    assert match_history("abcdef", ["abcxyf"], max_distance=3).corrected == "abcxyf"


@pytest.mark.parametrize("entry", ["kubectl get pods", "x", "git status --short", "gti sttaus"])
def test_never_matches_at_or_beyond_cutoff(entry):
    command = "git status"
    correction = match_history(command, [entry], max_distance=3)
    distance = Levenshtein.distance(command, entry)
    if correction is None:
        assert distance >= 3 or distance == 0
    else:
        assert 0 < distance < 3


def test_empty_inputs():
    assert match_history("", ["git status"]) is None
    assert match_history("git status", []) is None
    assert match_history("git status", None) is None


def test_confidence_decays_linearly_with_floor():
    assert history_confidence(1) == pytest.approx(0.6)
    assert history_confidence(2) == pytest.approx(0.5)
    assert history_confidence(10) == pytest.approx(0.3)


def test_original_keeps_the_typed_text():
    correction = match_history("  make buidl ", ["make build"])
    assert correction.original == "  make buidl "
    assert correction.corrected == "make build"
