# tests/test_shortflag.py
"""Tests for short-flag cluster decoding."""
import pytest

from wut.corrector.shortflag import (
    analyse_short_flag_cluster, expand_short_flags, explain_short_flag_cluster, is_short_flag_cluster,
)


@pytest.mark.parametrize("token,expected", [
    ("-it", True), ("-xzvf", True), ("-i", False), ("--tty", False), ("-", False), ("it", False),
])
def test_cluster_detection(token, expected):
    assert is_short_flag_cluster(token) is expected


def test_docker_it(store):
    result = analyse_short_flag_cluster("docker", "-it", store)
    assert "--interactive" in result.expansion
    assert "--tty" in result.expansion
    assert result.unknown_flags == []
    assert not result.has_unknown
    assert result.pairs() == ["-i→--interactive", "-t→--tty"]


def test_unknown_characters_are_recorded(store):
    result = analyse_short_flag_cluster("docker", "-itz", store)
    assert result.expansion == "--interactive --tty"
    assert result.unknown_flags == ["z"]
    assert result.annotations["i"] == "Keep STDIN open"


def test_characters_are_case_sensitive(store):
    result = analyse_short_flag_cluster("git", "-dD", store)
    assert result.expansion == "--delete --delete --force"


def test_root_without_table_is_a_no_op(store):
    assert analyse_short_flag_cluster("nosuchtool", "-it", store) is None
    assert expand_short_flags("nosuchtool -it", store) is None


def test_cluster_with_no_known_character(store):
    assert analyse_short_flag_cluster("docker", "-zZ", store) is None


def test_single_short_flag_is_not_a_cluster(store):
    assert analyse_short_flag_cluster("docker", "-i", store) is None


def test_expand_for_review(store):
    correction = expand_short_flags("tar -xzvf archive.tar.gz", store)
    assert correction.corrected == "tar --extract --gzip --verbose --file archive.tar.gz"
    assert correction.confidence == pytest.approx(0.8)
    assert correction.explanation.startswith("Flag cluster expanded: -x→--extract")


def test_expand_only_ambiguous(store):
    assert expand_short_flags("docker run -it ubuntu", store, only_ambiguous=True) is None

    correction = expand_short_flags("docker run -itz ubuntu", store, only_ambiguous=True)
    assert correction.corrected == "docker run --interactive --tty ubuntu"
    assert "unknown for docker: -z" in correction.explanation


def test_explain(store):
    text = explain_short_flag_cluster("docker", "-it", store)
    assert text == "--interactive (Keep STDIN open)  --tty (Allocate a pseudo-TTY)"


def test_explain_marks_unknown(store):
    text = explain_short_flag_cluster("docker", "-iz", store)
    assert "-z (unknown)" in text


def test_explain_undecodable(store):
    assert explain_short_flag_cluster("nosuchtool", "-it", store) == ""
