# tests/test_sentence.py
"""Tests for token-level sentence correction."""
import pytest

from wut.corrector.sentence import (
    collect_token_fixes, correct_sentence, is_literal_argument, missing_prefix,
)


def test_root_typo_with_valid_subcommand(store):
    correction = correct_sentence("gti status", store)
    assert correction.corrected == "git status"
    assert correction.confidence > 0.8
    assert "'gti' → 'git'" in correction.explanation


def test_fuzzy_root_and_subcommand(tiny_store):
    correction = correct_sentence("dockr rn", tiny_store)
    assert correction.corrected == "docker run"
    # Mean of the two per-token confidences
    assert correction.confidence == pytest.approx(((1 - 1.5 / 6) + (1 - 1.5 / 3)) / 2)


def test_subcommand_transposition(store):
    correction = correct_sentence("git stauts", store)
    assert correction.corrected == "git status"


def test_corrected_root_selects_subcommand_corpus(tiny_store):
    # "stsh" only makes sense as a git subcommand
    correction = correct_sentence("gti stsh", tiny_store)
    assert correction.corrected == "git stash"


def test_long_flag_keeps_prefix_and_value(tiny_store):
    correction = correct_sentence("docker run --nmae=web", tiny_store)
    assert correction.corrected == "docker run --name=web"
    assert "'--nmae=web' → '--name=web'" in correction.explanation


def test_long_flag_without_value(store):
    correction = correct_sentence("git push --forse", store)
    assert correction.corrected == "git push --force"


def test_short_flags_are_left_alone(tiny_store):
    rewritten, fixes = collect_token_fixes("docker run -itx", tiny_store)
    assert fixes == []
    assert rewritten == ["docker", "run", "-itx"]


@pytest.mark.parametrize("token", [
    "/etc/hosts", "./run.sh", "../up", "~/code", "https://example.com",
    "http://localhost:8080", "42", "-1.5", "file.txt", "KEY=value",
    "user@host", "$HOME", "*.py", "'quoted'",
])
def test_literal_arguments(token):
    assert is_literal_argument(token)


@pytest.mark.parametrize("token", ["status", "instal", "Verbose"])
def test_words_are_not_literal(token):
    assert not is_literal_argument(token)


def test_literal_arguments_are_never_corrected(tiny_store):
    rewritten, fixes = collect_token_fixes("git push /pth ./pth 1234", tiny_store)
    assert fixes == []
    assert rewritten == ["git", "push", "/pth", "./pth", "1234"]


def test_global_fallback_after_first_word(tiny_store):
    correction = correct_sentence("git push instal", tiny_store)
    assert correction.corrected == "git push install"


def test_global_fallback_for_root_without_corpus(tiny_store):
    correction = correct_sentence("ls verbos", tiny_store)
    assert correction.corrected == "ls verbose"


def test_uppercase_tokens_stay_uppercase(tiny_store):
    correction = correct_sentence("ls VERBOS", tiny_store)
    assert correction.corrected == "ls VERBOSE"


def test_quoted_message_is_not_corrected(store):
    assert correct_sentence("git commit -m 'instal the thing'", store) is None


def test_wrapper_commands_are_skipped(store):
    correction = correct_sentence("sudo gti status", store)
    assert correction.corrected == "sudo git status"


def test_multi_word_typo_replacement(store):
    correction = correct_sentence("cd..", store)
    assert correction.corrected == "cd .."


def test_no_fixes_means_no_correction(store):
    assert correct_sentence("git status", store) is None
    assert correct_sentence("docker run -it ubuntu", store) is None


def test_empty_command(store):
    assert correct_sentence("", store) is None
    assert correct_sentence("   ", store) is None
    assert collect_token_fixes("", store) == ([], [])


def test_missing_prefix(store):
    correction = correct_sentence("status", store)
    assert correction.corrected == "git status"
    assert correction.confidence == pytest.approx(0.78)
    assert "Did you forget 'git'?" in correction.explanation


def test_missing_prefix_keeps_arguments(store):
    correction = missing_prefix("checkout -b feature", store)
    assert correction.corrected == "git checkout -b feature"


def test_missing_prefix_ignores_known_roots(store):
    assert missing_prefix("git status", store) is None
    assert missing_prefix("ls -la", store) is None


def test_correction_is_idempotent(store):
    first = correct_sentence("gti stauts", store)
    assert first.corrected == "git status"
    assert correct_sentence(first.corrected, store) is None


@pytest.mark.parametrize("command", [
    "grep TODO notes",
    "git commit -m fixed",
    "cat file",
    "echo hello world",
])
def test_free_arguments_are_not_rewritten(store, command):
    assert correct_sentence(command, store) is None
