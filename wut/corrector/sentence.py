# wut/corrector/sentence.py
"""
Token-level correction of a whole command line.

The first token is resolved against the root-command corpus; the (possibly
corrected) root then decides which subcommand and long-flag corpora apply to
the remaining tokens. Literal arguments (paths, URLs, numbers, quoted
strings) are never touched and short flags are left to the cluster decoder.
"""
import re
from typing import List, Optional, Tuple

from wut.constants import KNOWN_TYPO_CONFIDENCE, MISSING_PREFIX_CONFIDENCE
from wut.corrector.corpus import Corpus, CorpusStore, get_default_store
from wut.corrector.matcher import best_match, confidence
from wut.corrector.models import Correction, TokenFix, mean_confidence
from wut.utils.command_utils import split_command
from wut.utils.logging import get_logger

logger = get_logger(__name__)

NUMERIC_PATTERN = re.compile(r"^[+-]?\d+(?:\.\d+)?$")
PATH_PREFIXES = ("/", "./", "../", "~", "http")
QUOTE_CHARS = ("'", '"')
LITERAL_MARKERS = ("/", ".", "=", ":", "@", "$", "`", "\\", "*", "?")

# Commands that run the command after them
WRAPPER_COMMANDS = ("sudo", "doas", "nohup", "time", "command", "exec")


def is_literal_argument(token: str) -> bool:
    """Paths, URLs, numbers and quoted or expanded values are kept verbatim."""
    if (
        token.startswith(PATH_PREFIXES)
        or "://" in token
        or NUMERIC_PATTERN.match(token)
    ):
        return True

    # File names, assignments, globs, variables and anything quoted
    if any(marker in token for marker in LITERAL_MARKERS + QUOTE_CHARS):
        return True

    return not any(char.isalpha() for char in token)


def _match_token(lowered: str, corpus: Corpus) -> Optional[TokenFix]:
    result = best_match(lowered, corpus)
    if result is None:
        return None
    return TokenFix(
        original=lowered,
        corrected=result.match,
        distance=result.distance,
        confidence=confidence(lowered, result.distance),
    )


def _root_index(lowered: List[str]) -> int:
    """Position of the real root, skipping wrappers such as ``sudo``."""
    index = 0
    while index < len(lowered) - 1 and lowered[index] in WRAPPER_COMMANDS:
        index += 1
    return index


def _resolve_root(token: str, lowered: str, store: CorpusStore) -> Tuple[str, Optional[TokenFix]]:
    """Return the root to use as context plus the fix applied to it, if any."""
    known = store.root_typo(lowered)
    if known is not None:
        # Multi-word replacements such as "cd.." -> "cd .." keep their first word as context
        return known.split()[0], TokenFix(token, known, 1, KNOWN_TYPO_CONFIDENCE)

    if is_literal_argument(token):
        return lowered, None

    roots = store.roots()
    if lowered in roots:
        return lowered, None

    # A bare subcommand like "status" belongs to its parent tool, not to a
    # nearby root such as "stat"
    if store.parent_tool_for(lowered) is not None:
        return lowered, None

    fix = _match_token(lowered, roots)
    if fix is None:
        return lowered, None
    return fix.corrected, TokenFix(token, fix.corrected, fix.distance, fix.confidence)


def _fix_long_flag(token: str, flags: Corpus) -> Optional[Tuple[str, TokenFix]]:
    """Correct ``--name`` or ``--name=value``, keeping prefix and value."""
    if not flags:
        return None

    body = token[2:]
    name, sep, value = body.partition("=")
    lowered = name.lower()
    if not lowered or lowered in flags:
        return None

    fix = _match_token(lowered, flags)
    if fix is None:
        return None

    replacement = f"--{fix.corrected}{sep}{value}"
    return replacement, TokenFix(token, replacement, fix.distance, fix.confidence)


def _apply_case(original: str, replacement: str) -> str:
    if original.isupper():
        return replacement.upper()
    return replacement


def _fix_word(token: str, lowered: str, subcommands: Corpus, store: CorpusStore, first_word: bool) -> Optional[Tuple[str, TokenFix]]:
    global_words = store.global_words()

    if first_word and subcommands:
        if lowered in subcommands:
            return None
        fix = _match_token(lowered, subcommands)
        if fix is None:
            if lowered in global_words:
                return None
            fix = _match_token(lowered, global_words)
    else:
        if lowered in global_words:
            return None
        fix = _match_token(lowered, global_words)

    if fix is None:
        return None

    replacement = _apply_case(token, fix.corrected)
    return replacement, TokenFix(token, replacement, fix.distance, fix.confidence)


def _toggles_quote(token: str) -> bool:
    return any(token.count(quote) % 2 == 1 for quote in QUOTE_CHARS)


def collect_token_fixes(command: str, store: Optional[CorpusStore] = None) -> Tuple[List[str], List[TokenFix]]:
    """
    Correct each token of ``command``.

    Returns:
        The rewritten token list and the fixes applied, in token order.
    """
    store = store or get_default_store()
    tokens = split_command(command)
    if not tokens:
        return [], []

    lowered = [token.lower() for token in tokens]
    fixes: List[TokenFix] = []
    rewritten = list(tokens)

    start = _root_index(lowered)
    root, root_fix = _resolve_root(tokens[start], lowered[start], store)
    if root_fix is not None:
        rewritten[start] = root_fix.corrected
        fixes.append(root_fix)

    subcommands = store.subcommands(root)
    flags = store.long_flags(root)
    seen_word = False
    in_quote = False

    for index in range(start + 1, len(tokens)):
        token = tokens[index]

        # Words inside a quoted string are message text, not arguments
        if in_quote or _toggles_quote(token):
            if _toggles_quote(token):
                in_quote = not in_quote
            seen_word = True
            continue

        if token.startswith("-"):
            # Short flags and clusters belong to the cluster decoder
            if token.startswith("--") and len(token) > 2:
                result = _fix_long_flag(token, flags)
                if result is not None:
                    rewritten[index], fix = result
                    fixes.append(fix)
            continue

        if is_literal_argument(token):
            seen_word = True
            continue

        result = _fix_word(token, lowered[index], subcommands, store, first_word=not seen_word)
        seen_word = True
        if result is not None:
            rewritten[index], fix = result
            fixes.append(fix)

    return rewritten, fixes


def missing_prefix(command: str, store: Optional[CorpusStore] = None) -> Optional[Correction]:
    """Suggest ``git status`` for ``status`` and the like."""
    store = store or get_default_store()
    tokens = split_command(command)
    if not tokens:
        return None

    lowered = [token.lower() for token in tokens]
    start = _root_index(lowered)
    first = lowered[start]
    if first in store.roots() or store.root_typo(first) is not None:
        return None

    tool = store.parent_tool_for(first)
    if tool is None:
        return None

    rewritten = tokens[:start] + [tool] + tokens[start:]
    corrected = " ".join(rewritten)
    return Correction(
        original=command,
        corrected=corrected,
        confidence=MISSING_PREFIX_CONFIDENCE,
        explanation=f"Did you forget '{tool}'? Try: {corrected}",
    )


def correct_sentence(command: str, store: Optional[CorpusStore] = None) -> Optional[Correction]:
    """
    Correct every token of a command line and merge the result.

    Returns:
        One ``Correction`` whose confidence is the mean of the per-token
        confidences, or None when no token needed fixing.
    """
    store = store or get_default_store()
    rewritten, fixes = collect_token_fixes(command, store)
    if not rewritten:
        return None

    if not fixes:
        return missing_prefix(command, store)

    corrected = " ".join(rewritten)
    logger.debug(f"Sentence corrected: '{command}' -> '{corrected}'", extra={"fixes": len(fixes)})
    return Correction(
        original=command,
        corrected=corrected,
        confidence=mean_confidence(fixes),
        explanation="Did you mean: " + ", ".join(fix.describe() for fix in fixes),
    )
