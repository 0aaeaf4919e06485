# wut/corrector/history.py
"""
Whole-command fuzzy matching against previously issued commands.
"""
from typing import Iterable, Optional

from rapidfuzz.distance import Levenshtein

from wut.constants import (
    HISTORY_BASE_CONFIDENCE, HISTORY_CONFIDENCE_STEP, HISTORY_MAX_DISTANCE, MIN_CONFIDENCE,
)
from wut.corrector.models import Correction
from wut.utils.logging import get_logger

logger = get_logger(__name__)


def history_confidence(distance: int) -> float:
    """Linear decay from the baseline, floored at MIN_CONFIDENCE."""
    return max(MIN_CONFIDENCE, HISTORY_BASE_CONFIDENCE - HISTORY_CONFIDENCE_STEP * distance)


def match_history(
    command: str,
    history: Optional[Iterable[str]],
    max_distance: int = HISTORY_MAX_DISTANCE,
) -> Optional[Correction]:
    """
    Find the history entry closest to ``command``.

    Args:
        command: The command line as typed.
        history: Previous commands, most relevant first. On ties the earliest
            entry wins.
        max_distance: Exclusive cutoff; only entries strictly closer than
            this are considered.

    Returns:
        A ``Correction`` pointing at the closest entry, or None. An entry
        identical to ``command`` is never returned.
    """
    typed = command.strip()
    if not typed or not history:
        return None

    best: Optional[str] = None
    best_distance = max_distance
    length = len(typed)

    for entry in history:
        if not entry:
            continue
        # Same pre-filter as the token matcher: length difference bounds distance
        if abs(length - len(entry)) >= best_distance:
            continue

        distance = Levenshtein.distance(typed, entry, score_cutoff=best_distance - 1)
        if 0 < distance < best_distance:
            best = entry
            best_distance = distance

    if best is None:
        return None

    logger.debug(f"History match for '{typed}': '{best}' at distance {best_distance}")
    return Correction(
        original=command,
        corrected=best,
        confidence=history_confidence(best_distance),
        explanation=f"Similar to a command in your history: '{best}'",
    )
