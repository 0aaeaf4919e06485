# wut/corrector/matcher.py
"""
Bounded nearest-neighbour search over a corpus.

Distances are optimal-string-alignment (restricted Damerau-Levenshtein):
insertions, deletions, substitutions and adjacent transpositions each cost
one edit, so ``gti`` is a single edit away from ``git``.
"""
from typing import Iterable, Optional

from rapidfuzz.distance import OSA

from wut.constants import MAX_DISTANCE_BY_LENGTH, MAX_DISTANCE_LONG, MIN_CONFIDENCE
from wut.corrector.errors import CorpusError
from wut.corrector.models import MatchResult
from wut.utils.logging import get_logger

logger = get_logger(__name__)


def max_distance_for(token: str) -> int:
    """Edits tolerated for a token: 1 up to 3 chars, 2 up to 6, else 3."""
    length = len(token)
    for limit, distance in MAX_DISTANCE_BY_LENGTH:
        if length <= limit:
            return distance
    return MAX_DISTANCE_LONG


def edit_distance(a: str, b: str, cutoff: Optional[int] = None) -> int:
    """OSA distance; values above ``cutoff`` come back as ``cutoff + 1``."""
    return OSA.distance(a, b, score_cutoff=cutoff)


def best_match(token: str, corpus: Iterable[str], max_distance: Optional[int] = None) -> Optional[MatchResult]:
    """
    Find the closest corpus entry to ``token``.

    Args:
        token: The (already lowercased) token to look up.
        corpus: Candidates, scanned in order. On ties the earliest wins.
        max_distance: Largest acceptable distance. Defaults to
            ``max_distance_for(token)``.

    Returns:
        The best ``MatchResult`` or None when the token is already a corpus
        member or nothing lies within ``max_distance``.
    """
    if corpus is None:
        raise CorpusError("best_match() needs a corpus, got None")
    if not token:
        return None

    if max_distance is None:
        max_distance = max_distance_for(token)

    token_len = len(token)
    best: Optional[str] = None
    best_distance = max_distance + 1

    for candidate in corpus:
        # Edit distance is never smaller than the length difference
        if abs(token_len - len(candidate)) > max_distance:
            continue

        distance = edit_distance(token, candidate, cutoff=max_distance)
        if distance == 0:
            return None
        if distance < best_distance:
            best = candidate
            best_distance = distance

    if best is None:
        return None

    logger.debug(f"Matched '{token}' to '{best}' at distance {best_distance}")
    return MatchResult(match=best, distance=best_distance)


def confidence(original: str, distance: int) -> float:
    """
    Confidence that a fix found at ``distance`` edits is right.

    Each edit costs more on short tokens; the result never drops below
    MIN_CONFIDENCE and never exceeds 1.0.
    """
    score = 1.0 - 1.5 * distance / (len(original) + 1)
    return max(MIN_CONFIDENCE, min(1.0, score))
