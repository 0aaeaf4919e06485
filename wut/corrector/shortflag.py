# wut/corrector/shortflag.py
"""
Short-flag cluster decoding.

A cluster such as ``-it`` or ``-xzvf`` packs several one-character flags
into a single token. Decoding maps each character to the long option it
stands for under a given root command, so ambiguous clusters can be
explained (and typos inside them spotted) without rewriting them silently.
"""
import re
from typing import List, Optional

from wut.constants import SHORT_FLAG_CONFIDENCE
from wut.corrector.corpus import CorpusStore, get_default_store
from wut.corrector.models import Correction, ShortFlagClusterResult
from wut.utils.command_utils import split_command
from wut.utils.logging import get_logger

logger = get_logger(__name__)

# One dash, then at least two flag characters
CLUSTER_PATTERN = re.compile(r"^-[^-].+$")


def is_short_flag_cluster(token: str) -> bool:
    return bool(CLUSTER_PATTERN.match(token))


def analyse_short_flag_cluster(
    root: str,
    cluster: str,
    store: Optional[CorpusStore] = None,
) -> Optional[ShortFlagClusterResult]:
    """
    Decode ``cluster`` for ``root``.

    Returns None when the token is not a cluster, the root has no short-flag
    table, or not a single character is recognised.
    """
    if not is_short_flag_cluster(cluster):
        return None

    store = store or get_default_store()
    table = store.short_flags(root)
    if not table:
        return None

    result = ShortFlagClusterResult(original=cluster)
    long_parts: List[str] = []
    for char in cluster[1:]:
        info = table.get(char)
        if info is None:
            result.unknown_flags.append(char)
            continue
        long_parts.append(info.long_option)
        result.mapping.append((char, info.long_option))
        result.annotations[char] = info.description

    if not long_parts:
        return None

    result.expansion = " ".join(long_parts)
    return result


def explain_short_flag_cluster(root: str, cluster: str, store: Optional[CorpusStore] = None) -> str:
    """
    Human-readable expansion of a cluster.

    Example: ``docker``, ``-it`` gives
    ``--interactive (Keep STDIN open)  --tty (Allocate a pseudo-TTY)``.
    """
    store = store or get_default_store()
    if analyse_short_flag_cluster(root, cluster, store) is None:
        return ""

    table = store.short_flags(root)
    parts = []
    for char in cluster[1:]:
        info = table.get(char)
        if info is None:
            parts.append(f"-{char} (unknown)")
        else:
            parts.append(f"{info.long_option} ({info.description})")
    return "  ".join(parts)


def expand_short_flags(
    command: str,
    store: Optional[CorpusStore] = None,
    only_ambiguous: bool = False,
) -> Optional[Correction]:
    """
    Rewrite decodable clusters in ``command`` into their long options.

    This is the review path: the result explains what each character means
    rather than claiming a typo was fixed. With ``only_ambiguous`` set, only
    clusters containing at least one unknown character are expanded.
    """
    tokens = split_command(command)
    if len(tokens) < 2:
        return None

    store = store or get_default_store()
    root = tokens[0].lower()
    if store.short_flags(root) is None:
        return None

    rewritten = list(tokens)
    pairs: List[str] = []
    unknown: List[str] = []
    for index, token in enumerate(tokens[1:], start=1):
        result = analyse_short_flag_cluster(root, token, store)
        if result is None or (only_ambiguous and not result.has_unknown):
            continue
        rewritten[index] = result.expansion
        pairs.extend(result.pairs())
        unknown.extend(f"-{char}" for char in result.unknown_flags)

    if not pairs:
        return None

    explanation = "Flag cluster expanded: " + ", ".join(pairs)
    if unknown:
        explanation += f" (unknown for {root}: {', '.join(unknown)})"

    logger.debug(f"Expanded short flags in '{command}'")
    return Correction(
        original=command,
        corrected=" ".join(rewritten),
        confidence=SHORT_FLAG_CONFIDENCE,
        explanation=explanation,
    )
