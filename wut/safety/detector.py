# wut/safety/detector.py
"""
Detection of commands that can destroy a system.

Three checks run in order: the curated destructive-command list (exact or
prefix, case-insensitive), recursive deletion of a root-like
path, and redirection onto a raw disk device.
"""
import re
from typing import Optional

from wut.constants import DANGEROUS_CONFIDENCE, DANGEROUS_HEURISTIC_CONFIDENCE
from wut.corrector.corpus import CorpusStore, get_default_store
from wut.corrector.models import Correction
from wut.utils.logging import get_logger

logger = get_logger(__name__)

# Paths whose recursive removal wipes a system or a home directory
ROOT_LIKE_PATH = (
    r"(?:/|/\*|~|~/|~/\*|\$HOME/?|\$HOME/\*|"
    r"/(?:bin|boot|dev|etc|home|lib|lib64|opt|root|sbin|srv|usr|var)/?)"
)

RECURSIVE_ROOT_DELETE = re.compile(
    r"(?:^|[;&|]\s*|\bsudo\s+)rm\s+(?:\S+\s+)*?(?:-[a-z]*r[a-z]*|--recursive)\s+"
    rf"(?:\S+\s+)*?{ROOT_LIKE_PATH}\s*$",
    re.IGNORECASE,
)

DISK_DEVICE_REDIRECT = re.compile(
    r">\s*/dev/(?:sd[a-z]|hd[a-z]|vd[a-z]|xvd[a-z]|nvme\d+n\d+|mmcblk\d+|disk\d+)"
)

PATH_CONTINUATION = re.compile(r"[\w.-]")


def _matches_listed(command: str, pattern: str) -> bool:
    if not command.startswith(pattern):
        return False
    # A listed path such as "rm -rf /" must not swallow "rm -rf /tmp/build",
    # but device suffixes ("sda1") and separators (";") still match
    rest = command[len(pattern):]
    return not (pattern.endswith("/") and PATH_CONTINUATION.match(rest))


def check_dangerous(command: str, store: Optional[CorpusStore] = None) -> Optional[Correction]:
    """
    Flag destructive commands.

    Args:
        command: The command line to inspect.
        store: Corpus store holding the destructive-command list.

    Returns:
        A warn-only ``Correction`` (empty ``corrected``, ``dangerous`` set)
        or None when nothing dangerous was found.
    """
    normalized = " ".join(command.strip().lower().split())
    if not normalized:
        return None

    store = store or get_default_store()
    for pattern in store.dangerous_commands():
        if _matches_listed(normalized, pattern.lower()):
            logger.warning(f"Dangerous command detected: {command}", extra={"pattern": pattern})
            return Correction(
                original=command,
                corrected="",
                confidence=DANGEROUS_CONFIDENCE,
                explanation=f"DANGEROUS COMMAND DETECTED: '{pattern}' can destroy your system!",
                dangerous=True,
            )

    if RECURSIVE_ROOT_DELETE.search(command.strip()):
        logger.warning(f"Recursive delete of a root-like path: {command}")
        return Correction(
            original=command,
            corrected="",
            confidence=DANGEROUS_HEURISTIC_CONFIDENCE,
            explanation="WARNING: This recursively deletes the root filesystem or a home directory.",
            dangerous=True,
        )

    if DISK_DEVICE_REDIRECT.search(command):
        logger.warning(f"Redirect onto a disk device: {command}")
        return Correction(
            original=command,
            corrected="",
            confidence=DANGEROUS_HEURISTIC_CONFIDENCE,
            explanation="WARNING: This will overwrite a disk device!",
            dangerous=True,
        )

    return None


def is_dangerous(command: str, store: Optional[CorpusStore] = None) -> bool:
    return check_dangerous(command, store) is not None
