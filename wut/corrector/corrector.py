# wut/corrector/corrector.py
"""
The correction pipeline.

Stages run in a fixed order and the first one that has something to say
wins: safety, known typos, confusable commands, token-level correction,
ambiguous short-flag clusters and finally the history fallback. The
output-driven diagnosis is separate because it executes the command.
"""
import asyncio
from typing import Iterable, List, Optional, Sequence

from wut.config import CorrectorConfig, config_manager
from wut.constants import (
    COMPOSE_CONFIDENCE, KNOWN_TYPO_CONFIDENCE, RECURSIVE_DELETE_HINT_CONFIDENCE,
)
from wut.corrector.corpus import CorpusStore, get_default_store
from wut.corrector.evaluator import RuleEngine
from wut.corrector.history import match_history
from wut.corrector.models import Correction
from wut.corrector.sentence import correct_sentence
from wut.corrector.shortflag import expand_short_flags
from wut.safety.detector import check_dangerous, is_dangerous
from wut.utils.command_utils import get_root_command, split_command
from wut.utils.logging import get_logger

logger = get_logger(__name__)

RECURSIVE_FLAGS = ("--recursive",)


def _has_recursive_flag(args: Sequence[str]) -> bool:
    for arg in args:
        if arg in RECURSIVE_FLAGS:
            return True
        if arg.startswith("-") and not arg.startswith("--") and ("r" in arg or "R" in arg):
            return True
    return False


class Corrector:
    """Runs a command line through every correction stage."""

    def __init__(
        self,
        store: Optional[CorpusStore] = None,
        rule_engine: Optional[RuleEngine] = None,
        history: Optional[Iterable[str]] = None,
        config: Optional[CorrectorConfig] = None,
    ):
        self._logger = logger
        self._store = store or get_default_store()
        self._config = config or config_manager.config.corrector
        self._rule_engine = rule_engine or RuleEngine(timeout=self._config.rule_timeout, store=self._store)
        self._history: List[str] = list(history or [])

    @property
    def store(self) -> CorpusStore:
        return self._store

    @property
    def history(self) -> List[str]:
        return list(self._history)

    def set_history(self, commands: Iterable[str]) -> None:
        """Replace the commands used by the history fallback."""
        self._history = list(commands)
        self._logger.debug(f"History set with {len(self._history)} commands")

    def correct(self, command: str, history: Optional[Iterable[str]] = None) -> Optional[Correction]:
        """
        Propose a single correction for ``command``.

        Args:
            command: The command line as typed.
            history: Commands to use for the history fallback instead of the
                ones given to ``set_history``.

        Returns:
            The first stage's ``Correction`` or None when nothing applies.
        """
        if not command or not command.strip():
            return None

        correction = check_dangerous(command, self._store)
        if correction is not None:
            return correction

        for stage in (
            self.check_known_typos,
            self.check_confusables,
            lambda cmd: correct_sentence(cmd, self._store),
            lambda cmd: expand_short_flags(cmd, self._store, only_ambiguous=True),
        ):
            correction = stage(command)
            if correction is not None:
                self._logger.debug(f"Correction for '{command}': '{correction.corrected}' ({correction.confidence:.2f})")
                return correction

        if not self._config.use_history:
            return None

        candidates = self._history if history is None else history
        return match_history(command, candidates, self._config.history_max_distance)

    def check_known_typos(self, command: str) -> Optional[Correction]:
        """Whole-command lookup in the known-typo table."""
        corrected = self._store.command_typo(command)
        if corrected is None:
            return None
        return Correction(
            original=command,
            corrected=corrected,
            confidence=KNOWN_TYPO_CONFIDENCE,
            explanation=f"Did you mean '{corrected}'?",
        )

    def check_confusables(self, command: str) -> Optional[Correction]:
        """Commands that are routinely confused with a sibling."""
        words = split_command(command)
        if not words:
            return None

        first = words[0].lower()
        args = words[1:]

        if first == "compose":
            return Correction(
                original=command,
                corrected=" ".join(["docker-compose"] + args),
                confidence=COMPOSE_CONFIDENCE,
                explanation="Did you mean 'docker-compose'?",
            )

        if first == "rm" and args and not _has_recursive_flag(args):
            for arg in args:
                if arg.startswith("-") or not arg.endswith("/"):
                    continue
                corrected = " ".join(["rm", "-r"] + args)
                # Never talk anyone into a destructive command
                if is_dangerous(corrected, self._store):
                    return None
                return Correction(
                    original=command,
                    corrected=corrected,
                    confidence=RECURSIVE_DELETE_HINT_CONFIDENCE,
                    explanation=f"'{arg}' looks like a directory. Use 'rm -r' for directories.",
                )

        return None

    def suggest_alternatives(self, command: str) -> List[str]:
        """Modern replacements for a legacy tool, e.g. ``bat`` for ``cat``."""
        root = get_root_command(command)
        if not root:
            return []
        return list(self._store.alternatives(root))

    async def diagnose(self, command: str) -> Optional[Correction]:
        """
        Run ``command`` and derive a fix from its output.

        Dangerous commands are never executed; their warning is returned
        instead.
        """
        if not command or not command.strip():
            return None

        warning = check_dangerous(command, self._store)
        if warning is not None:
            return warning

        return await self._rule_engine.evaluate(command)

    async def diagnose_many(self, commands: Sequence[str]) -> List[Optional[Correction]]:
        """Diagnose several commands with bounded concurrency, keeping order."""
        semaphore = asyncio.Semaphore(self._config.max_workers)

        async def _bounded(command: str) -> Optional[Correction]:
            async with semaphore:
                return await self.diagnose(command)

        return list(await asyncio.gather(*(_bounded(command) for command in commands)))
