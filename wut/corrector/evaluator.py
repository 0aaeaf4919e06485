# wut/corrector/evaluator.py
"""
Output-driven diagnosis.

Runs a command once, reads what it printed and matches the output against
the rule table. Only commands that are safe to probe are ever executed:
interactive programs and anything the safety detector flags are declined.
"""
from typing import List, Optional, Sequence

from wut.constants import RULE_CONFIDENCE, RULE_TIMEOUT
from wut.corrector.corpus import CorpusStore, get_default_store
from wut.corrector.errors import ExecutionError
from wut.corrector.models import Correction
from wut.corrector.rules import CORE_RULES, Rule
from wut.execution.engine import ExecutionEngine
from wut.safety.detector import check_dangerous
from wut.utils.command_utils import is_interactive_command
from wut.utils.logging import get_logger

logger = get_logger(__name__)


class RuleEngine:
    """Matches captured error output against an ordered rule table."""

    def __init__(
        self,
        execution_engine: Optional[ExecutionEngine] = None,
        rules: Optional[Sequence[Rule]] = None,
        timeout: float = RULE_TIMEOUT,
        store: Optional[CorpusStore] = None,
    ):
        self._logger = logger
        self._store = store or get_default_store()
        self._engine = execution_engine or ExecutionEngine()
        self._rules: List[Rule] = list(CORE_RULES if rules is None else rules)
        self.timeout = timeout

    @property
    def rules(self) -> List[Rule]:
        return list(self._rules)

    def match_output(self, command: str, output: str) -> Optional[Correction]:
        """
        Apply the rule table to output that has already been captured.

        The first rule that matches and yields a candidate wins; its first
        candidate is returned.
        """
        for rule in self._rules:
            if not rule.matches(command, output):
                continue
            candidates = rule.rewrite(command, output)
            if not candidates:
                continue

            self._logger.info(f"Rule '{rule.name}' matched for: {command}")
            return Correction(
                original=command,
                corrected=candidates[0],
                confidence=RULE_CONFIDENCE,
                explanation=f"Output Context: {rule.explanation}",
            )
        return None

    async def evaluate(self, command: str) -> Optional[Correction]:
        """
        Execute ``command`` and derive a fix from its output.

        Returns None when the command is declined, cannot be run, times out,
        succeeds silently or produces output no rule recognises.
        """
        command = command.strip()
        if not command:
            return None

        interactive, base_cmd = is_interactive_command(command)
        if interactive:
            self._logger.info(f"Declining to probe interactive command '{base_cmd}'")
            return None

        if check_dangerous(command, self._store) is not None:
            self._logger.warning(f"Declining to probe dangerous command: {command}")
            return None

        try:
            output, return_code = await self._engine.run_for_diagnosis(command, timeout=self.timeout)
        except ExecutionError as e:
            # Missing executables are left to the typo corrector
            self._logger.info(f"Cannot diagnose: {e}")
            return None

        if return_code == 0 and not output:
            return None

        return self.match_output(command, output)
