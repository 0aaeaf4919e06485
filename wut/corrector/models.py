# wut/corrector/models.py
"""
Value types produced and consumed by the correction pipeline.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wut.constants import DANGEROUS_HEURISTIC_CONFIDENCE


class Correction(BaseModel):
    """A single proposed rewrite (or warning) for a command line."""
    model_config = ConfigDict(frozen=True)

    original: str = Field(..., description="The command as typed")
    corrected: str = Field("", description="Suggested replacement; empty means warn only")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Certainty of the suggestion")
    explanation: str = Field("", description="Human-readable reason")
    dangerous: bool = Field(False, description="Whether the command is destructive")

    @model_validator(mode="after")
    def _dangerous_is_certain(self) -> "Correction":
        if self.dangerous and self.confidence < DANGEROUS_HEURISTIC_CONFIDENCE:
            raise ValueError(
                f"dangerous corrections need confidence >= {DANGEROUS_HEURISTIC_CONFIDENCE}"
            )
        return self

    @property
    def warn_only(self) -> bool:
        """True when the command should be flagged but not rewritten."""
        return self.dangerous and not self.corrected


@dataclass(frozen=True)
class TokenFix:
    """One token-level replacement found while correcting a sentence."""
    original: str
    corrected: str
    distance: int
    confidence: float

    def describe(self) -> str:
        return f"'{self.original}' → '{self.corrected}'"


@dataclass(frozen=True)
class ShortFlagInfo:
    """Long-option equivalent of a single short flag character."""
    long_option: str
    description: str


@dataclass
class ShortFlagClusterResult:
    """Decoded form of a short-flag cluster such as ``-it``."""
    original: str
    expansion: str = ""
    unknown_flags: List[str] = field(default_factory=list)
    annotations: Dict[str, str] = field(default_factory=dict)
    mapping: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def has_unknown(self) -> bool:
        return bool(self.unknown_flags)

    def pairs(self) -> List[str]:
        """``-c→--long`` pairs in cluster order, known characters only."""
        return [f"-{char}→{long_option}" for char, long_option in self.mapping]


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a nearest-neighbour corpus lookup."""
    match: str
    distance: int

    @property
    def exact(self) -> bool:
        return self.distance == 0


def mean_confidence(fixes: List[TokenFix]) -> Optional[float]:
    """Arithmetic mean of per-fix confidences; None when there are no fixes."""
    if not fixes:
        return None
    return sum(fix.confidence for fix in fixes) / len(fixes)
