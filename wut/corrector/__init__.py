# wut/corrector/__init__.py
"""
Correction engine: corpora, matching and the correction stages.

The pipeline façade lives in ``wut.corrector.corrector`` and is usually
obtained through ``wut.api.corrector.get_corrector()``.
"""
from .corpus import Corpus, CorpusStore, get_default_store
from .errors import (
    CorrectorError, CorpusError, ExecutionError,
    CommandNotFoundError, CommandNotExecutableError, CommandTimeoutError, UnsafeToExecuteError,
)
from .matcher import best_match, confidence, max_distance_for
from .models import Correction, TokenFix, ShortFlagInfo, ShortFlagClusterResult
from .sentence import correct_sentence
from .shortflag import analyse_short_flag_cluster, explain_short_flag_cluster, expand_short_flags

__all__ = [
    "Corpus", "CorpusStore", "get_default_store",
    "CorrectorError", "CorpusError", "ExecutionError",
    "CommandNotFoundError", "CommandTimeoutError", "UnsafeToExecuteError",
    "best_match", "confidence", "max_distance_for",
    "Correction", "TokenFix", "ShortFlagInfo", "ShortFlagClusterResult",
    "correct_sentence",
    "analyse_short_flag_cluster", "explain_short_flag_cluster", "expand_short_flags",
]
