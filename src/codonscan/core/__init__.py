"""Core data structures and the translation scan."""

from codonscan.core.table import CodonTable, CodonTableError
from codonscan.core.translator import (
    ScanState,
    TranslationResult,
    Translator,
    find_start,
    scan,
    translate,
)

__all__ = [
    "CodonTable",
    "CodonTableError",
    "ScanState",
    "TranslationResult",
    "Translator",
    "find_start",
    "scan",
    "translate",
]
