"""Codonscan: translate DNA open reading frames with configurable codon tables."""

__version__ = "0.1.0"

from codonscan.core.table import CodonTable, CodonTableError
from codonscan.core.translator import TranslationResult, Translator, scan, translate
from codonscan.io.tables import load_table

__all__ = [
    "CodonTable",
    "CodonTableError",
    "TranslationResult",
    "Translator",
    "scan",
    "translate",
    "load_table",
]
