"""Static data for genetic codes and codon tables."""

from codonscan.data.genetic_codes import (
    CODON_LENGTH,
    STANDARD_CODE,
    STANDARD_STARTS,
    STANDARD_STOPS,
    START_SYMBOL,
    STOP_SYMBOL,
)

__all__ = [
    "CODON_LENGTH",
    "STANDARD_CODE",
    "STANDARD_STARTS",
    "STANDARD_STOPS",
    "START_SYMBOL",
    "STOP_SYMBOL",
]
