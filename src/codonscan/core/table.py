"""Codon table: codon to amino-acid lookup plus start and stop codons."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from codonscan.data.genetic_codes import (
    CODON_LENGTH,
    STANDARD_CODE,
    STANDARD_STARTS,
    START_SYMBOL,
    STOP_SYMBOL,
)


class CodonTableError(ValueError):
    """Raised when a codon table is inconsistent or cannot be loaded."""


def _check_codon(codon: str, where: str) -> str:
    if not isinstance(codon, str) or len(codon) != CODON_LENGTH:
        raise CodonTableError(
            f"Invalid codon {codon!r} in {where}: expected {CODON_LENGTH} characters"
        )
    return codon.upper()


@dataclass(frozen=True, eq=False)
class CodonTable:
    """Immutable lookup table used for translation.

    A codon may be both a start codon and a coding codon (ATG codes for
    methionine), but stop codons never overlap with either.

    Attributes:
        mapping: Codon to amino-acid symbol for coding codons
        starts: Codons that open a reading frame
        stops: Codons that close a reading frame
        start_symbol: Symbol emitted for the start codon
    """

    mapping: Mapping[str, str] = field(default_factory=dict)
    starts: frozenset[str] = field(default_factory=frozenset)
    stops: frozenset[str] = field(default_factory=frozenset)
    start_symbol: str = START_SYMBOL

    def __post_init__(self) -> None:
        mapping: dict[str, str] = {}
        for codon, aa in self.mapping.items():
            codon = _check_codon(codon, "mapping")
            if not isinstance(aa, str) or not aa:
                raise CodonTableError(f"Invalid amino acid {aa!r} for codon {codon}")
            if codon in mapping and mapping[codon] != aa:
                raise CodonTableError(
                    f"Codon {codon} mapped to both {mapping[codon]} and {aa}"
                )
            mapping[codon] = aa

        starts = frozenset(_check_codon(c, "starts") for c in self.starts)
        stops = frozenset(_check_codon(c, "stops") for c in self.stops)

        overlap = starts & stops
        if overlap:
            raise CodonTableError(
                f"Codons declared as both start and stop: {', '.join(sorted(overlap))}"
            )
        overlap = stops.intersection(mapping)
        if overlap:
            raise CodonTableError(
                f"Stop codons must not code for an amino acid: {', '.join(sorted(overlap))}"
            )
        if not self.start_symbol:
            raise CodonTableError("Start symbol must not be empty")

        # Frozen dataclass: normalised values are set through object.__setattr__
        object.__setattr__(self, "mapping", MappingProxyType(mapping))
        object.__setattr__(self, "starts", starts)
        object.__setattr__(self, "stops", stops)

    @classmethod
    def standard(cls) -> CodonTable:
        """Table for the standard genetic code (NCBI table 1)."""
        return cls.from_genetic_code(STANDARD_CODE, starts=STANDARD_STARTS)

    @classmethod
    def from_genetic_code(
        cls,
        code: Mapping[str, str],
        starts: Iterable[str] = STANDARD_STARTS,
        stop_symbol: str = STOP_SYMBOL,
        start_symbol: str = START_SYMBOL,
    ) -> CodonTable:
        """Build a table from a full codon-to-symbol genetic code.

        Args:
            code: Dict mapping codons to amino acids, stop codons included
            starts: Start codons
            stop_symbol: Symbol marking stop codons in ``code``
            start_symbol: Symbol emitted for the start codon

        Returns:
            CodonTable with stop codons moved out of the mapping
        """
        mapping = {c: aa for c, aa in code.items() if aa != stop_symbol}
        stops = frozenset(c for c, aa in code.items() if aa == stop_symbol)
        return cls(
            mapping=mapping,
            starts=frozenset(starts),
            stops=stops,
            start_symbol=start_symbol,
        )

    def is_start(self, codon: str) -> bool:
        """Return True if ``codon`` opens a reading frame."""
        return codon in self.starts

    def is_stop(self, codon: str) -> bool:
        """Return True if ``codon`` closes a reading frame."""
        return codon in self.stops

    def amino_acid_for(self, codon: str) -> str | None:
        """Look up the amino acid for a coding codon.

        Args:
            codon: Three-letter codon string

        Returns:
            Amino-acid symbol, or None for stop codons and unknown codons
        """
        return self.mapping.get(codon)

    def __len__(self) -> int:
        return len(self.mapping)

    def __hash__(self) -> int:
        return hash((frozenset(self.mapping.items()), self.starts, self.stops, self.start_symbol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodonTable):
            return NotImplemented
        return (
            dict(self.mapping) == dict(other.mapping)
            and self.starts == other.starts
            and self.stops == other.stops
            and self.start_symbol == other.start_symbol
        )
