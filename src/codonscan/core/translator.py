"""Reading-frame scanner translating DNA into protein."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable

from codonscan.core.table import CodonTable
from codonscan.data.genetic_codes import CODON_LENGTH


class ScanState(Enum):
    """States of the reading-frame scan."""

    SEARCHING = "searching"
    TRANSLATING = "translating"


@dataclass
class TranslationResult:
    """Result of translating one DNA sequence."""

    protein: str
    start: int | None = None  # Index of the start codon
    end: int | None = None  # Index one past the last codon read
    terminated: bool = False  # True if a stop codon closed the frame
    name: str | None = None

    @property
    def found_start(self) -> bool:
        return self.start is not None

    def __str__(self) -> str:
        header = f"Translation of {self.name}:" if self.name else "Translation:"
        if self.start is None:
            return f"{header}\n  No start codon found"
        status = "stop codon" if self.terminated else "end of sequence (no stop codon)"
        return (
            f"{header}\n"
            f"  Protein:  {self.protein}\n"
            f"  Length:   {len(self.protein)} aa\n"
            f"  Frame:    {self.start}-{self.end}\n"
            f"  Ended at: {status}"
        )

    def to_dict(self) -> dict:
        """Convert result to a dictionary."""
        return {
            "name": self.name,
            "protein": self.protein,
            "start": self.start,
            "end": self.end,
            "terminated": self.terminated,
        }


def find_start(dna: str, table: CodonTable) -> int | None:
    """Find the leftmost start codon, stepping one nucleotide at a time.

    Args:
        dna: Nucleotide sequence string
        table: Codon table providing the start codons

    Returns:
        Index of the first start codon, or None if there is none
    """
    for i in range(len(dna) - CODON_LENGTH + 1):
        if table.is_start(dna[i : i + CODON_LENGTH]):
            return i
    return None


def scan(dna: str, table: CodonTable, name: str | None = None) -> TranslationResult:
    """Scan a DNA sequence and translate its first open reading frame.

    Nucleotides before the first start codon are skipped. From the start
    codon on, codons are read in non-overlapping triplets until a stop
    codon or the end of the sequence; a trailing partial codon is dropped.
    The start codon always yields ``table.start_symbol``. Codons missing
    from the table are skipped, and start codons inside the frame are
    translated like any other codon.

    Args:
        dna: Nucleotide sequence string
        table: Codon table
        name: Optional sequence name carried into the result

    Returns:
        TranslationResult describing the translated frame
    """
    state = ScanState.SEARCHING
    amino_acids: list[str] = []
    start: int | None = None
    pos = 0
    limit = len(dna) - CODON_LENGTH

    while pos <= limit:
        codon = dna[pos : pos + CODON_LENGTH]

        if state is ScanState.SEARCHING:
            if not table.is_start(codon):
                pos += 1
                continue
            start = pos
            amino_acids.append(table.start_symbol)
            state = ScanState.TRANSLATING
        elif table.is_stop(codon):
            return TranslationResult(
                protein="".join(amino_acids),
                start=start,
                end=pos + CODON_LENGTH,
                terminated=True,
                name=name,
            )
        else:
            aa = table.amino_acid_for(codon)
            if aa is not None:
                amino_acids.append(aa)

        pos += CODON_LENGTH

    if start is None:
        return TranslationResult(protein="", name=name)
    return TranslationResult(
        protein="".join(amino_acids),
        start=start,
        end=pos,
        terminated=False,
        name=name,
    )


def translate(dna: str, table: CodonTable) -> str:
    """Translate a DNA sequence into an amino-acid sequence.

    Args:
        dna: Nucleotide sequence string
        table: Codon table

    Returns:
        Amino-acid sequence string, empty if no start codon is present
    """
    return scan(dna, table).protein


class Translator:
    """Translates DNA sequences with a fixed codon table."""

    def __init__(self, table: CodonTable | None = None):
        """Initialize with a codon table.

        Args:
            table: Codon table to translate with. Uses the standard
                   genetic code if not provided.
        """
        self.table = table if table is not None else CodonTable.standard()

    @classmethod
    def from_file(cls, path: str | Path) -> Translator:
        """Create a translator from a CSV, JSON or XML codon table file."""
        from codonscan.io.tables import load_table

        return cls(load_table(path))

    def translate(self, dna: str) -> str:
        return translate(dna, self.table)

    def scan(self, dna: str, name: str | None = None) -> TranslationResult:
        return scan(dna, self.table, name=name)

    def translate_records(
        self, records: Iterable[tuple[str, str]]
    ) -> list[TranslationResult]:
        """Translate (name, sequence) records, e.g. from ``read_fasta``."""
        return [self.scan(seq, name=name) for name, seq in records]
