"""FASTA file parser and writer."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, TextIO


def parse_fasta(lines: Iterable[str]) -> Iterator[tuple[str, str]]:
    """Parse FASTA text and yield (name, sequence) tuples.

    Only the first word of each header is kept as the name. Sequences are
    upper-cased so they match codon tables written in upper case.

    Args:
        lines: Lines of FASTA text (an open file works)

    Yields:
        Tuples of (sequence_name, sequence_string)
    """
    name: str | None = None
    seq_parts: list[str] = []

    for line in lines:
        line = line.strip()
        if not line or line.startswith(";"):
            continue
        if line.startswith(">"):
            if name is not None:
                yield name, "".join(seq_parts)
            header = line[1:].split()
            name = header[0] if header else ""
            seq_parts = []
        elif name is not None:
            seq_parts.append(line.upper())

    if name is not None:
        yield name, "".join(seq_parts)


def read_fasta(path: str | Path) -> Iterator[tuple[str, str]]:
    """Parse a FASTA file and yield (name, sequence) tuples.

    Args:
        path: Path to FASTA file

    Yields:
        Tuples of (sequence_name, sequence_string)
    """
    path = Path(path)
    with path.open() as f:
        yield from parse_fasta(f)


def format_fasta(records: Iterable[tuple[str, str]], line_width: int = 70) -> str:
    """Render (name, sequence) records as FASTA text."""
    lines = []
    for name, seq in records:
        lines.append(f">{name}")
        for i in range(0, len(seq), line_width):
            lines.append(seq[i : i + line_width])
    return "\n".join(lines)


def write_fasta(
    records: Iterable[tuple[str, str]],
    path: str | Path | TextIO,
    line_width: int = 70,
) -> None:
    """Write sequences to a FASTA file.

    Args:
        records: (name, sequence) tuples
        path: Output file path or an open text stream
        line_width: Characters per line for sequence wrapping
    """
    text = format_fasta(records, line_width=line_width)
    if text:
        text += "\n"
    if isinstance(path, (str, Path)):
        Path(path).write_text(text)
    else:
        path.write(text)
