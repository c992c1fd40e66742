"""Output formatters for translation results."""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING

from codonscan.io.fasta import format_fasta

if TYPE_CHECKING:
    from codonscan.core.translator import TranslationResult


class OutputFormat(Enum):
    """Supported output formats."""

    PRETTY = "pretty"
    TSV = "tsv"
    JSON = "json"
    FASTA = "fasta"


TSV_HEADER = "name\tstart\tend\tterminated\tprotein"


def format_result(
    result: TranslationResult,
    format: OutputFormat = OutputFormat.PRETTY,
) -> str:
    """Format a translation result for output.

    Args:
        result: Translation result object
        format: Output format

    Returns:
        Formatted string representation
    """
    if format == OutputFormat.PRETTY:
        return str(result)

    elif format == OutputFormat.JSON:
        return json.dumps(result.to_dict(), indent=2)

    elif format == OutputFormat.TSV:
        return f"{TSV_HEADER}\n{_tsv_row(result)}"

    elif format == OutputFormat.FASTA:
        # A sequence without a start codon has no protein to write
        if not result.found_start:
            return ""
        return format_fasta([(result.name or "protein", result.protein)])

    else:
        raise ValueError(f"Unknown format: {format}")


def _tsv_row(result: TranslationResult) -> str:
    start = "NA" if result.start is None else str(result.start)
    end = "NA" if result.end is None else str(result.end)
    return f"{result.name or ''}\t{start}\t{end}\t{str(result.terminated).lower()}\t{result.protein}"


def format_batch_results(
    results: list[TranslationResult],
    format: OutputFormat = OutputFormat.PRETTY,
) -> str:
    """Format multiple translation results for batch output.

    Args:
        results: Translation results, usually one per FASTA record
        format: Output format

    Returns:
        Formatted string representation
    """
    if format == OutputFormat.PRETTY:
        lines = []
        for result in results:
            lines.append(str(result))
            lines.append("")
        return "\n".join(lines)

    elif format == OutputFormat.JSON:
        return json.dumps([result.to_dict() for result in results], indent=2)

    elif format == OutputFormat.TSV:
        if not results:
            return ""
        return "\n".join([TSV_HEADER] + [_tsv_row(result) for result in results])

    elif format == OutputFormat.FASTA:
        return format_fasta(
            (result.name or f"protein_{i}", result.protein)
            for i, result in enumerate(results, start=1)
            if result.found_start
        )

    else:
        raise ValueError(f"Unknown format: {format}")
