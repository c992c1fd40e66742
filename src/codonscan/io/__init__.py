"""Input/output utilities."""

from codonscan.io.fasta import parse_fasta, read_fasta, write_fasta
from codonscan.io.output import OutputFormat, format_batch_results, format_result
from codonscan.io.tables import load_table

__all__ = [
    "parse_fasta",
    "read_fasta",
    "write_fasta",
    "OutputFormat",
    "format_batch_results",
    "format_result",
    "load_table",
]
