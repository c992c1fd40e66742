"""Command-line interface for codonscan."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from codonscan import __version__
from codonscan.core.table import CodonTable, CodonTableError
from codonscan.core.translator import TranslationResult, Translator
from codonscan.io.fasta import read_fasta
from codonscan.io.output import OutputFormat, format_batch_results, format_result
from codonscan.io.tables import load_table

# Console that writes to stderr (so progress doesn't mix with data output)
stderr_console = Console(stderr=True)

FORMAT_CHOICES = tuple(f.value for f in OutputFormat)


def create_progress() -> Progress:
    """Create a progress bar that renders on stderr."""
    return Progress(
        SpinnerColumn(style="bold magenta"),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(bar_width=40),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=stderr_console,
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"codonscan {__version__}")
        raise typer.Exit()


def resolve_table(table_path: Path | None) -> CodonTable:
    """Load the codon table given on the command line, or the standard one."""
    if table_path is None:
        return CodonTable.standard()
    try:
        return load_table(table_path)
    except CodonTableError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except OSError as e:
        typer.echo(f"Error: Cannot read codon table {table_path}: {e}", err=True)
        raise typer.Exit(1)


def emit(text: str, output: Path | None) -> None:
    """Write text to the output file, or to stdout."""
    if output is None:
        typer.echo(text)
    else:
        try:
            output.write_text(text + "\n")
        except OSError as e:
            typer.echo(f"Error: Cannot write output file {output}: {e}", err=True)
            raise typer.Exit(1)
        typer.echo(f"Wrote {output}", err=True)


app = typer.Typer(
    name="codonscan",
    help="Codonscan: translate DNA open reading frames.\n\n"
    "Finds the first start codon in each sequence and translates codons "
    "until a stop codon or the end of the sequence.",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = False,
) -> None:
    """Codonscan: translate DNA open reading frames."""
    pass


@app.command()
def translate(
    dna: Annotated[
        Optional[str],
        typer.Argument(help="DNA sequence to translate"),
    ] = None,
    fasta: Annotated[
        Optional[Path],
        typer.Option("--fasta", "-i", help="FASTA file with sequences to translate"),
    ] = None,
    table: Annotated[
        Optional[Path],
        typer.Option("--table", "-t", help="Codon table file (.csv, .json or .xml)"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format (pretty, tsv, json, fasta)"),
    ] = "pretty",
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write results to this file instead of stdout"),
    ] = None,
) -> None:
    """Translate a DNA sequence, or every record of a FASTA file.

    Examples:

        codonscan translate GAACAAATGCATTAATACAAAAA

        codonscan translate --fasta genes.fa --format tsv

        codonscan translate --fasta genes.fa --table codons.csv -f fasta -o proteins.fa
    """
    if output_format not in FORMAT_CHOICES:
        typer.echo(
            f"Error: Invalid format '{output_format}'. Must be one of {', '.join(FORMAT_CHOICES)}.",
            err=True,
        )
        raise typer.Exit(1)

    fmt = OutputFormat(output_format)

    if dna is None and fasta is None:
        typer.echo("Error: Provide a DNA sequence or --fasta FILE", err=True)
        raise typer.Exit(1)
    if dna is not None and fasta is not None:
        typer.echo("Error: Provide either a DNA sequence or --fasta FILE, not both", err=True)
        raise typer.Exit(1)

    translator = Translator(resolve_table(table))

    if dna is not None:
        result = translator.scan(dna.strip().upper())
        if not result.found_start:
            typer.echo("Warning: No start codon in sequence", err=True)
        emit(format_result(result, fmt), output)
        return

    try:
        records = list(read_fasta(fasta))
    except OSError as e:
        typer.echo(f"Error: Cannot read FASTA file {fasta}: {e}", err=True)
        raise typer.Exit(1)

    if not records:
        typer.echo(f"Error: No sequences found in {fasta}", err=True)
        raise typer.Exit(1)

    results: list[TranslationResult] = []
    with create_progress() as progress:
        task = progress.add_task("Translating", total=len(records))
        for name, seq in records:
            results.append(translator.scan(seq, name=name))
            progress.advance(task)

    missing = [r.name for r in results if not r.found_start]
    if missing:
        typer.echo(
            f"Warning: No start codon in {len(missing)} of {len(results)} sequences",
            err=True,
        )

    emit(format_batch_results(results, fmt), output)


@app.command("table")
def show_table(
    table: Annotated[
        Optional[Path],
        typer.Option("--table", "-t", help="Codon table file (.csv, .json or .xml)"),
    ] = None,
) -> None:
    """Display a codon table.

    Shows the start and stop codons and the codon to amino-acid mapping.
    Without --table, the standard genetic code is shown.
    """
    codon_table = resolve_table(table)

    typer.echo(f"Table: {table.name if table else 'standard'}")
    typer.echo(f"Start codons: {', '.join(sorted(codon_table.starts)) or '-'}")
    typer.echo(f"Stop codons: {', '.join(sorted(codon_table.stops)) or '-'}")
    typer.echo(f"Coding codons: {len(codon_table)}")

    grid = Table("Codon", "Amino acid", "Role")
    for codon in sorted(set(codon_table.mapping) | codon_table.starts | codon_table.stops):
        if codon_table.is_start(codon):
            role = "start"
        elif codon_table.is_stop(codon):
            role = "stop"
        else:
            role = ""
        grid.add_row(codon, codon_table.amino_acid_for(codon) or "-", role)

    Console().print(grid)


if __name__ == "__main__":
    app()
