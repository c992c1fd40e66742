"""Codon table file loaders (CSV, JSON, XML)."""

from __future__ import annotations

import csv
import json
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Callable

from codonscan.core.table import CodonTable, CodonTableError
from codonscan.data.genetic_codes import STOP_SYMBOL

START_MARKER = "START"
STOP_MARKER = "STOP"

# utf-8-sig drops a leading byte-order mark
TABLE_ENCODING = "utf-8-sig"

# Accepted names for the codon map in JSON tables (compared lower-cased)
_JSON_MAPPING_KEYS = ("mapping", "codons", "codonmap")
_JSON_AMINO_ACID_KEYS = ("aminoacid", "amino_acid")


def read_csv_table(path: str | Path) -> CodonTable:
    """Parse a CSV codon table.

    Each row holds a codon and either an amino-acid symbol, ``START`` or
    ``STOP`` (``*`` also marks a stop codon), e.g. ``CTA,L``. Blank lines
    and ``#`` comments are skipped.

    Args:
        path: Path to CSV file

    Returns:
        CodonTable built from the file
    """
    path = Path(path)
    mapping: dict[str, str] = {}
    starts: set[str] = set()
    stops: set[str] = set()

    try:
        with path.open(newline="", encoding=TABLE_ENCODING) as f:
            for lineno, row in enumerate(csv.reader(f), start=1):
                row = [cell.strip() for cell in row]
                if not any(row) or row[0].startswith("#"):
                    continue
                if len(row) != 2 or not row[1]:
                    raise CodonTableError(
                        f"{path.name}:{lineno}: expected 'codon,amino_acid', got {','.join(row)!r}"
                    )
                codon, value = row[0].upper(), row[1]
                if value.upper() == START_MARKER:
                    starts.add(codon)
                elif value.upper() == STOP_MARKER or value == STOP_SYMBOL:
                    stops.add(codon)
                else:
                    _add_coding(path, mapping, codon, value)
    except UnicodeDecodeError as e:
        raise CodonTableError(f"{path.name}: not valid UTF-8 text: {e}") from e

    return _build(path, mapping, starts, stops)


def read_json_table(path: str | Path) -> CodonTable:
    """Parse a JSON codon table.

    The document is an object with ``starts`` and ``stops`` lists and a
    codon map under ``mapping`` (or ``codons`` / ``codonMap``). The codon
    map is either an object of codon to amino acid, or a list of
    ``{"codon": ..., "aminoAcid": ...}`` entries. Keys are matched
    case-insensitively.

    Args:
        path: Path to JSON file

    Returns:
        CodonTable built from the file
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding=TABLE_ENCODING))
    except UnicodeDecodeError as e:
        raise CodonTableError(f"{path.name}: not valid UTF-8 text: {e}") from e
    except json.JSONDecodeError as e:
        raise CodonTableError(f"{path.name}: invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise CodonTableError(f"{path.name}: expected a JSON object at top level")
    data = {str(k).lower(): v for k, v in data.items()}

    starts = _json_codon_list(path, data, "starts")
    stops = _json_codon_list(path, data, "stops")

    raw_map = next((data[k] for k in _JSON_MAPPING_KEYS if k in data), None)
    if raw_map is None:
        raise CodonTableError(
            f"{path.name}: missing codon map (one of {', '.join(_JSON_MAPPING_KEYS)})"
        )

    mapping: dict[str, str] = {}
    if isinstance(raw_map, dict):
        for codon, aa in raw_map.items():
            _add_coding(
                path, mapping, _expect_str(path, codon, "codon"), _expect_str(path, aa, "amino acid")
            )
    elif isinstance(raw_map, list):
        for entry in raw_map:
            if not isinstance(entry, dict):
                raise CodonTableError(f"{path.name}: codon map entries must be objects")
            entry = {str(k).lower(): v for k, v in entry.items()}
            aa = next((entry[k] for k in _JSON_AMINO_ACID_KEYS if k in entry), None)
            _add_coding(
                path,
                mapping,
                _expect_str(path, entry.get("codon"), "codon"),
                _expect_str(path, aa, "amino acid"),
            )
    else:
        raise CodonTableError(f"{path.name}: codon map must be an object or a list")

    return _build(path, mapping, starts, stops)


def read_xml_table(path: str | Path) -> CodonTable:
    """Parse an XML codon table.

    Expected layout::

        <codonTable>
          <starts><codon>ATG</codon></starts>
          <stops><codon>TAA</codon>...</stops>
          <mapping><codon value="CAT" aminoAcid="H"/>...</mapping>
        </codonTable>

    Args:
        path: Path to XML file

    Returns:
        CodonTable built from the file
    """
    path = Path(path)
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise CodonTableError(f"{path.name}: invalid XML: {e}") from e

    def section(tag: str) -> ET.Element:
        element = root.find(tag)
        if element is None:
            raise CodonTableError(f"{path.name}: missing <{tag}> element")
        return element

    starts = {(c.text or "").strip() for c in section("starts").iter("codon")}
    stops = {(c.text or "").strip() for c in section("stops").iter("codon")}

    mapping: dict[str, str] = {}
    for c in section("mapping").iter("codon"):
        codon = c.get("value")
        aa = c.get("aminoAcid")
        if codon is None or aa is None:
            raise CodonTableError(
                f"{path.name}: <codon> in <mapping> needs 'value' and 'aminoAcid' attributes"
            )
        _add_coding(path, mapping, codon.strip(), aa.strip())

    return _build(path, mapping, starts, stops)


_READERS: dict[str, Callable[[Path], CodonTable]] = {
    ".csv": read_csv_table,
    ".json": read_json_table,
    ".xml": read_xml_table,
}


def load_table(path: str | Path) -> CodonTable:
    """Load a codon table, choosing the parser from the file extension.

    Args:
        path: Path to a .csv, .json or .xml codon table

    Returns:
        CodonTable built from the file

    Raises:
        CodonTableError: If the format is unsupported or the content is invalid
    """
    path = Path(path)
    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        supported = ", ".join(sorted(_READERS))
        raise CodonTableError(
            f"Unsupported codon table format '{path.suffix}' ({path.name}); "
            f"expected one of {supported}"
        )
    return reader(path)


def _json_codon_list(path: Path, data: dict[str, Any], key: str) -> list[str]:
    values = data.get(key)
    if not isinstance(values, list):
        raise CodonTableError(f"{path.name}: '{key}' must be a list of codons")
    return [_expect_str(path, v, key) for v in values]


def _expect_str(path: Path, value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise CodonTableError(f"{path.name}: expected a string for {what}, got {value!r}")
    return value


def _add_coding(path: Path, mapping: dict[str, str], codon: str, aa: str) -> None:
    codon = codon.upper()
    if codon in mapping and mapping[codon] != aa:
        raise CodonTableError(
            f"{path.name}: codon {codon} mapped to both {mapping[codon]} and {aa}"
        )
    mapping[codon] = aa


def _build(
    path: Path, mapping: dict[str, str], starts: set[str] | list[str], stops: set[str] | list[str]
) -> CodonTable:
    try:
        return CodonTable(mapping=mapping, starts=frozenset(starts), stops=frozenset(stops))
    except CodonTableError as e:
        raise CodonTableError(f"{path.name}: {e}") from e
