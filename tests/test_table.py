"""Tests for the codon table."""

import pytest

from codonscan.core.table import CodonTable, CodonTableError


class TestCodonTable:
    """Tests for CodonTable construction and lookups."""

    def test_lookups(self) -> None:
        """Test start, stop and amino-acid queries."""
        table = CodonTable(mapping={"CAT": "H"}, starts={"ATG"}, stops={"TAA", "TAG", "TGA"})

        assert table.is_start("ATG")
        assert not table.is_start("CAT")
        assert table.is_stop("TGA")
        assert not table.is_stop("ATG")
        assert table.amino_acid_for("CAT") == "H"

    def test_amino_acid_for_stop_and_unknown(self) -> None:
        """Stop codons and unknown codons have no amino acid."""
        table = CodonTable(mapping={"CAT": "H"}, starts={"ATG"}, stops={"TAA"})

        assert table.amino_acid_for("TAA") is None
        assert table.amino_acid_for("GGG") is None
        assert table.amino_acid_for("NNN") is None

    def test_codons_normalised_to_uppercase(self) -> None:
        """Test that table codons are upper-cased at construction."""
        table = CodonTable(mapping={"cat": "H"}, starts={"atg"}, stops={"taa"})

        assert table.amino_acid_for("CAT") == "H"
        assert table.is_start("ATG")
        assert table.is_stop("TAA")

    def test_start_codon_may_code(self) -> None:
        """ATG is both a start codon and a methionine codon."""
        table = CodonTable(mapping={"ATG": "M"}, starts={"ATG"}, stops={"TAA"})

        assert table.is_start("ATG")
        assert table.amino_acid_for("ATG") == "M"

    def test_invalid_codon_length(self) -> None:
        """Test that codons must be three characters long."""
        with pytest.raises(CodonTableError, match="expected 3 characters"):
            CodonTable(mapping={"CA": "H"})
        with pytest.raises(CodonTableError):
            CodonTable(starts={"ATGA"})

    def test_start_stop_overlap_rejected(self) -> None:
        """A codon cannot both start and stop translation."""
        with pytest.raises(CodonTableError, match="both start and stop"):
            CodonTable(starts={"ATG"}, stops={"ATG"})

    def test_stop_in_mapping_rejected(self) -> None:
        """Stop codons must not code for an amino acid."""
        with pytest.raises(CodonTableError, match="Stop codons"):
            CodonTable(mapping={"TAA": "*"}, stops={"TAA"})

    def test_empty_amino_acid_rejected(self) -> None:
        """Test that amino-acid symbols must be non-empty strings."""
        with pytest.raises(CodonTableError):
            CodonTable(mapping={"CAT": ""})

    def test_immutable(self) -> None:
        """Test that tables cannot be modified after construction."""
        table = CodonTable(mapping={"CAT": "H"}, starts={"ATG"}, stops={"TAA"})

        with pytest.raises(AttributeError):
            table.starts = frozenset({"GTG"})  # type: ignore[misc]
        with pytest.raises(TypeError):
            table.mapping["GGG"] = "G"  # type: ignore[index]

    def test_mapping_copied_from_source(self) -> None:
        """Mutating the source dict does not change the table."""
        source = {"CAT": "H"}
        table = CodonTable(mapping=source, starts={"ATG"})
        source["GGG"] = "G"

        assert table.amino_acid_for("GGG") is None

    def test_incomplete_table_is_valid(self) -> None:
        """Test that a table without stops or mapping can be built."""
        table = CodonTable(starts={"ATG"})

        assert len(table) == 0
        assert not table.is_stop("TAA")

    def test_equality_and_hash(self) -> None:
        """Tables with the same content compare equal."""
        t1 = CodonTable(mapping={"CAT": "H"}, starts={"ATG"}, stops={"TAA"})
        t2 = CodonTable(mapping={"cat": "H"}, starts=["ATG"], stops=("TAA",))

        assert t1 == t2
        assert hash(t1) == hash(t2)
        assert t1 != CodonTable(mapping={"CAT": "H"}, starts={"ATG"})


class TestStandardTable:
    """Tests for the standard genetic code table."""

    def test_standard(self) -> None:
        """Test the standard code's start and stop codons."""
        table = CodonTable.standard()

        assert table.starts == frozenset({"ATG"})
        assert table.stops == frozenset({"TAA", "TAG", "TGA"})
        assert len(table) == 61
        assert table.amino_acid_for("TGG") == "W"
        assert table.amino_acid_for("ATG") == "M"

    def test_from_genetic_code(self) -> None:
        """Stop codons are moved out of the mapping."""
        table = CodonTable.from_genetic_code(
            {"ATG": "M", "CAT": "H", "TAA": "*"}, starts={"ATG", "GTG"}
        )

        assert table.stops == frozenset({"TAA"})
        assert "TAA" not in table.mapping
        assert table.starts == frozenset({"ATG", "GTG"})
        assert table.start_symbol == "M"
