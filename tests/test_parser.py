#!/usr/bin/env python3
"""
Tests for loading genes from CSV files.
"""

import pytest
from pathlib import Path

from plasmid_manager import Plasmid, PlasmidCSVParser
from plasmid_manager.exceptions import ParseError


@pytest.fixture
def csv_file(tmp_path):
    """Write a CSV file and return its path."""
    def _write(content: str) -> Path:
        path = tmp_path / "genes.csv"
        path.write_text(content)
        return path
    return _write


def test_parse_well_formed_file(csv_file):
    path = csv_file(
        "ori,TTGACA,origin of replication\n"
        "ampR,ATGAGT,ampicillin resistance\n"
    )
    genes = PlasmidCSVParser(path).parse()

    assert [gene.name for gene in genes] == ["ori", "ampR"]
    assert genes[1].sequence == "ATGAGT"
    assert genes[1].function == "ampicillin resistance"


def test_function_is_trimmed(csv_file):
    path = csv_file("lacZ,ATGACC,beta-galactosidase   \r\n")
    genes = PlasmidCSVParser(path).parse()
    assert genes[0].function == "beta-galactosidase"


def test_function_may_contain_commas(csv_file):
    path = csv_file("tetR,ATGTCT,repressor, binds tetO\n")
    genes = PlasmidCSVParser(path).parse()
    assert genes[0].function == "repressor, binds tetO"


def test_malformed_lines_are_skipped(csv_file):
    path = csv_file(
        "ori,TTGACA,origin\n"
        "broken,ATGC\n"
        "\n"
        "ampR,ATGAGT,resistance\n"
        ",,\n"
        "lacZ,ATGACC,reporter\n"
    )
    parser = PlasmidCSVParser(path)
    genes = parser.parse()

    assert [gene.name for gene in genes] == ["ori", "ampR", "lacZ"]
    assert parser.skipped_lines == [2, 5]


def test_missing_file(tmp_path):
    with pytest.raises(ParseError, match="Cannot open CSV file"):
        PlasmidCSVParser(tmp_path / "missing.csv")


def test_load_into_empty_plasmid(csv_file):
    path = csv_file(
        "ori,TTGACA,origin\n"
        "bad line\n"
        "ampR,ATGAGT,resistance\n"
        "lacZ,ATGACC,reporter\n"
    )
    plasmid = Plasmid()
    added = PlasmidCSVParser(path).load_into(plasmid)

    assert added == 3
    assert [(i, g.name) for i, g in plasmid.enumerate()] == [
        (1, "ori"), (2, "ampR"), (3, "lacZ")
    ]


def test_load_places_genes_first(csv_file):
    path = csv_file("ori,TTGACA,origin\nampR,ATGAGT,resistance\n")
    plasmid = Plasmid()
    plasmid.add_gene("gfp", "GGC", "fluorescence", 1)

    PlasmidCSVParser(path).load_into(plasmid)

    assert [g.name for g in plasmid] == ["ori", "ampR", "gfp"]
    plasmid.sequence.check_invariants()


def test_load_empty_file(csv_file):
    plasmid = Plasmid()
    assert PlasmidCSVParser(csv_file("")).load_into(plasmid) == 0
    assert plasmid.is_empty
