"""Gene CSV file parser."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List

from loguru import logger

from ..exceptions import ParseError, PlasmidError
from ..models import GeneInfo

if TYPE_CHECKING:
    from .registry import Plasmid


class PlasmidCSVParser:
    """Parser for ``name,sequence,function`` gene files."""

    FIELD_COUNT = 3

    def __init__(self, input_file: Path, encoding: str = "utf-8"):
        """Initialize parser with input file path."""
        self.input_file = Path(input_file)
        self.encoding = encoding
        self.genes: List[GeneInfo] = []
        self.skipped_lines: List[int] = []

        if not self.input_file.exists():
            raise ParseError(f"Cannot open CSV file: {self.input_file}")

    def parse(self) -> List[GeneInfo]:
        """Parse the input file and return the well-formed genes in file order."""
        self.genes = []
        self.skipped_lines = []
        line_number = 0

        logger.info(f"Parsing gene CSV file: {self.input_file}")

        try:
            with open(self.input_file, 'r', encoding=self.encoding) as f:
                for line in f:
                    line_number += 1

                    # Skip empty lines
                    if not line.strip():
                        continue

                    try:
                        self.genes.append(self._parse_line(line, line_number))
                    except ParseError as e:
                        logger.warning(f"Skipping invalid line {line_number}: {e}")
                        self.skipped_lines.append(line_number)
                        continue

        except (IOError, UnicodeDecodeError) as e:
            raise ParseError(f"Failed to read CSV file: {e}")

        logger.info(f"Successfully parsed {len(self.genes)} genes")
        return self.genes

    def _parse_line(self, line: str, line_number: int) -> GeneInfo:
        """Parse a single line of gene input."""
        # The function column keeps any further commas
        parts = [part.strip() for part in line.rstrip("\r\n").split(",", self.FIELD_COUNT - 1)]

        if len(parts) != self.FIELD_COUNT or not all(parts):
            raise ParseError(
                f"Expected {self.FIELD_COUNT} non-empty comma-separated fields",
                line_number=line_number,
                line_content=line.strip()
            )

        name, sequence, function = parts
        return GeneInfo(name=name, sequence=sequence, function=function)

    def load_into(self, plasmid: "Plasmid") -> int:
        """
        Parse the file and insert its genes at positions 1, 2, 3, ...

        Genes that fail to be added are logged and skipped.

        Returns:
            Number of genes added
        """
        genes = self.parse()
        added = 0

        for position, gene in enumerate(genes, start=1):
            try:
                plasmid.add_gene(gene.name, gene.sequence, gene.function, position)
                added += 1
            except PlasmidError as e:
                logger.warning(f"Failed to add gene {gene.name}: {e}")
                continue

        logger.info(f"Loaded {added} genes from {self.input_file}")
        return added
