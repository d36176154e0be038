#!/usr/bin/env python3
"""
Plasmid report writer.

A report holds the concatenated plasmid sequence on one line followed by a
legend giving each gene's 1-based start and end inside that sequence.
"""

from pathlib import Path
from typing import TYPE_CHECKING, List

from loguru import logger

from ..exceptions import ReportError

if TYPE_CHECKING:
    from .registry import Plasmid


class PlasmidReportWriter:
    """Render and save plasmid reports."""

    def __init__(self, name_width: int = 10, encoding: str = "utf-8"):
        """
        Initialize report writer.

        Args:
            name_width: Minimum width of the legend name column
            encoding: Text encoding of written files
        """
        self.name_width = name_width
        self.encoding = encoding

    def format_legend_header(self) -> str:
        """Format the legend header line."""
        return f"# LEGEND: {'No.':>4}  {'Name':<{self.name_width}}  {'Start':>6}  {'End':>6}"

    def format_legend(self, plasmid: "Plasmid") -> List[str]:
        """Format one legend row per gene."""
        return [
            f"{span.index:4d}  {span.name:<{self.name_width}}  {span.start:6d}  {span.end:6d}"
            for span in plasmid.gene_spans()
        ]

    def render(self, plasmid: "Plasmid") -> str:
        """Render the complete report text."""
        lines = [
            plasmid.concatenated_sequence(),
            "",
            self.format_legend_header(),
        ]
        lines.extend(self.format_legend(plasmid))
        return "\n".join(lines) + "\n"

    def write(self, plasmid: "Plasmid", output_file: Path) -> Path:
        """
        Write the report to a file.

        Returns:
            Path of the written file

        Raises:
            ReportError: if the file cannot be written
        """
        output_file = Path(output_file)
        logger.info(f"Writing plasmid report: {output_file}")

        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            with open(output_file, 'w', encoding=self.encoding) as f:
                f.write(self.render(plasmid))
        except (IOError, UnicodeEncodeError) as e:
            raise ReportError(str(e), path=str(output_file))

        logger.info(f"Successfully wrote {len(plasmid)} genes to report")
        return output_file
