"""Plasmid Manager.

Keeps an ordered collection of gene records (a plasmid) with 1-based
positional insert, delete, lookup and edit, loads genes from CSV files,
saves sequence reports and designs PCR primer pairs from stored genes.
"""

__version__ = "1.0.0"

from .config import PlasmidConfig
from .exceptions import (
    PlasmidError, AllocationError, NotFoundError, InvalidLengthError,
    SequenceIntegrityError, ParseError, ReportError, ConfigurationError
)
from .models import GeneRecord, GeneInfo, GeneSpan, PCRPrimerPair
from .core import (
    SequenceNode, OrderedSequence,
    Plasmid,
    PlasmidCSVParser, PlasmidReportWriter
)
from .primers import complement, reverse_complement, design_pcr_primers
from .main import PlasmidShell, main

__all__ = [
    "__version__",
    "PlasmidConfig",
    "PlasmidError",
    "AllocationError",
    "NotFoundError",
    "InvalidLengthError",
    "SequenceIntegrityError",
    "ParseError",
    "ReportError",
    "ConfigurationError",
    "GeneRecord",
    "GeneInfo",
    "GeneSpan",
    "PCRPrimerPair",
    "SequenceNode",
    "OrderedSequence",
    "Plasmid",
    "PlasmidCSVParser",
    "PlasmidReportWriter",
    "complement",
    "reverse_complement",
    "design_pcr_primers",
    "PlasmidShell",
    "main"
]
