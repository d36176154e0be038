"""Core processing modules for plasmid manager."""

from .sequence import SequenceNode, OrderedSequence
from .registry import Plasmid
from .parser import PlasmidCSVParser
from .report import PlasmidReportWriter

__all__ = [
    "SequenceNode",
    "OrderedSequence",
    "Plasmid",
    "PlasmidCSVParser",
    "PlasmidReportWriter"
]
