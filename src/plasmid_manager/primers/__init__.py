"""Primer design modules for plasmid manager."""

from .pcr import complement, reverse_complement, design_pcr_primers

__all__ = [
    "complement",
    "reverse_complement",
    "design_pcr_primers"
]
