#!/usr/bin/env python3
"""
PCR primer design module for plasmid manager.

Derives a forward primer and a reverse-complement primer of a fixed length
from the two ends of a gene sequence.
"""

from loguru import logger

from ..exceptions import InvalidLengthError
from ..models import PCRPrimerPair


# Watson-Crick pairs; anything else becomes UNKNOWN_BASE
COMPLEMENT_MAP = {
    'A': 'T', 'T': 'A', 'C': 'G', 'G': 'C',
    'a': 'T', 't': 'A', 'c': 'G', 'g': 'C',
}

UNKNOWN_BASE = 'N'


def complement(base: str) -> str:
    """Get the uppercase complement of a single base, or N if it is not A/C/G/T."""
    return COMPLEMENT_MAP.get(base, UNKNOWN_BASE)


def reverse_complement(sequence: str) -> str:
    """Get the reverse complement of a sequence."""
    return ''.join(complement(base) for base in reversed(sequence))


def design_pcr_primers(gene, primer_length: int) -> PCRPrimerPair:
    """
    Design a forward/reverse primer pair for a gene.

    The forward primer is the first ``primer_length`` bases of the sequence
    as stored. The reverse primer reads the last ``primer_length`` bases from
    the 3' end inwards and complements each of them.

    Args:
        gene: Any gene object exposing ``name`` and ``sequence``
        primer_length: Number of bases in each primer

    Returns:
        PCRPrimerPair with both primers exactly ``primer_length`` long

    Raises:
        InvalidLengthError: if primer_length is below 1 or longer than the sequence
    """
    sequence = gene.sequence
    max_length = len(sequence)

    if primer_length < 1 or primer_length > max_length:
        raise InvalidLengthError(
            "Invalid primer length",
            requested=primer_length,
            max_length=max_length
        )

    forward = sequence[:primer_length]
    reverse = reverse_complement(sequence[max_length - primer_length:])

    logger.debug(f"Designed {primer_length} bp primers for gene {gene.name}")

    return PCRPrimerPair(
        gene_name=gene.name,
        primer_length=primer_length,
        forward=forward,
        reverse=reverse
    )
