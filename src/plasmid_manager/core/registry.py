#!/usr/bin/env python3
"""
Plasmid registry module for plasmid manager.

The Plasmid wraps one OrderedSequence of GeneRecord objects and owns the
record lifecycle: records are created on add, replaced on edit and
destroyed on delete or clear. Callers only ever see GeneInfo snapshots.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from loguru import logger

from ..exceptions import NotFoundError
from ..models import GeneInfo, GeneRecord, GeneSpan, PCRPrimerPair
from ..primers.pcr import design_pcr_primers
from .sequence import OrderedSequence


class Plasmid:
    """Ordered collection of gene records with 1-based positions."""

    def __init__(self):
        """Initialize an empty plasmid."""
        self._sequence: OrderedSequence[GeneRecord] = OrderedSequence()

    def __len__(self) -> int:
        return len(self._sequence)

    def __iter__(self) -> Iterator[GeneInfo]:
        for record in self._sequence:
            yield record.view()

    def __enter__(self) -> "Plasmid":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.clear()

    @property
    def is_empty(self) -> bool:
        """True when the plasmid holds no genes."""
        return not self._sequence

    @property
    def sequence(self) -> OrderedSequence[GeneRecord]:
        """Backing ordered sequence."""
        return self._sequence

    def add_gene(self, name: str, sequence: str, function: str, position: int) -> GeneInfo:
        """
        Add a gene at a 1-based position.

        Positions of 1 or less insert at the head; positions past the end
        append at the tail.

        Args:
            name: Gene name
            sequence: Nucleotide sequence (5'-3')
            function: Free-text gene function
            position: Requested 1-based position

        Returns:
            Snapshot of the stored gene

        Raises:
            AllocationError: if a field cannot be copied; the plasmid is unchanged
        """
        record = GeneRecord.create(name, sequence, function)
        try:
            self._sequence.insert_at(record, position)
        except Exception:
            record.destroy()
            raise

        logger.debug(f"Added gene {record.name} at requested position {position}")
        return record.view()

    def delete_gene_by_name(self, name: str) -> GeneInfo:
        """
        Delete the first gene, from the head, whose name matches exactly.

        Returns:
            Snapshot of the deleted gene

        Raises:
            NotFoundError: if no gene has this name
        """
        handle = self._find_by_name(name)
        if handle is None:
            raise NotFoundError("No gene with this name", name=name)
        return self._delete(handle)

    def delete_gene_at(self, position: int) -> GeneInfo:
        """
        Delete the gene at a 1-based position.

        Raises:
            NotFoundError: if the position is out of range
        """
        return self._delete(self._resolve(position))

    def gene_at(self, position: int) -> GeneInfo:
        """
        Get the gene at a 1-based position.

        Raises:
            NotFoundError: if the plasmid is empty or the position is out of range
        """
        return self._sequence.payload(self._resolve(position)).view()

    def gene_by_name(self, name: str) -> GeneInfo:
        """
        Get the first gene, from the head, with this name.

        Raises:
            NotFoundError: if no gene has this name
        """
        handle = self._find_by_name(name)
        if handle is None:
            raise NotFoundError("No gene with this name", name=name)
        return self._sequence.payload(handle).view()

    def position_of(self, name: str) -> int:
        """
        Get the 1-based position of the first gene with this name.

        Raises:
            NotFoundError: if no gene has this name
        """
        for index, record in enumerate(self._sequence, start=1):
            if record.name == name:
                return index
        raise NotFoundError("No gene with this name", name=name)

    def edit_gene(
        self,
        position: int,
        new_name: str,
        new_sequence: str,
        new_function: str
    ) -> GeneInfo:
        """
        Replace name, sequence and function of the gene at a position.

        Either all three fields change or none does.

        Returns:
            Snapshot of the edited gene

        Raises:
            NotFoundError: if the position is out of range
            AllocationError: if a new field cannot be copied
        """
        record = self._sequence.payload(self._resolve(position))
        old_name = record.name
        record.replace_fields(new_name, new_sequence, new_function)

        logger.debug(f"Edited gene at position {position}: {old_name} -> {record.name}")
        return record.view()

    def enumerate(self) -> List[Tuple[int, GeneInfo]]:
        """List genes with their 1-based positions in traversal order."""
        return [(index, record.view()) for index, record in enumerate(self._sequence, start=1)]

    def total_sequence_length(self) -> int:
        """Get the summed length of all gene sequences."""
        return sum(record.length for record in self._sequence)

    def gene_spans(self) -> List[GeneSpan]:
        """
        Locate every gene inside the concatenated plasmid sequence.

        Returns:
            One GeneSpan per gene with 1-based inclusive start and end
        """
        spans = []
        start = 1
        for index, record in enumerate(self._sequence, start=1):
            spans.append(GeneSpan(
                index=index,
                name=record.name,
                start=start,
                end=start + record.length - 1
            ))
            start += record.length
        return spans

    def concatenated_sequence(self) -> str:
        """Get all gene sequences joined in traversal order."""
        return ''.join(record.sequence for record in self._sequence)

    def design_primers(self, position: int, primer_length: int) -> PCRPrimerPair:
        """
        Design PCR primers for the gene at a position.

        Raises:
            NotFoundError: if the position is out of range
            InvalidLengthError: if the primer length does not fit the sequence
        """
        record = self._sequence.payload(self._resolve(position))
        return design_pcr_primers(record, primer_length)

    def clear(self) -> None:
        """Destroy every gene record and release all nodes."""
        records = list(self._sequence)
        self._sequence.clear()
        for record in records:
            record.destroy()

        if records:
            logger.debug(f"Cleared {len(records)} genes from plasmid")

    def get_statistics(self) -> Dict:
        """Get plasmid statistics."""
        if self.is_empty:
            return {"total_genes": 0, "total_length": 0}

        lengths = [record.length for record in self._sequence]
        names = set(record.name for record in self._sequence)

        return {
            "total_genes": len(lengths),
            "unique_names": len(names),
            "total_length": sum(lengths),
            "min_sequence_length": min(lengths),
            "max_sequence_length": max(lengths),
            "avg_sequence_length": sum(lengths) / len(lengths),
        }

    def _resolve(self, position: int) -> int:
        if self.is_empty:
            raise NotFoundError("Plasmid is empty", position=position)

        handle = self._sequence.walk_to(position)
        if handle is None:
            raise NotFoundError("No gene at this position", position=position)
        return handle

    def _find_by_name(self, name: str) -> Optional[int]:
        for handle in self._sequence.handles():
            if self._sequence.payload(handle).name == name:
                return handle
        return None

    def _delete(self, handle: int) -> GeneInfo:
        record = self._sequence.remove(handle)
        info = record.view()
        record.destroy()

        logger.debug(f"Deleted gene {info.name}")
        return info
