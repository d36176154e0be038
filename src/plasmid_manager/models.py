"""Data models for plasmid manager."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Tuple

from .exceptions import AllocationError


GENE_FIELDS = ("name", "sequence", "function")


def _copy_text(value, field_name: str) -> str:
    """Return an independent text copy of a gene field."""
    if not isinstance(value, str):
        raise AllocationError(
            f"Cannot copy {type(value).__name__} value as text",
            field=field_name
        )
    try:
        return "".join(value)
    except (MemoryError, TypeError, ValueError) as e:
        raise AllocationError(f"Cannot copy value: {e!r}", field=field_name) from e


@dataclass(frozen=True)
class GeneInfo:
    """Read-only snapshot of a gene record."""

    name: str
    sequence: str
    function: str

    @property
    def length(self) -> int:
        """Get sequence length."""
        return len(self.sequence)

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> "GeneInfo":
        """Create from dictionary."""
        return cls(**data)


@dataclass
class GeneRecord:
    """Gene record owned by exactly one node of a plasmid.

    Records are built through ``create`` and changed through
    ``replace_fields`` so that every field is copied before it is stored
    and a failed copy never leaves a record half updated.
    """

    name: str
    sequence: str
    function: str

    @classmethod
    def create(cls, name: str, sequence: str, function: str) -> "GeneRecord":
        """
        Build a record holding its own copies of the three fields.

        Raises:
            AllocationError: if any field cannot be copied
        """
        copies = cls._copy_fields(name, sequence, function)
        return cls(*copies)

    def replace_fields(self, new_name: str, new_sequence: str, new_function: str) -> None:
        """
        Replace all three fields at once.

        The record is left untouched when any of the copies fails.

        Raises:
            AllocationError: if any field cannot be copied
        """
        name, sequence, function = self._copy_fields(new_name, new_sequence, new_function)
        self.name = name
        self.sequence = sequence
        self.function = function

    def destroy(self) -> None:
        """Release the owned field values."""
        self.name = ""
        self.sequence = ""
        self.function = ""

    def view(self) -> GeneInfo:
        """Get a read-only snapshot of this record."""
        return GeneInfo(name=self.name, sequence=self.sequence, function=self.function)

    @property
    def length(self) -> int:
        """Get sequence length."""
        return len(self.sequence)

    @staticmethod
    def _copy_fields(name: str, sequence: str, function: str) -> Tuple[str, str, str]:
        # All copies are made before any of them is handed out.
        return tuple(
            _copy_text(value, field_name)
            for value, field_name in zip((name, sequence, function), GENE_FIELDS)
        )


@dataclass(frozen=True)
class GeneSpan:
    """Location of one gene inside the concatenated plasmid sequence."""

    index: int
    name: str
    start: int  # 1-based, inclusive
    end: int  # 1-based, inclusive

    @property
    def length(self) -> int:
        """Get span length."""
        return self.end - self.start + 1

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class PCRPrimerPair:
    """Forward and reverse primers derived from one gene."""

    gene_name: str
    primer_length: int
    forward: str
    reverse: str

    @property
    def primers(self) -> Tuple[str, str]:
        """Get primers as tuple."""
        return (self.forward, self.reverse)

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> "PCRPrimerPair":
        """Create from dictionary."""
        return cls(**data)
