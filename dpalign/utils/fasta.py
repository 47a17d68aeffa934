"""Functions for working with FASTA files."""

from typing import List, Optional

import skbio.io
from skbio import Sequence

from dpalign.types import NamedSequence


def named_sequence_from_skbio(record: Sequence) -> NamedSequence:
    """Convert a scikit-bio record to a NamedSequence."""
    metadata = getattr(record, "metadata", {}) or {}
    identifier = metadata.get("id") or ""
    description = metadata.get("description") or None
    seq_str = b"".join(record.values).decode()

    return NamedSequence(
        identifier=identifier,
        residues=list(seq_str),
        description=description,
    )


def read_fasta(file_path: str, ids: Optional[List[str]] = None) -> List[NamedSequence]:
    """Read a FASTA file and return its records in file order.

    When ``ids`` is given, only records with those identifiers are kept.
    """
    sequences: List[NamedSequence] = []
    for record in skbio.io.read(str(file_path), format="fasta"):
        if ids and record.metadata["id"] not in ids:
            continue
        sequences.append(named_sequence_from_skbio(record))
    return sequences


__all__ = ["read_fasta", "named_sequence_from_skbio"]
