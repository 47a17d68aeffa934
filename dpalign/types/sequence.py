"""Sequence types."""

from dataclasses import dataclass
from typing import List, Optional

GAP_CHARACTERS = {"-", "."}


@dataclass(frozen=True)
class NamedSequence:
    """Symbol sequence with an identifier and optional description."""

    identifier: str
    residues: List[str]
    description: Optional[str] = None

    def __post_init__(self) -> None:
        self._validate()

    def __len__(self) -> int:
        return len(self.residues)

    def __getitem__(self, index: int) -> str:
        return self.residues[index]

    def __str__(self) -> str:
        return "".join(self.residues)

    def _validate(self) -> None:
        if any(len(res) != 1 for res in self.residues):
            raise ValueError(
                f"Residues of {self.identifier!r} must be single characters."
            )
        gaps = {res for res in self.residues if res in GAP_CHARACTERS}
        if gaps:
            raise ValueError(
                f"Sequence {self.identifier!r} contains gap characters "
                f"{sorted(gaps)}; expected unaligned residues."
            )


__all__ = ["NamedSequence", "GAP_CHARACTERS"]
