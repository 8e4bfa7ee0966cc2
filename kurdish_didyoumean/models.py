from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Candidate:
    """A dictionary word scored against one query."""

    word: str
    similarity: float
    edit_distance: int

    def sort_key(self):
        # Best score first, then the literally closer word, then code-point order.
        return (-self.similarity, self.edit_distance, self.word)
