"""Result types returned by scoring and search operations."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class RankedMatch:
    """A candidate string paired with its similarity score."""

    text: str
    score: float


@dataclass(frozen=True)
class BestMatch:
    """Outcome of scoring a source string against explicit candidates.

    Attributes:
        ranking: One RankedMatch per candidate, in candidate order.
        best: The selected candidate, or None when there were no candidates.
        best_index: Position of ``best`` in ``ranking``, or -1.
    """

    ranking: List[RankedMatch] = field(default_factory=list)
    best: Optional[RankedMatch] = None
    best_index: int = -1

    def __bool__(self) -> bool:
        return self.best is not None


__all__ = ["RankedMatch", "BestMatch"]
