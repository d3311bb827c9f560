from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

LEFT = -1
RIGHT = 1


def parse_jets(pattern: str) -> List[int]:
    """Map every character to a push direction.

    ``<`` pushes left; anything else pushes right.
    """
    return [LEFT if c == "<" else RIGHT for c in pattern]


@dataclass
class JetPattern:
    """Push directions with a cursor that wraps back to the start."""

    pattern: str
    deltas: List[int] = field(init=False)
    index: int = 0

    def __post_init__(self) -> None:
        self.deltas = parse_jets(self.pattern)
        if not self.deltas:
            raise ValueError("Jet pattern is empty")
        self.index %= len(self.deltas)

    def __len__(self) -> int:
        return len(self.deltas)

    def next(self) -> int:
        """Return the current push and advance the cursor."""
        delta = self.deltas[self.index]
        self.index = 0 if self.index + 1 == len(self.deltas) else self.index + 1
        return delta
