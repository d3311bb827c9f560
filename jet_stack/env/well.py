"""Bounded row storage for the well.

The well is a ring buffer of row bitmasks indexed relative to a moving head.
Logical row ``0`` is the highest tracked row and larger indices go down the
stack. Rows that were never written read as ``SOLID_ROW`` so a collision test
against them always hits, which gives the well its floor for free.
"""
from __future__ import annotations

from typing import List

from .shapes import Shape, WELL_WIDTH, is_bit_set

EMPTY_ROW = 0x00
SOLID_ROW = 0xFF
DEFAULT_CAPACITY = 500


class Well:
    """Fixed-capacity ring buffer of 7-column rows."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("Capacity must be positive")
        self.capacity = capacity
        self.rows = bytearray([SOLID_ROW]) * capacity
        self.head = 0
        self.depth = 0

    def prepend_empty_row(self) -> None:
        """Grow the tracked stack by one empty row at the top."""
        self.head = (self.head + self.capacity - 1) % self.capacity
        self.rows[self.head] = EMPTY_ROW
        self.depth = min(self.depth + 1, self.capacity)

    def get(self, row: int) -> int:
        return self.rows[(self.head + row) % self.capacity]

    def set(self, shape: Shape, x: int, y: int) -> None:
        """OR ``shape`` into the rows starting at logical row ``y``."""
        for r, mask in enumerate(shape.masks):
            index = (self.head + y + r) % self.capacity
            self.rows[index] |= mask >> x

    def test(self, shape: Shape, x: int, y: int) -> bool:
        """Return ``True`` if ``shape`` at ``(x, y)`` overlaps an occupied cell.

        Rows above logical row ``0`` are open air and never collide.
        """
        for r, mask in enumerate(shape.masks):
            row = y + r
            if row >= 0 and (mask >> x) & self.get(row):
                return True
        return False

    def snapshot(self) -> bytes:
        """Return every stored row with logical row ``0`` first."""
        return bytes(self.rows[self.head:] + self.rows[:self.head])

    def render(
        self,
        shape: Shape | None = None,
        x: int = 0,
        y: int = 0,
        rows: int | None = None,
    ) -> str:
        """Draw the well with ``#`` for rock and ``.`` for air.

        When ``shape`` is given it is overlaid as ``@`` at ``(x, y)``. Negative
        ``y`` adds blank lines above the tracked top so the shape stays visible.
        """
        if rows is None:
            rows = self.depth
        lines: List[str] = ["." * WELL_WIDTH for _ in range(max(-y, 0))]
        for row in range(rows):
            bitmask = self.get(row)
            lines.append(
                "".join("#" if is_bit_set(bitmask, col) else "." for col in range(WELL_WIDTH))
            )

        if shape is not None:
            top = len(lines) - rows + y
            for r in range(shape.height):
                line = top + r
                if line < 0 or line >= len(lines):
                    continue
                bitmask = shape.masks[r] >> x
                lines[line] = "".join(
                    "@" if is_bit_set(bitmask, col) else ch
                    for col, ch in enumerate(lines[line])
                )
        return "\n".join(lines)
