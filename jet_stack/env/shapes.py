"""Catalog of the five falling shapes.

Each shape is stored as four 8-bit row masks with the top row first. Column
``0`` of the well is the most significant bit, so shifting a mask right by
``x`` moves the shape's left edge to column ``x``. Only the high seven bits
are ever used.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

WELL_WIDTH = 7


@dataclass(frozen=True)
class Shape:
    name: str
    width: int
    height: int
    masks: Tuple[int, int, int, int]


SHAPES: Tuple[Shape, ...] = (
    Shape("minus", 4, 1, (0b11110000, 0b00000000, 0b00000000, 0b00000000)),
    Shape("plus", 3, 3, (0b01000000, 0b11100000, 0b01000000, 0b00000000)),
    Shape("corner", 3, 3, (0b00100000, 0b00100000, 0b11100000, 0b00000000)),
    Shape("bar", 1, 4, (0b10000000, 0b10000000, 0b10000000, 0b10000000)),
    Shape("square", 2, 2, (0b11000000, 0b11000000, 0b00000000, 0b00000000)),
)


def is_bit_set(row: int, column: int) -> bool:
    """Return ``True`` if ``column`` is occupied in the row bitmask ``row``."""
    return (row & (1 << (7 - column))) != 0


def in_bounds(shape: Shape, x: int) -> bool:
    return x >= 0 and x + shape.width <= WELL_WIDTH
