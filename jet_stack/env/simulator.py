"""Drop simulation for the jet-pushed well."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .jets import JetPattern
from .shapes import SHAPES, Shape, in_bounds
from .well import DEFAULT_CAPACITY, Well


@dataclass
class SimConfig:
    capacity: int = DEFAULT_CAPACITY
    spawn_column: int = 2
    spawn_gap: int = 3
    detect_cycles: bool = True


class FallSimulator:
    """Drops shapes round-robin into a :class:`Well` and tracks stack height."""

    def __init__(self, pattern: str, *, config: SimConfig | None = None) -> None:
        self.config = config or SimConfig()
        self.pattern = pattern
        self.reset()

    # Internal helpers -----------------------------------------------------
    def _fall_through_empty_space(self, shape: Shape) -> None:
        """Apply the pushes that happen above the tracked top.

        The spawn gap is always empty so only the walls can stop a push.
        """
        x = self.config.spawn_column
        for _ in range(self.config.spawn_gap):
            new_x = x + self.jets.next()
            if in_bounds(shape, new_x):
                x = new_x
        self.x = x

    def _fall_through_well(self, shape: Shape) -> None:
        """Step ``shape`` down from just above row ``0`` until it rests."""
        x = self.x
        y = -shape.height

        while y + shape.height <= self.height:
            new_x = x + self.jets.next()
            if in_bounds(shape, new_x) and not self.well.test(shape, new_x, y):
                x = new_x

            # The push is consumed even when the shape comes to rest here.
            if self.well.test(shape, x, y + 1):
                break
            y += 1

        self.x = x
        self.y = y

    def _settle(self, shape: Shape) -> None:
        while self.y < 0:
            self.well.prepend_empty_row()
            self.height += 1
            self.y += 1
        self.well.set(shape, self.x, self.y)

    def _state_key(self) -> Tuple[int, int, bytes]:
        return self.shape_index, self.jets.index, self.well.snapshot()

    # Public API -----------------------------------------------------------
    def reset(self) -> Dict[str, int]:
        """Start over with an empty well and both cursors at ``0``."""
        self.jets = JetPattern(self.pattern)
        self.well = Well(self.config.capacity)
        self.height = 0
        self.drops = 0
        self.shape_index = 0
        self.x = 0
        self.y = 0
        return self.get_state()

    def drop(self) -> int:
        """Drop the next shape and return the new height."""
        shape = SHAPES[self.shape_index]
        self._fall_through_empty_space(shape)
        self._fall_through_well(shape)
        self._settle(shape)
        self.shape_index = (self.shape_index + 1) % len(SHAPES)
        self.drops += 1
        return self.height

    def run(self, drops: int) -> int:
        """Perform ``drops`` more drops and return the final height.

        With ``detect_cycles`` enabled, the first repeated state lets whole
        cycles be skipped. The state key covers everything that affects later
        drops, so the result is the same as dropping every shape.
        """
        if drops < 0:
            raise ValueError("Drop count must be non-negative")
        target = self.drops + drops
        seen: Dict[Tuple[int, int, bytes], Tuple[int, int]] = {}
        check_cycles = self.config.detect_cycles

        while self.drops < target:
            if check_cycles:
                key = self._state_key()
                if key in seen:
                    seen_at, seen_height = seen[key]
                    cycle_length = self.drops - seen_at
                    repeats = (target - self.drops) // cycle_length
                    self.height += (self.height - seen_height) * repeats
                    self.drops += cycle_length * repeats
                    check_cycles = False
                    seen.clear()
                    continue
                seen[key] = (self.drops, self.height)
            self.drop()

        return self.height

    def render(self) -> str:
        """Return the well with the most recently dropped shape marked."""
        if self.drops == 0:
            return self.well.render()
        shape = SHAPES[(self.shape_index - 1) % len(SHAPES)]
        return self.well.render(shape, self.x, self.y)

    def get_state(self) -> Dict[str, int]:
        return {
            "height": self.height,
            "drops": self.drops,
            "jet_index": self.jets.index,
            "shape_index": self.shape_index,
            "x": self.x,
            "y": self.y,
        }
