"""Rectangular regions described by a corner, a width and a height."""

from __future__ import annotations

from dataclasses import dataclass

from spacefighter.vector2 import Vector2


@dataclass
class Region:
    """A rectangle whose upper left corner is (x, y)."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def from_position(cls, position: tuple[int, int], size: tuple[int, int]) -> Region:
        """Build a region from an upper left corner and a (width, height) pair."""
        px, py = position
        width, height = size
        return cls(px, py, width, height)

    def set(self, x: int, y: int, width: int, height: int) -> None:
        """Replace all components of the region."""
        self.x, self.y, self.width, self.height = x, y, width, height

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top_left(self) -> tuple[int, int]:
        return (self.left, self.top)

    @property
    def top_right(self) -> tuple[int, int]:
        return (self.right, self.top)

    @property
    def bottom_left(self) -> tuple[int, int]:
        return (self.left, self.bottom)

    @property
    def bottom_right(self) -> tuple[int, int]:
        return (self.right, self.bottom)

    @property
    def center(self) -> Vector2:
        """The centre of the region as a vector."""
        return Vector2(self.x, self.y) + Vector2(self.width, self.height) / 2

    def translate(self, dx: int | tuple[int, int], dy: int | None = None) -> None:
        """Move the region by (dx, dy), or by a point given as the only argument."""
        if dy is None:
            dx, dy = dx  # type: ignore[misc]
        self.x += dx
        self.y += dy