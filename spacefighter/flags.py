"""Bit-flag types for collision categories and weapon triggers."""

from __future__ import annotations

from enum import IntFlag


class CollisionType(IntFlag):
    """Categories an object belongs to when collisions are checked."""

    NONE = 0
    PLAYER = 1 << 0
    ENEMY = 1 << 1
    SHIP = 1 << 2
    PROJECTILE = 1 << 3

    def contains(self, other: CollisionType) -> bool:
        """Return True if this value shares any bit with other."""
        return (int(self) & int(other)) > 0


class TriggerType(IntFlag):
    """Triggers that can fire a weapon."""

    NONE = 0
    PRIMARY = 1 << 0
    SECONDARY = 1 << 1
    SPECIAL = 1 << 2
    ALL = 0xFFFF

    def contains(self, other: TriggerType) -> bool:
        """Return True if this value shares any bit with other."""
        return (int(self) & int(other)) > 0