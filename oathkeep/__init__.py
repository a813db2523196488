"""Game rules for a kingdom-building role-playing game: buildings, reputation, status effects and world time."""

__version__ = "0.1.0"

__all__ = ["building", "effects", "reputation", "world"]