"""wodparse: turn free-text workout descriptions into structured workouts."""

from .core import WorkoutParser
from .movements import InMemoryMovementDictionary, MovementDictionary

__all__ = ["WorkoutParser", "InMemoryMovementDictionary", "MovementDictionary"]
