# IN THIS FILE: POSITION and MISSION OUTCOMES

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from mission.entities.vehicle import Vehicle


@dataclass(frozen=True)
class Position:
    """
    Integer cell coordinates.
    Unbounded on its own; a Grid wraps it onto the torus.
    """
    x: int
    y: int

    def shift(self, dx: int, dy: int) -> 'Position':
        return Position(self.x + dx, self.y + dy)

    def get_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {"x": int(self.x), "y": int(self.y)}


@dataclass(frozen=True)
class Completed:
    """Every command ran; `vehicle` is the final pose."""
    vehicle: 'Vehicle'

    @property
    def is_obstacle(self) -> bool:
        return False


@dataclass(frozen=True)
class ObstacleHit:
    """
    The sequence stopped early.
    `vehicle` is the last pose reached before the blocked cell.
    """
    vehicle: 'Vehicle'

    @property
    def is_obstacle(self) -> bool:
        return True


Outcome = Union[Completed, ObstacleHit]
