# mission/entities/grid.py

from typing import FrozenSet, Iterable

from mission.utils.errors import InvalidGrid
from mission.utils.types import Position


class Grid:
    """
    Represents the toroidal arena the vehicle drives on.
    Holds the dimensions and the blocked cells; never changes once built.
    """

    __slots__ = ("_width", "_height", "_obstacles")

    def __init__(self, width: int, height: int, obstacles: Iterable[Position] = ()):
        """
        Args:
            width, height: Grid dimensions (cells), both must be positive
            obstacles: Blocked cells, compared as given (not pre-wrapped)

        Raises:
            InvalidGrid: if either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise InvalidGrid(f"invalid size: {width}x{height}", f"{width}x{height}")
        self._width = width
        self._height = height
        self._obstacles: FrozenSet[Position] = frozenset(obstacles)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def obstacles(self) -> FrozenSet[Position]:
        return self._obstacles

    def wrap(self, position: Position) -> Position:
        """
        Fold a position back onto the grid.
        Python's % is floored, so negative coordinates land in [0, size).
        """
        return Position(position.x % self._width, position.y % self._height)

    def is_blocked(self, position: Position) -> bool:
        """Check if an (already wrapped) position is one of the obstacles."""
        return position in self._obstacles

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return False
        return (self._width == other._width and
                self._height == other._height and
                self._obstacles == other._obstacles)

    def __hash__(self) -> int:
        return hash((self._width, self._height, self._obstacles))

    def __repr__(self) -> str:
        obstacles = sorted((o.x, o.y) for o in self._obstacles)
        return f"Grid(width={self._width}, height={self._height}, obstacles={obstacles})"
