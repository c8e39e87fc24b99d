# IN THIS FILE: HEADINGS and COMMANDS
from enum import Enum
from typing import Tuple


class Heading(int, Enum):
    """
    Vehicle facing direction.
    Uses even numbers clockwise so a quarter turn is always +/- 2 (mod 8).
    """
    NORTH = 0
    EAST = 2
    SOUTH = 4
    WEST = 6

    def __int__(self):
        return self.value

    @property
    def code(self) -> str:
        """Single-letter code used by the text formats (N/E/S/W)."""
        return self.name[0]

    @classmethod
    def from_code(cls, code: str) -> 'Heading':
        """
        Look up a heading by its letter, case-insensitive.

        Raises:
            KeyError: if the letter is not one of N/E/S/W
        """
        return _HEADING_CODES[code.strip().upper()]

    def turn_right(self) -> 'Heading':
        return Heading((self.value + 2) % 8)

    def turn_left(self) -> 'Heading':
        return Heading((self.value - 2) % 8)

    def opposite(self) -> 'Heading':
        return Heading((self.value + 4) % 8)

    def delta(self) -> Tuple[int, int]:
        """
        Unit displacement for one forward step.

        Examples:
            NORTH -> (0, 1)
            EAST  -> (1, 0)
        """
        return _DELTAS[self]


_HEADING_CODES = {h.code: h for h in Heading}

_DELTAS = {
    Heading.NORTH: (0, 1),
    Heading.EAST: (1, 0),
    Heading.SOUTH: (0, -1),
    Heading.WEST: (-1, 0),
}


class Command(Enum):
    """
    Vehicle commands.
    Value is the letter used in a command string.
    """
    TURN_LEFT = "L"
    TURN_RIGHT = "R"
    MOVE_FORWARD = "F"
    MOVE_BACKWARD = "B"
