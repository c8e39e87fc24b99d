# IN THIS FILE: RAW TEXT -> GRID, VEHICLE, COMMANDS
#
# Every parser either returns a domain value or raises a ParseError subclass.
# Lists (obstacles, commands) are all-or-nothing: the first bad token wins.

import re
from typing import List, Tuple, Type

from mission.entities.grid import Grid
from mission.entities.vehicle import Vehicle
from mission.utils.consts import OBSTACLE_SEPARATOR, POSITION_SEPARATOR, SIZE_SEPARATOR
from mission.utils.enums import Command, Heading
from mission.utils.errors import InvalidCommand, InvalidGrid, InvalidVehicle, ParseError
from mission.utils.types import Position

_COMMANDS = {c.value: c for c in Command}
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_pair(separator: str, raw: str) -> Tuple[int, int]:
    """
    Split "a<sep>b" into two integers.

    Examples:
        parse_pair("-", "1-0")  -> (1, 0)
        parse_pair("-", "10")   -> ValueError
        parse_pair(",", "1,0,3") -> ValueError
    """
    parts = [p.strip() for p in raw.split(separator)]
    if len(parts) != 2 or not all(_INTEGER_RE.fullmatch(p) for p in parts):
        raise ValueError(f"expected two integers separated by {separator!r}: {raw!r}")
    return int(parts[0]), int(parts[1])


def parse_position(raw: str, error: Type[ParseError] = InvalidVehicle) -> Position:
    """
    "2,0" -> Position(2, 0)

    `error` picks the failure kind, since both vehicles and obstacles use this format.
    """
    try:
        x, y = parse_pair(POSITION_SEPARATOR, raw)
    except ValueError:
        raise error(f"invalid position: {raw}", raw) from None
    return Position(x, y)


def parse_heading(raw: str) -> Heading:
    try:
        return Heading.from_code(raw)
    except KeyError:
        raise InvalidVehicle(f"invalid orientation: {raw}", raw) from None


def parse_vehicle(raw_position: str, raw_heading: str) -> Vehicle:
    """("2,0", "N") -> Vehicle at (2, 0) facing NORTH"""
    return Vehicle(parse_position(raw_position, InvalidVehicle), parse_heading(raw_heading))


def parse_size(raw: str) -> Tuple[int, int]:
    """"5x4" -> (5, 4); both sides must be positive."""
    try:
        width, height = parse_pair(SIZE_SEPARATOR, raw)
    except ValueError:
        raise InvalidGrid(f"invalid size: {raw}", raw) from None
    if width <= 0 or height <= 0:
        raise InvalidGrid(f"invalid size: {raw}", raw)
    return width, height


def parse_obstacle(raw: str) -> Position:
    return parse_position(raw, InvalidGrid)


def parse_obstacles(raw: str) -> List[Position]:
    """
    "2,0 0,3" -> [Position(2, 0), Position(0, 3)]

    A blank line means no obstacles. One bad token fails the whole list.
    """
    tokens = [t for t in raw.strip().split(OBSTACLE_SEPARATOR) if t]
    obstacles = []
    for token in tokens:
        try:
            obstacles.append(parse_obstacle(token))
        except InvalidGrid:
            raise InvalidGrid(f"invalid obstacles: {raw}", token) from None
    return obstacles


def parse_grid(raw_size: str, raw_obstacles: str) -> Grid:
    """("5x4", "2,0 0,3") -> Grid(5, 4, {(2, 0), (0, 3)})"""
    width, height = parse_size(raw_size)
    return Grid(width, height, parse_obstacles(raw_obstacles))


def parse_command(raw: str) -> Command:
    """"B" -> MOVE_BACKWARD; letters are case-insensitive"""
    command = _COMMANDS.get(raw.upper()) if len(raw) == 1 else None
    if command is None:
        raise InvalidCommand(f"invalid command: {raw}", raw)
    return command


def parse_commands(raw: str) -> List[Command]:
    """
    "BFLR" -> [MOVE_BACKWARD, MOVE_FORWARD, TURN_LEFT, TURN_RIGHT]

    Stops at the first unknown letter. Surrounding whitespace is ignored.
    """
    return [parse_command(char) for char in raw.strip()]
