# IN THIS FILE: MISSION SOURCE BACKED BY TWO TEXT FILES

from typing import Tuple, Type

from mission.codec.parsing import parse_grid, parse_vehicle
from mission.entities.grid import Grid
from mission.entities.vehicle import Vehicle
from mission.orchestrator.ports import MissionSource
from mission.utils.errors import InvalidGrid, InvalidVehicle, ParseError


def load_pair(file_name: str, error: Type[ParseError]) -> Tuple[str, str]:
    """
    Read a two-line file.

    Trailing blank lines are dropped and a missing second line reads as "".

    Raises:
        OSError: if the file cannot be read
        error: if the file is empty or has more than two lines
    """
    with open(file_name, "r", encoding="utf-8") as f:
        lines = f.read().splitlines()

    while lines and not lines[-1].strip():
        lines.pop()
    if not 1 <= len(lines) <= 2:
        raise error(f"invalid file: {file_name} (expected 2 lines, got {len(lines)})", file_name)

    first, second = (lines + [""])[:2]
    return first.strip(), second.strip()


class FileMissionSource(MissionSource):
    """
    Grid file:    "5x4" / "2,0 0,3 3,2"
    Vehicle file: "0,0" / "N"
    """

    def __init__(self, grid_file: str, vehicle_file: str):
        self.grid_file = grid_file
        self.vehicle_file = vehicle_file

    def read_grid(self) -> Grid:
        return parse_grid(*load_pair(self.grid_file, InvalidGrid))

    def read_vehicle(self) -> Vehicle:
        return parse_vehicle(*load_pair(self.vehicle_file, InvalidVehicle))
