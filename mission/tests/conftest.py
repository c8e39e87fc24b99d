import pytest

from mission.entities.grid import Grid
from mission.entities.vehicle import Vehicle
from mission.utils.enums import Heading
from mission.utils.types import Position


@pytest.fixture
def grid():
    # 5x4 with obstacles at (2,0), (0,3), (3,2)
    return Grid(5, 4, [Position(2, 0), Position(0, 3), Position(3, 2)])


@pytest.fixture
def vehicle():
    return Vehicle(Position(0, 0), Heading.NORTH)


@pytest.fixture
def mission_files(tmp_path):
    grid_file = tmp_path / "planet.txt"
    grid_file.write_text("5x4\n2,0 0,3 3,2\n")
    vehicle_file = tmp_path / "rover.txt"
    vehicle_file.write_text("0,0\nN\n")
    return str(grid_file), str(vehicle_file)
