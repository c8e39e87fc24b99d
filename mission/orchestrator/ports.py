# IN THIS FILE: WHAT THE MISSION RUNNER NEEDS FROM THE OUTSIDE WORLD

from abc import ABC, abstractmethod
from typing import List

from mission.entities.grid import Grid
from mission.entities.vehicle import Vehicle
from mission.utils.enums import Command


class MissionSource(ABC):
    """
    Supplies the validated grid and starting vehicle.
    Either method may raise (bad input, missing file, ...); the runner reports it.
    """

    @abstractmethod
    def read_grid(self) -> Grid:
        pass

    @abstractmethod
    def read_vehicle(self) -> Vehicle:
        pass


class CommandsChannel(ABC):
    """Supplies the validated command sequence."""

    @abstractmethod
    def receive_commands(self) -> List[Command]:
        pass


class MissionReport(ABC):
    """
    Receives exactly one terminal signal per mission.
    """

    @abstractmethod
    def sequence_completed(self, vehicle: Vehicle) -> None:
        pass

    @abstractmethod
    def obstacle_detected(self, vehicle: Vehicle) -> None:
        pass

    @abstractmethod
    def error(self, reason: str) -> None:
        pass
