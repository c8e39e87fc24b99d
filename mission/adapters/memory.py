# IN THIS FILE: IN-MEMORY ADAPTERS (raw text in, recorded signal out)
# Used by the HTTP endpoint, where the mission arrives as a JSON body.

from typing import List, Optional

from mission.codec.parsing import parse_commands, parse_grid, parse_vehicle
from mission.codec.rendering import render_completed, render_obstacle
from mission.entities.grid import Grid
from mission.entities.vehicle import Vehicle
from mission.orchestrator.ports import CommandsChannel, MissionReport, MissionSource
from mission.utils.enums import Command

COMPLETED = "completed"
OBSTACLE = "obstacle"
ERROR = "error"


class StaticMissionSource(MissionSource):
    def __init__(self, grid_size: str, obstacles: str, position: str, heading: str):
        self.grid_size = grid_size
        self.obstacles = obstacles
        self.position = position
        self.heading = heading

    def read_grid(self) -> Grid:
        return parse_grid(self.grid_size, self.obstacles)

    def read_vehicle(self) -> Vehicle:
        return parse_vehicle(self.position, self.heading)


class StaticCommandsChannel(CommandsChannel):
    def __init__(self, commands: str):
        self.commands = commands

    def receive_commands(self) -> List[Command]:
        return parse_commands(self.commands)


class RecordingMissionReport(MissionReport):
    """
    Keeps the terminal signal instead of printing it.

    Attributes:
        status:   "completed", "obstacle" or "error" (None until reported)
        vehicle:  final pose, for completed/obstacle
        reason:   failure text, for error
        rendered: result line ("4:3:E", "O:1:0:E") or the failure text
        calls:    number of signals received
    """

    def __init__(self):
        self.status: Optional[str] = None
        self.vehicle: Optional[Vehicle] = None
        self.reason: Optional[str] = None
        self.rendered: Optional[str] = None
        self.calls = 0

    def sequence_completed(self, vehicle: Vehicle) -> None:
        self._record(COMPLETED, vehicle=vehicle, rendered=render_completed(vehicle))

    def obstacle_detected(self, vehicle: Vehicle) -> None:
        self._record(OBSTACLE, vehicle=vehicle, rendered=render_obstacle(vehicle))

    def error(self, reason: str) -> None:
        self._record(ERROR, reason=reason, rendered=reason)

    def _record(self, status: str, vehicle: Optional[Vehicle] = None,
                reason: Optional[str] = None, rendered: Optional[str] = None) -> None:
        self.calls += 1
        self.status = status
        self.vehicle = vehicle
        self.reason = reason
        self.rendered = rendered
