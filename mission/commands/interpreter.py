# mission/commands/interpreter.py
from typing import Iterable, List, Tuple

from mission.entities.grid import Grid
from mission.entities.vehicle import Vehicle
from mission.utils.enums import Command
from mission.utils.types import Completed, ObstacleHit, Outcome


class CommandInterpreter:
    """
    Runs command sequences for one grid.
    Stops at the first blocked move; later commands are never looked at.
    """

    def __init__(self, grid: Grid):
        self.grid = grid

    def execute_all(self, vehicle: Vehicle, commands: Iterable[Command]) -> Outcome:
        current = vehicle
        for command in commands:
            outcome = current.execute(command, self.grid)
            if isinstance(outcome, ObstacleHit):
                return outcome
            current = outcome.vehicle
        return Completed(current)

    def trace(self, vehicle: Vehicle, commands: Iterable[Command]) -> Tuple[Outcome, List[Vehicle]]:
        """
        Same as execute_all, but also returns every pose visited.

        Returns:
            (outcome, history) where history starts with `vehicle` and ends
            with the outcome's pose
        """
        history = [vehicle]
        for command in commands:
            outcome = history[-1].execute(command, self.grid)
            if isinstance(outcome, ObstacleHit):
                return outcome, history
            history.append(outcome.vehicle)
        return Completed(history[-1]), history


def execute_all(grid: Grid, vehicle: Vehicle, commands: Iterable[Command]) -> Outcome:
    return CommandInterpreter(grid).execute_all(vehicle, commands)
