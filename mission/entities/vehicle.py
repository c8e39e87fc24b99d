# IN THIS FILE: VEHICLE POSE & ITS FOUR TRANSITIONS

from dataclasses import dataclass, replace

from mission.entities.grid import Grid
from mission.utils.enums import Command, Heading
from mission.utils.types import Completed, ObstacleHit, Outcome, Position


@dataclass(frozen=True)
class Vehicle:
    """
    Pose of the vehicle: where it stands and where it faces.
    Every transition returns a new Vehicle; the old one is left untouched.
    """
    position: Position
    heading: Heading

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def turn_right(self) -> 'Vehicle':
        return replace(self, heading=self.heading.turn_right())

    def turn_left(self) -> 'Vehicle':
        return replace(self, heading=self.heading.turn_left())

    def move_forward(self, grid: Grid) -> Outcome:
        return self._step(grid, self.heading)

    def move_backward(self, grid: Grid) -> Outcome:
        """Step against the heading without turning around."""
        return self._step(grid, self.heading.opposite())

    def execute(self, command: Command, grid: Grid) -> Outcome:
        """
        Apply one command.

        Returns:
            Completed(new pose), or ObstacleHit(self) when a move is blocked
        """
        return _TRANSITIONS[command](self, grid)

    def _step(self, grid: Grid, direction: Heading) -> Outcome:
        dx, dy = direction.delta()
        candidate = grid.wrap(self.position.shift(dx, dy))
        if grid.is_blocked(candidate):
            # Vehicle never enters a blocked cell
            return ObstacleHit(self)
        return Completed(replace(self, position=candidate))

    def get_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {"x": int(self.x), "y": int(self.y), "d": int(self.heading)}

    def __repr__(self) -> str:
        return f"Vehicle(x={self.x}, y={self.y}, d={self.heading.name})"


# One entry per Command; the enum is closed so there is no fallback
_TRANSITIONS = {
    Command.TURN_RIGHT: lambda vehicle, grid: Completed(vehicle.turn_right()),
    Command.TURN_LEFT: lambda vehicle, grid: Completed(vehicle.turn_left()),
    Command.MOVE_FORWARD: Vehicle.move_forward,
    Command.MOVE_BACKWARD: Vehicle.move_backward,
}
