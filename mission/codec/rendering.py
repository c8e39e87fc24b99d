# IN THIS FILE: DOMAIN VALUES -> TEXT

from mission.entities.vehicle import Vehicle
from mission.utils.consts import OBSTACLE_MARKER, RENDER_SEPARATOR
from mission.utils.errors import ParseError
from mission.utils.types import ObstacleHit, Outcome


def render_vehicle(vehicle: Vehicle) -> str:
    """Vehicle at (4, 3) facing EAST -> "4:3:E" """
    return RENDER_SEPARATOR.join((str(vehicle.x), str(vehicle.y), vehicle.heading.code))


def render_completed(vehicle: Vehicle) -> str:
    return render_vehicle(vehicle)


def render_obstacle(vehicle: Vehicle) -> str:
    return OBSTACLE_MARKER + RENDER_SEPARATOR + render_vehicle(vehicle)


def render(outcome: Outcome) -> str:
    if isinstance(outcome, ObstacleHit):
        return render_obstacle(outcome.vehicle)
    return render_completed(outcome.vehicle)


def render_error(error: BaseException) -> str:
    if isinstance(error, ParseError):
        return error.reason
    return str(error) or type(error).__name__
