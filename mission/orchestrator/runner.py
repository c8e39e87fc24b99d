# mission/orchestrator/runner.py
import logging
from typing import List, Optional

from mission.codec.rendering import render_error
from mission.commands.interpreter import CommandInterpreter
from mission.entities.vehicle import Vehicle
from mission.orchestrator.ports import CommandsChannel, MissionReport, MissionSource
from mission.utils.types import ObstacleHit, Outcome

logger = logging.getLogger(__name__)


def run_mission(source: MissionSource, channel: CommandsChannel,
                history: Optional[List[Vehicle]] = None) -> Outcome:
    """
    Acquire grid, vehicle and commands (in that order) and run them.
    Any acquisition failure propagates unchanged.

    If `history` is given, every pose visited is appended to it.
    """
    grid = source.read_grid()
    vehicle = source.read_vehicle()
    commands = channel.receive_commands()
    logger.debug("Running %d command(s) from %r on %r", len(commands), vehicle, grid)
    interpreter = CommandInterpreter(grid)
    if history is None:
        return interpreter.execute_all(vehicle, commands)
    outcome, visited = interpreter.trace(vehicle, commands)
    history.extend(visited)
    return outcome


def run_app(source: MissionSource, channel: CommandsChannel, report: MissionReport,
            history: Optional[List[Vehicle]] = None) -> None:
    """
    Run one mission and send exactly one signal to `report`.
    `history` is passed through to run_mission.
    """
    try:
        outcome = run_mission(source, channel, history)
    except Exception as e:
        logger.warning("Mission aborted: %s", render_error(e))
        report.error(render_error(e))
        return

    if isinstance(outcome, ObstacleHit):
        report.obstacle_detected(outcome.vehicle)
    else:
        report.sequence_completed(outcome.vehicle)
