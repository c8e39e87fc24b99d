# IN THIS FILE: CONSOLE COMMANDS CHANNEL & CONSOLE REPORT

from typing import Callable, List, Optional

from mission.codec.parsing import parse_commands
from mission.codec.rendering import render_completed, render_obstacle
from mission.entities.vehicle import Vehicle
from mission.orchestrator.ports import CommandsChannel, MissionReport
from mission.utils.consts import COMMANDS_PROMPT, GREEN, RED, RESET
from mission.utils.enums import Command


class ConsoleCommandsChannel(CommandsChannel):
    """Asks for one line of commands, e.g. "RBBLBRF"."""

    def __init__(self, prompt: str = COMMANDS_PROMPT, input_fn: Optional[Callable[[str], str]] = None):
        self.prompt = prompt
        self.input_fn = input_fn or input

    def receive_commands(self) -> List[Command]:
        return parse_commands(self.input_fn(self.prompt + "\n"))


class ConsoleMissionReport(MissionReport):
    """
    Prints the result line.
    Completion and obstacle stops are both [OK]; only failures are [ERROR].
    """

    def __init__(self, output: Callable[[str], None] = print):
        self.output = output
        self.failed = False

    def sequence_completed(self, vehicle: Vehicle) -> None:
        self._info(render_completed(vehicle))

    def obstacle_detected(self, vehicle: Vehicle) -> None:
        self._info(render_obstacle(vehicle))

    def error(self, reason: str) -> None:
        self.failed = True
        self.output(f"{RED}[ERROR] {reason}{RESET}")

    def _info(self, message: str) -> None:
        self.output(f"{GREEN}[OK] {message}{RESET}")
