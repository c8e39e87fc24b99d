import pytest

from mission.adapters.console import ConsoleCommandsChannel, ConsoleMissionReport
from mission.adapters.files import FileMissionSource, load_pair
from mission.adapters.memory import RecordingMissionReport, StaticCommandsChannel, StaticMissionSource
from mission.entities.grid import Grid
from mission.entities.vehicle import Vehicle
from mission.orchestrator.runner import run_app
from mission.utils.consts import GREEN, RED, RESET
from mission.utils.enums import Command, Heading
from mission.utils.errors import InvalidGrid, InvalidVehicle
from mission.utils.types import Position


def test_load_pair(tmp_path):
    f = tmp_path / "pair.txt"
    f.write_text(" 5x4 \n2,0 0,3\n\n")
    assert load_pair(str(f), InvalidGrid) == ("5x4", "2,0 0,3")


def test_load_pair_missing_second_line(tmp_path):
    f = tmp_path / "pair.txt"
    f.write_text("5x4\n")
    assert load_pair(str(f), InvalidGrid) == ("5x4", "")


@pytest.mark.parametrize("content", ["", "\n\n", "a\nb\nc\n"])
def test_load_pair_rejects_bad_files(tmp_path, content):
    f = tmp_path / "pair.txt"
    f.write_text(content)
    with pytest.raises(InvalidVehicle):
        load_pair(str(f), InvalidVehicle)


def test_file_mission_source(mission_files, grid, vehicle):
    source = FileMissionSource(*mission_files)
    assert source.read_grid() == grid
    assert source.read_vehicle() == vehicle


def test_file_mission_source_missing_file(tmp_path):
    source = FileMissionSource(str(tmp_path / "nope.txt"), str(tmp_path / "nope.txt"))
    with pytest.raises(FileNotFoundError):
        source.read_grid()


def test_console_commands_channel():
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return "rbF\n"

    channel = ConsoleCommandsChannel(input_fn=fake_input)
    assert channel.receive_commands() == [Command.TURN_RIGHT, Command.MOVE_BACKWARD, Command.MOVE_FORWARD]
    assert prompts == ["Waiting commands...\n"]


def test_console_report_integration(mission_files):
    lines = []
    report = ConsoleMissionReport(output=lines.append)
    channel = ConsoleCommandsChannel(input_fn=lambda _: "RBBLBRF")
    run_app(FileMissionSource(*mission_files), channel, report)
    assert lines == [f"{GREEN}[OK] 4:3:E{RESET}"]
    assert not report.failed


def test_console_report_obstacle_and_error():
    lines = []
    report = ConsoleMissionReport(output=lines.append)
    report.obstacle_detected(Vehicle(Position(1, 0), Heading.EAST))
    report.error("invalid command: X")
    assert lines == [f"{GREEN}[OK] O:1:0:E{RESET}", f"{RED}[ERROR] invalid command: X{RESET}"]
    assert report.failed


def test_static_adapters():
    source = StaticMissionSource("5x4", "", "1,1", "s")
    assert source.read_grid() == Grid(5, 4)
    assert source.read_vehicle() == Vehicle(Position(1, 1), Heading.SOUTH)
    assert StaticCommandsChannel("LR").receive_commands() == [Command.TURN_LEFT, Command.TURN_RIGHT]


@pytest.mark.parametrize("source,commands,status,rendered", [
    (("5x4", "2,0 0,3 3,2", "0,0", "N"), "RBBLBRF", "completed", "4:3:E"),
    (("5x4", "2,0 0,3 3,2", "0,0", "N"), "RFF", "obstacle", "O:1:0:E"),
    (("0x4", "2,0", "0,0", "N"), "RFF", "error", "invalid size: 0x4"),
    (("5x4", "", "20", "N"), "RFF", "error", "invalid position: 20"),
    (("5x4", "", "0,0", "N"), "BFXLR", "error", "invalid command: X"),
])
def test_recording_report_gets_exactly_one_signal(source, commands, status, rendered):
    report = RecordingMissionReport()
    run_app(StaticMissionSource(*source), StaticCommandsChannel(commands), report)
    assert report.calls == 1
    assert report.status == status
    assert report.rendered == rendered
    if status == "error":
        assert report.reason == rendered and report.vehicle is None
    else:
        assert report.reason is None and report.vehicle is not None
