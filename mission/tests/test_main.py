from main import build_parser, main
from mission.utils.consts import GREEN, RED, RESET


def test_run_from_files(mission_files, capsys):
    grid_file, vehicle_file = mission_files
    code = main(["run", "--grid", grid_file, "--vehicle", vehicle_file, "--commands", "RFF"])
    assert code == 0
    assert capsys.readouterr().out.strip() == f"{GREEN}[OK] O:1:0:E{RESET}"


def test_run_asks_commands_on_stdin(mission_files, capsys, monkeypatch):
    grid_file, vehicle_file = mission_files
    monkeypatch.setattr("builtins.input", lambda prompt: "RBBLBRF")
    code = main(["run", "--grid", grid_file, "--vehicle", vehicle_file])
    assert code == 0
    assert capsys.readouterr().out.strip() == f"{GREEN}[OK] 4:3:E{RESET}"


def test_run_reports_errors(mission_files, capsys):
    grid_file, vehicle_file = mission_files
    code = main(["run", "--grid", grid_file, "--vehicle", vehicle_file, "--commands", "BFXLR"])
    assert code == 1
    assert capsys.readouterr().out.strip() == f"{RED}[ERROR] invalid command: X{RESET}"


def test_serve_defaults():
    args = build_parser().parse_args(["serve"])
    assert args.port == 5000
    assert args.host == "0.0.0.0"
