# main.py
import argparse
import logging
import sys
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from mission.adapters.console import ConsoleCommandsChannel, ConsoleMissionReport
from mission.adapters.files import FileMissionSource
from mission.adapters.memory import (
    ERROR,
    RecordingMissionReport,
    StaticCommandsChannel,
    StaticMissionSource,
)
from mission.orchestrator.runner import run_app
from mission.utils.consts import (
    DEFAULT_GRID_FILE,
    DEFAULT_VEHICLE_FILE,
    SERVER_HOST,
    SERVER_PORT,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Mission Control Server")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class MissionInput(BaseModel):
    # Same text formats as the data files and the console
    grid_size: str
    obstacles: str = ""
    position: str
    heading: str
    commands: str = ""


class PathPoint(BaseModel):
    x: int
    y: int
    d: int


class MissionOutput(BaseModel):
    status: str
    result: str
    x: int
    y: int
    heading: str
    path: List[PathPoint]


# =============================================================================
# CORE
# =============================================================================

def run_request(input_data: MissionInput) -> dict:
    source = StaticMissionSource(
        input_data.grid_size,
        input_data.obstacles,
        input_data.position,
        input_data.heading,
    )
    channel = StaticCommandsChannel(input_data.commands)
    report = RecordingMissionReport()
    history = []
    run_app(source, channel, report, history)

    if report.status == ERROR:
        raise HTTPException(status_code=400, detail=report.reason)

    final = report.vehicle
    return {
        "status": report.status,
        "result": report.rendered,
        "x": final.x,
        "y": final.y,
        "heading": final.heading.code,
        "path": [v.get_dict() for v in history],
    }


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/status")
def health_check():
    return {"status": "ok", "message": "Mission server is running"}


@app.post("/mission", response_model=MissionOutput)
def run_mission_endpoint(input_data: MissionInput):
    try:
        return run_request(input_data)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Mission request failed")
        raise HTTPException(status_code=500, detail=str(e))


# =============================================================================
# COMMAND LINE
# =============================================================================

def run_console(grid_file: str, vehicle_file: str, commands: Optional[str] = None) -> int:
    """
    Run one mission from files, printing the result line.
    Commands are asked on stdin unless given.

    Returns:
        process exit code (1 if the mission could not run)
    """
    source = FileMissionSource(grid_file, vehicle_file)
    channel = StaticCommandsChannel(commands) if commands is not None else ConsoleCommandsChannel()
    report = ConsoleMissionReport()
    run_app(source, channel, report)
    return 1 if report.failed else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Toroidal grid vehicle mission runner")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="mode")

    serve = sub.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", default=SERVER_HOST)
    serve.add_argument("--port", type=int, default=SERVER_PORT)

    run = sub.add_parser("run", help="Run one mission from files")
    run.add_argument("--grid", default=DEFAULT_GRID_FILE, help="Grid file (size / obstacles)")
    run.add_argument("--vehicle", default=DEFAULT_VEHICLE_FILE, help="Vehicle file (position / heading)")
    run.add_argument("--commands", default=None, help="Command string, e.g. RBBLBRF (asked if omitted)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    if args.mode == "run":
        return run_console(args.grid, args.vehicle, args.commands)

    host = getattr(args, "host", SERVER_HOST)
    port = getattr(args, "port", SERVER_PORT)
    uvicorn.run(app, host=host, port=port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
