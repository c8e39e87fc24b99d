import argparse
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
import requests

from mission.codec.parsing import parse_commands, parse_grid, parse_vehicle
from mission.codec.rendering import render
from mission.commands.interpreter import CommandInterpreter
from mission.entities.grid import Grid
from mission.entities.vehicle import Vehicle
from mission.utils.consts import API_URL
from mission.utils.enums import Heading
from mission.utils.types import Completed, ObstacleHit, Outcome, Position

# CONFIGURATION
SAMPLE_MISSION = {
    "grid_size": "5x4",
    "obstacles": "2,0 0,3 3,2",
    "position": "0,0",
    "heading": "N",
    "commands": "RBBLBRF",
}

# Heading -> arrow drawing params (adx, ady) from the cell centre
HEADING_ARROW = {
    Heading.NORTH: (0, 0.3),
    Heading.EAST: (0.3, 0),
    Heading.SOUTH: (0, -0.3),
    Heading.WEST: (-0.3, 0),
}


def fetch_mission(payload: dict, url: str = API_URL) -> dict:
    """POST a mission to the server and return its JSON answer."""
    res = requests.post(url, json=payload, timeout=10)
    res.raise_for_status()
    return res.json()


def outcome_from_response(data: dict) -> Tuple[Outcome, List[Vehicle]]:
    path = [Vehicle(Position(p["x"], p["y"]), Heading(p["d"])) for p in data["path"]]
    final = Vehicle(Position(data["x"], data["y"]), Heading.from_code(data["heading"]))
    outcome = ObstacleHit(final) if data["status"] == "obstacle" else Completed(final)
    return outcome, path


def occupancy(grid: Grid) -> np.ndarray:
    """
    1 where a cell is blocked, indexed [y, x].
    Obstacles outside the grid never block, so they are not drawn.
    """
    cells = np.zeros((grid.height, grid.width), dtype=np.uint8)
    for obs in grid.obstacles:
        if grid.wrap(obs) != obs:
            continue
        cells[obs.y, obs.x] = 1
    return cells


def draw_mission(grid: Grid, path: List[Vehicle], outcome: Outcome, ax: Optional[plt.Axes] = None) -> plt.Axes:
    """
    Draw the grid, the trail of visited cells and the final pose.
    The title is the rendered outcome ("4:3:E" / "O:1:0:E").
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    ax.clear()
    ax.imshow(
        occupancy(grid), cmap="Reds", origin="lower", vmin=0, vmax=1,
        extent=(0, grid.width, 0, grid.height), zorder=0,
    )
    ax.set_xlim(0, grid.width)
    ax.set_ylim(0, grid.height)
    ax.set_xticks(range(grid.width + 1))
    ax.set_yticks(range(grid.height + 1))
    ax.grid(True, linestyle=':', alpha=0.6)

    # Trail: skip segments that wrap around an edge
    for prev, curr in zip(path, path[1:]):
        if abs(curr.x - prev.x) + abs(curr.y - prev.y) != 1:
            continue
        ax.annotate(
            '', xy=(curr.x + 0.5, curr.y + 0.5), xytext=(prev.x + 0.5, prev.y + 0.5),
            arrowprops=dict(arrowstyle='->', color='cyan', lw=2, alpha=0.9), zorder=1,
        )

    final = outcome.vehicle
    adx, ady = HEADING_ARROW[final.heading]
    color = 'darkred' if isinstance(outcome, ObstacleHit) else 'blue'
    ax.arrow(final.x + 0.5, final.y + 0.5, adx, ady, color=color, width=0.08, head_width=0.25, zorder=3)
    ax.set_title(render(outcome), fontsize=11, color=color)
    return ax


def run_local(payload: dict) -> Tuple[Grid, Outcome, List[Vehicle]]:
    """Run a mission in-process, without the server."""
    grid = parse_grid(payload["grid_size"], payload.get("obstacles", ""))
    vehicle = parse_vehicle(payload["position"], payload["heading"])
    outcome, path = CommandInterpreter(grid).trace(vehicle, parse_commands(payload.get("commands", "")))
    return grid, outcome, path


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Plot one mission")
    parser.add_argument("--local", action="store_true", help="Run without the server")
    parser.add_argument("--url", default=API_URL)
    parser.add_argument("--commands", default=SAMPLE_MISSION["commands"])
    args = parser.parse_args()

    payload = dict(SAMPLE_MISSION, commands=args.commands)
    if args.local:
        grid, outcome, path = run_local(payload)
    else:
        grid = parse_grid(payload["grid_size"], payload["obstacles"])
        outcome, path = outcome_from_response(fetch_mission(payload, args.url))

    draw_mission(grid, path, outcome)
    plt.show()
