# IN THIS FILE: ALL CONSTANTS (TEXT FORMATS, DATA FILES, SERVER)
import os

# -----------------------------------------------------------------------------
# 1. TEXT FORMATS
# -----------------------------------------------------------------------------
POSITION_SEPARATOR = ","    # "x,y"
SIZE_SEPARATOR = "x"        # "WxH"
OBSTACLE_SEPARATOR = " "    # "2,0 0,3 3,2"
RENDER_SEPARATOR = ":"      # "4:3:E"
OBSTACLE_MARKER = "O"       # "O:1:0:E"

# -----------------------------------------------------------------------------
# 2. DATA FILES
# -----------------------------------------------------------------------------
# Each file holds exactly two lines (grid: size / obstacles, vehicle: position / heading)
DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), "data")
DEFAULT_GRID_FILE = os.path.join(DATA_DIR, "planet.txt")
DEFAULT_VEHICLE_FILE = os.path.join(DATA_DIR, "rover.txt")
COMMANDS_PROMPT = "Waiting commands..."

# -----------------------------------------------------------------------------
# 3. CONSOLE
# -----------------------------------------------------------------------------
GREEN = "\u001B[32m"
RED = "\u001B[31m"
RESET = "\u001B[0m"

# -----------------------------------------------------------------------------
# 4. SERVER
# -----------------------------------------------------------------------------
SERVER_HOST = "0.0.0.0"
SERVER_PORT = 5000
API_URL = f"http://localhost:{SERVER_PORT}/mission"
