from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_PLAYERS_FILE = DATA_DIR / "players_2025.csv"

POSITIONS = ("QB", "RB", "WR", "TE")
BENCH_SLOT = "BENCH"

# Starting lineup requirements (FLEX is filled by RB/WR/TE)
ROSTER_REQUIREMENTS = {
    "QB": 1,
    "RB": 2,
    "WR": 2,
    "TE": 1,
    "FLEX": 1,
    "BENCH": 6,
}

# Recommended minimums including bye week coverage
DEPTH_REQUIREMENTS = {
    "QB": 1,  # QB can be streamed
    "RB": 3,
    "WR": 4,
    "TE": 1,  # TE can be streamed
}

# League settings bounds
MIN_TEAMS = 1
MAX_TEAMS = 14

# Default league settings
DEFAULT_NUMBER_OF_TEAMS = 10
DEFAULT_USER_DRAFT_POSITION = 1
