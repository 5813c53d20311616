import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
TIES_DIR = PROJECT_ROOT / "ties"
DEFAULT_TIE_FILE = TIES_DIR / "final_second_leg.json"

SCHEMA_VERSION = 1

TEAM_A = "team_a"
TEAM_B = "team_b"
SIDES = (TEAM_A, TEAM_B)

# doubles mixed / women / men, then singles
MATCH_SLOTS = ("DX", "DF", "DM", "IF2", "IM2", "IF1", "IM1")

MAX_SETS = 5
SETS_TO_WIN = 3
POINTS_TO_WIN_SET = 11
MAX_SCORE = 30

DEFAULT_TEAM_NAMES = {
    TEAM_A: "Puertas Padilla Cartagena",
    TEAM_B: "Recreativo IES La Orden",
}

DEFAULT_TEAM_CODES = {
    TEAM_A: "PPC",
    TEAM_B: "IES",
}

# first leg result
DEFAULT_BASELINE = {
    TEAM_A: {"encounters": 0, "matches": 3, "sets": 10, "points": 200},
    TEAM_B: {"encounters": 1, "matches": 4, "sets": 14, "points": 225},
}

LOG_LEVEL = os.getenv("STANDINGS_LOG_LEVEL", "WARNING").upper()
