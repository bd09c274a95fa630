import json
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Day boundaries (minutes since midnight)
DAY_START = _constants["DAY_START"]
DAY_END = _constants["DAY_END"]

# Candidate search grid
STEP = _constants["STEP"]
MAX_SHIFT = _constants["MAX_SHIFT"]

# Search caps
MAX_CANDIDATES = _constants["MAX_CANDIDATES"]
SEARCH_TIMEOUT_SECONDS = _constants["SEARCH_TIMEOUT_SECONDS"]

# Scoring
CHANGE_PENALTY = _constants["CHANGE_PENALTY"]

# Undo/redo cap per stack; None keeps every snapshot
HISTORY_LIMIT = _constants["HISTORY_LIMIT"]
