from pathlib import Path

# === Base project path ===
PROJECT_ROOT = Path(__file__).resolve().parents[1]

# === Common directories ===
CONFIG_DIR = PROJECT_ROOT / "config"
LOG_DIR = PROJECT_ROOT / "logs"

# === Config files ===
CONSTANTS_PATH = CONFIG_DIR / "constants.json"

# === Default log file path ===
LOG_PATH = LOG_DIR / "timetable_run.log"
