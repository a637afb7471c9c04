"""Paths, lanes and default values used across the project."""

from pathlib import Path

# Base directory for all taskboard data
TASKBOARD_HOME = Path.home() / ".taskboard"

CONFIG_DIR = TASKBOARD_HOME
CONFIG_FILE = CONFIG_DIR / "config.json"
LOGS_DIR = TASKBOARD_HOME / "logs"
LOG_FILE = LOGS_DIR / "taskboard.log"

# Lanes, in the order they are displayed left to right
LANE_ORDER: tuple[str, ...] = ("done", "pending", "not_done")
LANE_TITLES: dict[str, str] = {
    "done": "Done",
    "pending": "Pending",
    "not_done": "Not Done",
}
DEFAULT_LANE = "pending"

# Card transitions (seconds)
ENTRY_TRANSITION_SECONDS = 0.3
EXIT_TRANSITION_SECONDS = 0.3

# Lane body colours: (light, dark)
LANE_COLORS: dict[str, tuple[str, str]] = {
    "done": ("green", "#4CAF50"),
    "pending": ("#FFA500", "#FFC107"),
    "not_done": ("red", "#F44336"),
}

# Cards the board starts with when demo seeding is on.
# Format: (id, title, description, lane)
DEMO_ITEMS: list[tuple[str, str, str, str]] = [
    ("card-1", "Task 1", "Description of task 1.", "done"),
    ("card-2", "Task 2", "Description of task 2.", "pending"),
    ("card-3", "Task 3", "Description of task 3.", "pending"),
    ("card-4", "Task 4", "Another finished task.", "done"),
    ("card-5", "Task 5", "Task still to do.", "not_done"),
]
