"""
Configuration constants for the gridpath engine.

All tunable parameters are defined here. Values that make sense to change
per environment are read from environment variables (scripts load a
project-root .env file before importing this module).
"""

import os

# =============================================================================
# Grid Configuration
# =============================================================================

# Default grid size used by the scripts
DEFAULT_GRID_WIDTH = 21
DEFAULT_GRID_HEIGHT = 15

# Separator between x and y in a cell key ("3,4")
CELL_KEY_SEPARATOR = ","

# =============================================================================
# Search Configuration
# =============================================================================

# Algorithm used when none is requested
DEFAULT_ALGORITHM = "astar-manhattan"

# =============================================================================
# Maze Configuration
# =============================================================================

# Maximum generation attempts before giving up on an unsolvable layout
MAZE_MAX_ATTEMPTS = int(os.environ.get("GRIDPATH_MAZE_MAX_ATTEMPTS", "100"))

# Algorithm used to verify a generated maze is solvable
MAZE_SOLVER = os.environ.get("GRIDPATH_MAZE_SOLVER", "astar-manhattan")

# =============================================================================
# Script Configuration
# =============================================================================

# Seconds between frames when animating a search in the terminal
ANIMATION_DELAY = float(os.environ.get("GRIDPATH_ANIMATION_DELAY", "0.05"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
