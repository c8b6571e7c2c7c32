"""Configuration read from environment variables."""

import os
from pathlib import Path

# Logging settings
LOG_LEVEL = os.getenv("RAYCASTER_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("RAYCASTER_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
LOG_FILE = Path(os.environ["RAYCASTER_LOG_FILE"]) if os.getenv("RAYCASTER_LOG_FILE") else None

# Output
OUTPUT_PATH = Path(os.getenv("RAYCASTER_OUTPUT", "output.png"))

# Camera defaults for scene descriptions that omit them
WIDTH = int(os.getenv("RAYCASTER_WIDTH", "1250"))
HEIGHT = int(os.getenv("RAYCASTER_HEIGHT", "1000"))
FOV = float(os.getenv("RAYCASTER_FOV", "90.0"))
BIAS = float(os.getenv("RAYCASTER_BIAS", "0.1"))
MAX_DEPTH = int(os.getenv("RAYCASTER_MAX_DEPTH", "10"))
FOV_SCALING = os.getenv("RAYCASTER_FOV_SCALING", "false").lower() == "true"
