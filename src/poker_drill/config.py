"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# Database
DB_PATH = Path(os.getenv("POKER_DRILL_DB_PATH", "poker_drill.db"))

# Drill service
CACHE_CAPACITY = int(os.getenv("POKER_DRILL_CACHE_CAPACITY", "1000"))
HERO_PLAYER_ID = int(os.getenv("POKER_DRILL_HERO_PLAYER_ID", "1"))

# Training defaults
DEFAULT_DIFFICULTY = os.getenv("POKER_DRILL_DIFFICULTY", "Beginner")
DEFAULT_TEXT_STYLE = os.getenv("POKER_DRILL_TEXT_STYLE", "Simple")
DEFAULT_DRILL_COUNT = int(os.getenv("POKER_DRILL_COUNT", "10"))

# Logging
LOG_LEVEL = os.getenv("POKER_DRILL_LOG_LEVEL", "WARNING")
