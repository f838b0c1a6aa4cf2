"""
Single place to:
- Hold the fixed game constants (code length, guess cap, palette)
- Read runtime settings from env (secret source, timeouts, log level)

Game constants are NOT configurable; only the environment around the game is.
"""

import os

from dotenv import load_dotenv

# Load env vars from .env if present
load_dotenv()

# Fixed rules
CODE_LENGTH = 4     # symbols per row
MAX_GUESSES = 10    # rows on the board
PALETTE_SIZE = 6    # colors 1..6
EMPTY = 0           # unset cell in a pending row

# Runtime settings
# "local" -> secrets.randbelow, "random.org" -> HTTP with local fallback
CODE_SOURCE = os.getenv("CODE_SOURCE", "local")
RANDOM_TIMEOUT = float(os.getenv("RANDOM_TIMEOUT", "3.0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
