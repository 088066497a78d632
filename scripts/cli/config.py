"""CLI configuration: config file, log location and level."""

import os
from pathlib import Path

# Project root (parent of scripts/)
ROOT = Path(__file__).resolve().parent.parent.parent

# Set RENTAL_CLI_CONFIG=/path/to/rates.yaml to override the default rates.
CONFIG_PATH = os.environ.get("RENTAL_CLI_CONFIG") or None

# Overrides the level from the config file when set (e.g. DEBUG).
LOG_LEVEL = os.environ.get("RENTAL_CLI_LOG_LEVEL") or None

LOG_DIR = ROOT / "logs"
LOG_FILE = LOG_DIR / "interactive.log"
