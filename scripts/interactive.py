#!/usr/bin/env python3
"""
Interactive Vehicle Rental CLI.

Sign up, log in, add vehicles, book them and return them for a charge.
Nothing is persisted; the fleet lives for the lifetime of the process.

Usage:
    python3 scripts/interactive.py
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from scripts.cli.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
