"""
Interactive Rental CLI -- console front end for the rental kernel.

Maps keyboard input to kernel commands and renders results and typed
errors. All input validation loops live here; the kernel only ever sees
parsed, typed values.

Entry point: scripts/interactive.py or python -m scripts.cli
"""

from scripts.cli.main import main

__all__ = ["main"]
