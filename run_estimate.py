#!/usr/bin/env python3
"""Entry point to run the salary estimator from a checkout."""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from salary_engine.cli import app

if __name__ == "__main__":
    app()
