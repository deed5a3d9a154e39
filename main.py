"""CLI entrypoint for the interactive vehicle risk assessor."""

from __future__ import annotations

import sys

from vehicle_risk.cli import main

if __name__ == "__main__":
    sys.exit(main() or 0)
