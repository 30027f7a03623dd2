#!/usr/bin/env python3
"""Seed the content store with the tour catalogue."""

import sys
from pathlib import Path

# Add the server directory to the Python path
server_dir = Path(__file__).parent.parent / "server"
sys.path.insert(0, str(server_dir))

from traverse_content.seed.__main__ import run  # noqa: E402

if __name__ == "__main__":
    run()
