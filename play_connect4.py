#!/usr/bin/env python3
"""
Play Connect Four against the alpha-beta engine.
You pick X (moves first) or O; the computer takes the other marker.
"""
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / 'src'))

from connect4_engine.play import main

if __name__ == "__main__":
    sys.exit(main())
