"""
Pytest configuration for test discovery and imports.

The planner modules live flat under src/ and import each other by module
name, so src/ is put on sys.path for the tests.
"""

import os
import sys

ROOT_DIR = os.path.dirname(__file__)
SRC_DIR = os.path.join(ROOT_DIR, "src")

if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)
