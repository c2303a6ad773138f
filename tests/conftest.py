"""
Pytest configuration for vending machine tests.

This conftest.py adds the project root to sys.path
so that tests can import modules properly.
"""

import sys
from pathlib import Path


# Add the project root to sys.path for proper imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
