#!/usr/bin/env python3
"""
Composite demo showing that leaves and branches share one interface.

This example demonstrates:
- Describing a single leaf and a nested tree the same way
- Attaching a node without checking concrete classes
- Printing an outline of the final tree
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from compositetree.client import run_demo


if __name__ == "__main__":
    run_demo(outline=True)
