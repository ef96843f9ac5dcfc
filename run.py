#!/usr/bin/env python3
"""
Retail Ledger Entry Point

Starts the interactive text menu over an in-memory ledger.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from retail_ledger.console import main


if __name__ == "__main__":
    main()
