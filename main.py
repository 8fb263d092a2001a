"""Main entry point for barstat."""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from barstat.cli import main


if __name__ == "__main__":
    sys.exit(main())
