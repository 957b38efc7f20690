"""
Main entry point when running the kiwi_drive module with python -m.
"""

import sys

from .cli import main

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
