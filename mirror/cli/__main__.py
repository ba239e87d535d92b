"""
Main entry point for the Mirror CLI when run as a module.

This allows the CLI to be executed using:
    python -m mirror.cli
"""

import sys

from . import main

if __name__ == '__main__':
    sys.exit(main())
