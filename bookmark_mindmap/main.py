#!/usr/bin/env python3
"""
Main entry point for the Bookmark Mind-Map Organizer.
"""

import sys
from bookmark_mindmap.cli import main


if __name__ == "__main__":
    sys.exit(main())
