#!/usr/bin/env python3
"""
Entry point script for the CLI executable.
Used by PyInstaller to build a standalone version.
"""

import sys
from floppy_serial_install.__main__ import main

if __name__ == '__main__':
    sys.exit(main())
