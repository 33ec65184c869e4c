#!/usr/bin/env python3
"""
Entry point for lvmkit CLI tool.
"""

import sys

from lvmkit.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
