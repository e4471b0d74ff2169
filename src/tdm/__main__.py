#!/usr/bin/env python3
"""
tdm - Package Entrypoint

This allows the package to be executed directly:
    python3 -m tdm
"""

import sys

from tdm.main import main

if __name__ == "__main__":
    sys.exit(main())
