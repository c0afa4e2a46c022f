#!/usr/bin/env python3
"""
Entry point for running as module: python -m bbstatus
"""

import sys

from bbstatus.app import main


if __name__ == "__main__":
    sys.exit(main())
