#!/usr/bin/env python3
"""Wrapper script to launch the Pool Passport GUI.

Usage:
    python passport_gui.py <pools_json_file> [--state STATE_FILE]

Claim treasure at each pool on the map and collect the stamps.
"""

from pool_passport.gui import main

if __name__ == "__main__":
    main()
