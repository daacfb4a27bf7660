#!/usr/bin/env python3
"""Entry point for the Pool Passport command line."""
from pool_passport.main import main
if __name__ == "__main__":
    raise SystemExit(main())
