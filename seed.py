#!/usr/bin/env python3
"""
Seed the spells table with data fetched from the public D&D 5e spell API:
  GET https://www.dnd5eapi.co/api/spells/{index}

This is a thin entrypoint that delegates to the seeding CLI implementation.
"""
from __future__ import annotations

from seeding.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
