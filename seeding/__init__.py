"""Seed the spells table from the public spell API."""
