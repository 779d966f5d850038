"""Shared SQLModel models package.

Place SQLModel ORM and validation models here to be reused across services.
"""

from .spell import Spell

__all__ = [
    "Spell",
]
