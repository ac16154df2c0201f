"""
Arrata Character Sheet.

Pydantic models for characters, their stats, quirks and inventory.
"""

from arrata.character.models import (
    Character,
    CharacterStat,
    Inspiration,
    Item,
    Quirk,
    QuirkCategory,
)

__all__ = [
    "Character",
    "CharacterStat",
    "Inspiration",
    "Item",
    "Quirk",
    "QuirkCategory",
]
