"""
Arrata - Character Models

Pydantic models for the character sheet. These are plain data with
defaults; the dice engine only ever sees the Stats they hand over.
"""

from enum import Enum

from pydantic import BaseModel, Field

from arrata.engine.base import Quality, Stat

DEFAULT_STAT_NAMES = ("Will", "Perception", "Conscious", "Power", "Speed", "Forte")


class CharacterStat(BaseModel):
    """A named stat or skill on the sheet."""

    name: str
    quality: Quality = Quality.BASIC
    quantity: int = Field(default=1, ge=0)
    checks: int | None = Field(default=0, ge=0)

    def to_stat(self) -> Stat:
        return Stat(
            name=self.name,
            quality=self.quality,
            quantity=self.quantity,
            checks=self.checks,
        )

    @classmethod
    def from_stat(cls, stat: Stat) -> "CharacterStat":
        return cls(
            name=stat.name,
            quality=stat.quality,
            quantity=stat.quantity,
            checks=stat.checks,
        )


class QuirkCategory(str, Enum):
    ETHOS = "Ethos"
    PATHOS = "Pathos"
    LOGOS = "Logos"
    UNCATEGORIZED = "Uncategorized"


class Quirk(BaseModel):
    """A character quirk. Boons and flaws may be empty for cosmetic quirks."""

    name: str = "New Quirk!"
    category: QuirkCategory = QuirkCategory.ETHOS
    description: str = ""
    boons: list[str] = Field(default_factory=list)
    flaws: list[str] = Field(default_factory=list)


class Item(BaseModel):
    name: str = "New Item!"
    quantity: int = Field(default=0, ge=0)
    description: str = ""


class Inspiration(BaseModel):
    """Inspiration points, one pool per quirk category."""

    ethos: int = Field(default=0, ge=0)
    pathos: int = Field(default=0, ge=0)
    logos: int = Field(default=0, ge=0)


def _default_stats() -> list[CharacterStat]:
    return [CharacterStat(name=name) for name in DEFAULT_STAT_NAMES]


class Character(BaseModel):
    """A full character sheet."""

    name: str = "John Arrata"
    stock: str = "Human"
    stats: list[CharacterStat] = Field(default_factory=_default_stats)
    skills: list[CharacterStat] = Field(default_factory=list)
    quirks: list[Quirk] = Field(default_factory=list)
    argos: str = ""
    inventory: list[Item] = Field(default_factory=list)
    inspiration: Inspiration = Field(default_factory=Inspiration)

    def get_stat(self, name: str) -> Stat | None:
        """Look up a stat or skill by name, ignoring case."""
        wanted = name.casefold()
        for entry in (*self.stats, *self.skills):
            if entry.name.casefold() == wanted:
                return entry.to_stat()
        return None
