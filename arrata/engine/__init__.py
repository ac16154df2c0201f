"""
Arrata Dice Engine.

Pure Python rules logic with no UI or storage dependencies.
Handles stat and obstacle notation, exploding advantage and
penalising disadvantage.
"""

from arrata.engine.arrata import ArrataEngine
from arrata.engine.base import (
    CheckResult,
    Obstacle,
    Quality,
    RollResult,
    RollSpec,
    Stat,
)
from arrata.engine.dice import (
    DieSource,
    FixedDieSource,
    RandomDieSource,
    SystemDieSource,
    roll_stat,
)
from arrata.engine.errors import DiceLimitError, NotationError, ParseErrorKind
from arrata.engine.notation import (
    format_obstacle,
    format_roll,
    format_stat,
    parse_obstacle,
    parse_roll,
    parse_stat,
)

__all__ = [
    # Data Classes
    "CheckResult",
    "Obstacle",
    "RollResult",
    "RollSpec",
    "Stat",
    # Enums
    "Quality",
    "ParseErrorKind",
    # Errors
    "DiceLimitError",
    "NotationError",
    # Dice
    "DieSource",
    "FixedDieSource",
    "RandomDieSource",
    "SystemDieSource",
    "roll_stat",
    # Notation
    "format_obstacle",
    "format_roll",
    "format_stat",
    "parse_obstacle",
    "parse_roll",
    "parse_stat",
    # Engines
    "ArrataEngine",
]
