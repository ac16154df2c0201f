"""
Arrata - Engine

Stateless entry point for table play: roll a stat, roll from notation,
test a roll against an obstacle and mark checks.

All methods are class methods operating on immutable data.
"""

import logging

from arrata.config.settings import get_settings
from arrata.engine.base import CheckResult, Obstacle, RollResult, Stat
from arrata.engine.dice import DieSource, roll_stat
from arrata.engine.notation import parse_obstacle, parse_roll

logger = logging.getLogger(__name__)


class ArrataEngine:
    """
    Stateless engine for Arrata dice rolls.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    @classmethod
    def roll(
        cls,
        stat: Stat,
        advantage: int = 0,
        disadvantage: int = 0,
        rng: DieSource | None = None,
    ) -> RollResult:
        """Roll a stat, honouring the configured dice cap.

        Args:
            stat: The stat to roll
            advantage: Level of advantage
            disadvantage: Level of disadvantage
            rng: Optional die source (for testing or seeded play)

        Returns:
            RollResult of the roll
        """
        result = roll_stat(
            stat,
            advantage,
            disadvantage,
            rng,
            max_dice=get_settings().max_dice_per_roll,
        )
        logger.debug(
            "Rolled %s%s (adv=%d, dis=%d): %s",
            stat, f" [{stat.name}]" if stat.name else "",
            advantage, disadvantage, result,
        )
        return result

    @classmethod
    def roll_notation(cls, text: str, rng: DieSource | None = None) -> RollResult:
        """Roll an expression such as ``!3B4``.

        Raises:
            NotationError: If the expression has no stat
        """
        spec = parse_roll(text)
        return cls.roll(spec.stat, spec.advantage, spec.disadvantage, rng)

    @classmethod
    def check(
        cls,
        stat: Stat,
        obstacle: Obstacle | str,
        advantage: int = 0,
        disadvantage: int = 0,
        rng: DieSource | None = None,
    ) -> CheckResult:
        """Roll a stat against an obstacle.

        Args:
            stat: The stat to roll
            obstacle: Obstacle, or its notation (``Ob3``)
            advantage: Level of advantage
            disadvantage: Level of disadvantage
            rng: Optional die source

        Returns:
            CheckResult with the roll and whether it met the obstacle
        """
        if isinstance(obstacle, str):
            obstacle = parse_obstacle(obstacle)

        result = CheckResult(
            roll=cls.roll(stat, advantage, disadvantage, rng),
            obstacle=obstacle,
        )
        logger.debug(
            "Check %s vs %s: %s (margin %+d)",
            stat, obstacle, "passed" if result.passed else "failed", result.margin,
        )
        return result

    @classmethod
    def mark_check(cls, stat: Stat) -> Stat:
        """Return the stat with one more check marked."""
        return stat.with_check()
