"""
Arrata - Engine Base Classes

Value types shared by the notation codecs and the roll engine. Everything
here is a frozen dataclass or an enum so values can be handed between
threads without copying.
"""

from dataclasses import dataclass, replace
from enum import Enum
from functools import total_ordering

MIN_FACE = 1
MAX_FACE = 6


@total_ordering
class Quality(Enum):
    """Success threshold tier of a dice pool.

    Values are the one-letter notation codes. Tiers compare by capability,
    so ``Quality.SUPERB > Quality.ADEPT > Quality.BASIC`` even though the
    face threshold goes down as the tier goes up.
    """
    BASIC = "B"
    ADEPT = "A"
    SUPERB = "S"

    @property
    def threshold(self) -> int:
        """Lowest face value (1-6) that counts as a success."""
        return _THRESHOLDS[self]

    @property
    def code(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Quality):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        return self.name.capitalize()


_THRESHOLDS: dict[Quality, int] = {
    Quality.BASIC: 4,
    Quality.ADEPT: 3,
    Quality.SUPERB: 2,
}

_RANKS: dict[Quality, int] = {
    Quality.BASIC: 1,
    Quality.ADEPT: 2,
    Quality.SUPERB: 3,
}


@dataclass(frozen=True)
class Stat:
    """
    A pool of d6s rolled against a quality threshold.

    Attributes:
        name: Display name ("Will", "Swordplay", ...). Empty for parsed stats.
        quality: Success threshold tier
        quantity: Number of dice in the pool (0 is allowed and rolls nothing)
        checks: Usage counter tracked over a campaign, None for stats that
                don't take checks
    """
    name: str = ""
    quality: Quality = Quality.BASIC
    quantity: int = 1
    checks: int | None = 0

    def __post_init__(self) -> None:
        """Validate counts are non-negative."""
        if self.quantity < 0:
            raise ValueError(f"Stat quantity cannot be negative, got {self.quantity}.")
        if self.checks is not None and self.checks < 0:
            raise ValueError(f"Stat checks cannot be negative, got {self.checks}.")

    @property
    def threshold(self) -> int:
        return self.quality.threshold

    def with_check(self) -> "Stat":
        """Return a copy with one more check marked.

        Stats without a checks counter are returned unchanged.
        """
        if self.checks is None:
            return self
        return replace(self, checks=self.checks + 1)

    def __str__(self) -> str:
        return f"{self.quality.code}{self.quantity}"


@dataclass(frozen=True)
class Obstacle:
    """
    Minimum number of successes a roll must meet or exceed.

    Attributes:
        value: Required success count
    """
    value: int = 1

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Obstacle cannot be negative, got {self.value}.")

    def is_met_by(self, successes: int) -> bool:
        return successes >= self.value

    def __str__(self) -> str:
        return f"Ob{self.value}"


@dataclass(frozen=True)
class RollResult:
    """
    Outcome of rolling a stat.

    Attributes:
        successes: Dice at or above the threshold, minus disadvantage
                   penalties. Can be negative.
        failures: Dice below the threshold
        results: Every face drawn, in draw order. Exploding dice mean this
                 can be longer than the stat's quantity.
    """
    successes: int = 0
    failures: int = 0
    results: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        """Validate die faces are within 1-6."""
        if self.failures < 0:
            raise ValueError(f"Failures cannot be negative, got {self.failures}.")
        for value in self.results:
            if not (MIN_FACE <= value <= MAX_FACE):
                raise ValueError(
                    f"Invalid die value {value}. "
                    f"Must be between {MIN_FACE} and {MAX_FACE}."
                )

    @classmethod
    def empty(cls) -> "RollResult":
        """A roll where no dice were drawn."""
        return cls(successes=0, failures=0, results=())

    @property
    def dice_rolled(self) -> int:
        return len(self.results)

    def __str__(self) -> str:
        faces = ", ".join(str(v) for v in self.results)
        return f"({faces}) -> {self.successes} Successes"


@dataclass(frozen=True)
class CheckResult:
    """
    A roll measured against an obstacle.

    Attributes:
        roll: The underlying roll
        obstacle: The obstacle that had to be met
    """
    roll: RollResult
    obstacle: Obstacle

    @property
    def passed(self) -> bool:
        return self.obstacle.is_met_by(self.roll.successes)

    @property
    def margin(self) -> int:
        """Successes over (positive) or under (negative) the obstacle."""
        return self.roll.successes - self.obstacle.value

    def __str__(self) -> str:
        verdict = "Pass" if self.passed else "Fail"
        return f"{self.roll} vs {self.obstacle}: {verdict}"


@dataclass(frozen=True)
class RollSpec:
    """
    A parsed roll expression such as ``!1?1S10``.

    Attributes:
        stat: The stat to roll
        advantage: Advantage level (0 = none)
        disadvantage: Disadvantage level (0 = none)
    """
    stat: Stat
    advantage: int = 0
    disadvantage: int = 0

    def __post_init__(self) -> None:
        if self.advantage < 0:
            raise ValueError(f"Advantage cannot be negative, got {self.advantage}.")
        if self.disadvantage < 0:
            raise ValueError(f"Disadvantage cannot be negative, got {self.disadvantage}.")
