"""
Arrata - Dice Rolling

Arrata-style rolls: a stat's quantity of d6s, each die at or above the
stat's quality threshold counting as a success.

Advantage: any 6 is scored and then rolled again, chaining for as long as
sixes keep coming. Each level past the first adds one die to the pool, so
``!3B4`` rolls six dice.

Disadvantage: any 1 costs a success on top of counting as a failure. Each
level past the first removes one die from the pool; if that would leave
fewer than zero dice, nothing is rolled at all.

Both can apply to the same roll. Examples (faces in draw order):

    B4:      (1, 2, 3, 4)                         -> 1 Success
    ?2A8:    (1, 1, 4, 4, 4, 6, 6)                -> 3 Successes
    !1?1S10: (1, 2, 2, 2, 3, 3, 4, 4, 5, 6, 6, 5) -> 10 Successes

The random source is passed in so a roll is a plain function of its inputs.
There is no cap on exploding dice unless the caller asks for one.
"""

import logging
import random
import secrets
from typing import Iterable, Protocol

from arrata.engine.base import MAX_FACE, MIN_FACE, RollResult, Stat
from arrata.engine.errors import DiceLimitError

logger = logging.getLogger(__name__)


class DieSource(Protocol):
    """Anything that can produce one d6 face at a time."""

    def next_face(self) -> int:
        ...


class SystemDieSource:
    """Faces drawn from OS entropy. Holds no state, safe to share."""

    def next_face(self) -> int:
        return secrets.randbelow(MAX_FACE) + MIN_FACE


class RandomDieSource:
    """
    Faces drawn from a private ``random.Random``.

    Seed it for reproducible rolls. Not safe to share between threads;
    give each thread its own instance.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def next_face(self) -> int:
        return self._random.randint(MIN_FACE, MAX_FACE)


class FixedDieSource:
    """
    Replays a fixed sequence of faces.

    Used for scripted rolls and tests. Raises ValueError once the sequence
    runs out, since a roll that needs more dice than were scripted is a
    mistake in the script.
    """

    def __init__(self, faces: Iterable[int]) -> None:
        self._faces = tuple(faces)
        self._index = 0

    @property
    def remaining(self) -> int:
        return len(self._faces) - self._index

    def next_face(self) -> int:
        if self._index >= len(self._faces):
            raise ValueError(
                f"Fixed die sequence exhausted after {len(self._faces)} faces."
            )
        face = self._faces[self._index]
        self._index += 1
        return face


def pool_size(stat: Stat, advantage: int = 0, disadvantage: int = 0) -> int | None:
    """
    Number of dice a roll starts with, before any explode.

    Returns:
        The starting pool, or None if disadvantage removes more dice than
        the pool holds
    """
    quantity = stat.quantity + max(0, advantage - 1)
    if disadvantage > 0:
        reduction = disadvantage - 1
        if reduction > quantity:
            return None
        quantity -= reduction
    return quantity


def roll_stat(
    stat: Stat,
    advantage: int = 0,
    disadvantage: int = 0,
    rng: DieSource | None = None,
    *,
    max_dice: int | None = None,
) -> RollResult:
    """
    Roll a stat with advantage and disadvantage.

    Args:
        stat: The stat to roll
        advantage: Level of advantage (0 = none)
        disadvantage: Level of disadvantage (0 = none)
        rng: Source of die faces. Defaults to a fresh SystemDieSource.
        max_dice: Optional cap on total dice drawn, explosions included

    Returns:
        RollResult with successes, failures and every face drawn

    Raises:
        ValueError: If a level is negative or the source yields a face
                    outside 1-6
        DiceLimitError: If max_dice is set and the roll needs more dice
    """
    if advantage < 0:
        raise ValueError(f"Advantage cannot be negative, got {advantage}.")
    if disadvantage < 0:
        raise ValueError(f"Disadvantage cannot be negative, got {disadvantage}.")

    quantity = pool_size(stat, advantage, disadvantage)
    if quantity is None:
        logger.debug(
            "Disadvantage %d leaves no dice for %s, nothing rolled",
            disadvantage, stat,
        )
        return RollResult.empty()

    if rng is None:
        rng = SystemDieSource()

    threshold = stat.quality.threshold
    successes = 0
    failures = 0
    results: list[int] = []

    while quantity > 0:
        if max_dice is not None and len(results) >= max_dice:
            raise DiceLimitError(max_dice)

        face = rng.next_face()
        if not (MIN_FACE <= face <= MAX_FACE):
            raise ValueError(
                f"Invalid die value {face}. Must be between {MIN_FACE} and {MAX_FACE}."
            )

        if advantage > 0 and face == MAX_FACE:
            quantity += 1
        if disadvantage > 0 and face == MIN_FACE:
            successes -= 1

        if face >= threshold:
            successes += 1
        else:
            failures += 1
        results.append(face)
        quantity -= 1

    return RollResult(
        successes=successes,
        failures=failures,
        results=tuple(results),
    )
