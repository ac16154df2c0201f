"""
Arrata - Notation Codecs

Reads and writes the short notations used at the table:

- Stats: ``{quality}{quantity}``, e.g. ``B4`` or ``S10``. The quality code is
  ``B``/``A``/``S`` (case-insensitive); anything else reads as Basic.
- Obstacles: ``Ob{value}``, e.g. ``Ob3``.
- Rolls: a stat prefixed by advantage (``!``) and/or disadvantage (``?``)
  levels, e.g. ``!3B4``, ``?2A3`` or ``!1?1S10``. A bare ``!`` or ``?`` is
  level 1.

Stat and obstacle parsing is lenient: the notation is typed by people, so a
quantity that isn't a number falls back to 1 instead of failing. Only input
too short to hold a required prefix is reported as an error.

Stat notation carries quality and quantity only. ``format_stat`` drops the
stat's name and checks, and ``parse_stat`` always returns an unnamed stat
with zero checks, so a round trip keeps the pool but not the bookkeeping.
"""

import logging
import re

from arrata.engine.base import Obstacle, Quality, RollSpec, Stat
from arrata.engine.errors import NotationError, ParseErrorKind

logger = logging.getLogger(__name__)

_QUALITY_CODES: dict[str, Quality] = {
    "a": Quality.ADEPT,
    "s": Quality.SUPERB,
}

_OBSTACLE_PREFIX_LEN = 2

# Largest count the notation accepts, the range of an unsigned 64-bit int.
_MAX_COUNT = 2**64 - 1
_MAX_COUNT_DIGITS = len(str(_MAX_COUNT))

# !<n> and ?<n> in either order, each at most once, then the stat.
_ROLL_RE = re.compile(
    r"^(?:!(?P<adv_first>[0-9]*))?"
    r"(?:\?(?P<dis>[0-9]*))?"
    r"(?:!(?P<adv_last>[0-9]*))?"
    r"(?P<stat>.*)$",
    re.DOTALL,
)


def _to_count(digits: str) -> int | None:
    """Convert ASCII digits to an int, or None if out of range."""
    significant = digits.lstrip("0") or "0"
    if len(significant) > _MAX_COUNT_DIGITS:
        return None
    value = int(significant)
    if value > _MAX_COUNT:
        return None
    return value


def _parse_quantity(text: str, source: str) -> int:
    """Parse an unsigned integer, falling back to 1."""
    digits = text[1:] if text.startswith("+") else text
    if digits.isascii() and digits.isdigit():
        value = _to_count(digits)
        if value is not None:
            return value
    logger.debug(
        "%s: quantity %r in %r is not a number, defaulting to 1",
        ParseErrorKind.MALFORMED_QUANTITY.name, text[:40], source[:40],
    )
    return 1


def _parse_level(text: str | None, source: str) -> int:
    if text is None:
        return 0
    if text == "":
        return 1
    value = _to_count(text)
    if value is None:
        raise NotationError(
            ParseErrorKind.INVALID_FORMAT,
            source,
            f"Roll level {text[:40]!r} is out of range.",
        )
    return value


def parse_quality(code: str) -> Quality:
    """Read a one-letter quality code. Unknown codes are Basic."""
    return _QUALITY_CODES.get(code.lower(), Quality.BASIC)


def parse_stat(text: str) -> Stat:
    """
    Parse stat notation such as ``A3``.

    Never fails: unknown quality codes read as Basic and a missing or
    malformed quantity reads as 1.

    Args:
        text: Stat notation

    Returns:
        An unnamed Stat with zero checks
    """
    if not text:
        logger.debug("Empty stat notation, defaulting to B1")
        return Stat(quality=Quality.BASIC, quantity=1, checks=0)

    quality = parse_quality(text[0])
    quantity = _parse_quantity(text[1:], text)
    return Stat(quality=quality, quantity=quantity, checks=0)


def format_stat(stat: Stat) -> str:
    """Write a stat's quality and quantity. Name and checks are not kept."""
    return f"{stat.quality.code}{stat.quantity}"


def parse_obstacle(text: str) -> Obstacle:
    """
    Parse obstacle notation such as ``Ob3``.

    The first two characters are taken to be the ``Ob`` tag and are not
    inspected. A malformed value reads as 1.

    Args:
        text: Obstacle notation

    Returns:
        The parsed Obstacle

    Raises:
        NotationError: If the text is too short to hold the tag
    """
    if len(text) < _OBSTACLE_PREFIX_LEN:
        raise NotationError(
            ParseErrorKind.INVALID_FORMAT,
            text,
            f"Obstacle notation must start with 'Ob', got {text!r}.",
        )
    return Obstacle(_parse_quantity(text[_OBSTACLE_PREFIX_LEN:], text))


def format_obstacle(obstacle: Obstacle) -> str:
    return f"Ob{obstacle.value}"


def parse_roll(text: str) -> RollSpec:
    """
    Parse a roll expression such as ``!1?1S10``.

    Args:
        text: Roll notation, optionally surrounded by whitespace

    Returns:
        RollSpec holding the stat and both levels

    Raises:
        NotationError: If the expression has no stat after its prefixes,
                       repeats a marker or gives an out-of-range level
    """
    stripped = text.strip()
    match = _ROLL_RE.match(stripped)
    adv_first = match.group("adv_first")
    adv_last = match.group("adv_last")
    if adv_first is not None and adv_last is not None:
        raise NotationError(
            ParseErrorKind.INVALID_FORMAT,
            text,
            f"Advantage given twice in roll {text!r}.",
        )

    stat_text = match.group("stat")
    if stat_text[:1] in ("!", "?"):
        marker = "Advantage" if stat_text[0] == "!" else "Disadvantage"
        raise NotationError(
            ParseErrorKind.INVALID_FORMAT,
            text,
            f"{marker} given twice in roll {text!r}.",
        )
    if not stat_text:
        raise NotationError(
            ParseErrorKind.INVALID_FORMAT,
            text,
            f"Roll {text!r} has no stat to roll.",
        )

    advantage = _parse_level(
        adv_first if adv_first is not None else adv_last, text
    )
    disadvantage = _parse_level(match.group("dis"), text)
    return RollSpec(
        stat=parse_stat(stat_text),
        advantage=advantage,
        disadvantage=disadvantage,
    )


def format_roll(spec: RollSpec) -> str:
    """Write a roll expression. Zero levels are left out."""
    parts = []
    if spec.advantage:
        parts.append(f"!{spec.advantage}")
    if spec.disadvantage:
        parts.append(f"?{spec.disadvantage}")
    parts.append(format_stat(spec.stat))
    return "".join(parts)
