"""
Card Effects - Closed set of typed effect variants.

Card content is authored with short string tags ("strength_2",
"vulnerable_2", ...). Tags are parsed once, when a card template is
built, into one of the variants below. The reducer dispatches on the
variant type, so an unrecognized tag becomes an explicit UnknownEffect
instead of a string that silently fails to match.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union


class EffectTarget(Enum):
    """Who an effect lands on."""
    PLAYER = "player"
    ENEMY = "enemy"


@dataclass(frozen=True)
class ApplyStatus:
    """
    Add a stacking status effect to a combatant.

    Reapplying onto an existing status of the same name adds the
    magnitude and resets the duration to this effect's duration.
    """
    tag: str
    status: str
    magnitude: int
    target: EffectTarget
    duration: int | None = None


@dataclass(frozen=True)
class DrawCards:
    """Draw cards from the deck into the hand."""
    tag: str
    count: int


@dataclass(frozen=True)
class UnknownEffect:
    """A tag with no registered meaning. Resolves to nothing."""
    tag: str


CardEffect = Union[ApplyStatus, DrawCards, UnknownEffect]


KNOWN_EFFECTS: dict[str, CardEffect] = {
    "strength_2": ApplyStatus(
        tag="strength_2",
        status="Strength",
        magnitude=2,
        target=EffectTarget.PLAYER,
        duration=1,
    ),
    "strength_permanent_2": ApplyStatus(
        tag="strength_permanent_2",
        status="Strength",
        magnitude=2,
        target=EffectTarget.PLAYER,
        duration=None,
    ),
    "vulnerable_2": ApplyStatus(
        tag="vulnerable_2",
        status="Vulnerable",
        magnitude=2,
        target=EffectTarget.ENEMY,
        duration=3,
    ),
    "draw_1": DrawCards(tag="draw_1", count=1),
}


def parse_effect(tag: str) -> CardEffect:
    """Parse a content tag into its effect variant."""
    return KNOWN_EFFECTS.get(tag, UnknownEffect(tag=tag))


def parse_effects(*tags: str) -> tuple[CardEffect, ...]:
    """Parse several tags, keeping their order."""
    return tuple(parse_effect(tag) for tag in tags)
