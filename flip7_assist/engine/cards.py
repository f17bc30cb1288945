"""
Card taxonomy for Flip 7.
Defines card kinds, their categories and face values, the full deck
composition and the sprite names the game client uses for each card.
"""

import re
from enum import Enum
from types import MappingProxyType
from typing import Optional


class CardCategory(Enum):
    NUMBER = "number"      # Busts on duplicate
    MODIFIER = "modifier"  # Flat bonus to score
    ACTION = "action"      # No direct score


class CardKind(Enum):
    """Every card kind in the deck. The value is the canonical key."""
    ZERO = "0card"
    ONE = "1card"
    TWO = "2card"
    THREE = "3card"
    FOUR = "4card"
    FIVE = "5card"
    SIX = "6card"
    SEVEN = "7card"
    EIGHT = "8card"
    NINE = "9card"
    TEN = "10card"
    ELEVEN = "11card"
    TWELVE = "12card"
    PLUS_2 = "Plus2"
    PLUS_4 = "Plus4"
    PLUS_6 = "Plus6"
    PLUS_8 = "Plus8"
    PLUS_10 = "Plus10"
    DOUBLE = "double"
    FLIP_THREE = "flip3"
    SECOND_CHANCE = "Second chance"
    FREEZE = "Freeze"

    @property
    def category(self) -> CardCategory:
        return CARD_CATEGORIES[self]

    @property
    def face_value(self) -> int:
        """Points this card adds to a board. Action cards add nothing."""
        return FACE_VALUES[self]

    @property
    def is_number(self) -> bool:
        return CARD_CATEGORIES[self] is CardCategory.NUMBER

    def __str__(self) -> str:
        return self.value


NUMBER_KINDS = (
    CardKind.ZERO, CardKind.ONE, CardKind.TWO, CardKind.THREE, CardKind.FOUR,
    CardKind.FIVE, CardKind.SIX, CardKind.SEVEN, CardKind.EIGHT, CardKind.NINE,
    CardKind.TEN, CardKind.ELEVEN, CardKind.TWELVE,
)
MODIFIER_KINDS = (
    CardKind.PLUS_2, CardKind.PLUS_4, CardKind.PLUS_6, CardKind.PLUS_8, CardKind.PLUS_10,
)
ACTION_KINDS = (
    CardKind.DOUBLE, CardKind.FLIP_THREE, CardKind.SECOND_CHANCE, CardKind.FREEZE,
)

CARD_CATEGORIES = MappingProxyType({
    **{k: CardCategory.NUMBER for k in NUMBER_KINDS},
    **{k: CardCategory.MODIFIER for k in MODIFIER_KINDS},
    **{k: CardCategory.ACTION for k in ACTION_KINDS},
})

FACE_VALUES = MappingProxyType({
    **{k: i for i, k in enumerate(NUMBER_KINDS)},
    CardKind.PLUS_2: 2,
    CardKind.PLUS_4: 4,
    CardKind.PLUS_6: 6,
    CardKind.PLUS_8: 8,
    CardKind.PLUS_10: 10,
    **{k: 0 for k in ACTION_KINDS},
})

# 94 cards: number n has n copies (0 has one), three of each action
# except the single x2, one of each modifier.
FULL_COMPOSITION = MappingProxyType({
    CardKind.TWELVE: 12, CardKind.ELEVEN: 11, CardKind.TEN: 10, CardKind.NINE: 9,
    CardKind.EIGHT: 8, CardKind.SEVEN: 7, CardKind.SIX: 6, CardKind.FIVE: 5,
    CardKind.FOUR: 4, CardKind.THREE: 3, CardKind.TWO: 2, CardKind.ONE: 1,
    CardKind.ZERO: 1,
    CardKind.DOUBLE: 1, CardKind.FLIP_THREE: 3, CardKind.SECOND_CHANCE: 3, CardKind.FREEZE: 3,
    CardKind.PLUS_2: 1, CardKind.PLUS_4: 1, CardKind.PLUS_6: 1, CardKind.PLUS_8: 1,
    CardKind.PLUS_10: 1,
})

ACTION_SPRITES = MappingProxyType({
    "sprite-sf": CardKind.FREEZE,
    "sprite-sch": CardKind.SECOND_CHANCE,
    "sprite-sf3": CardKind.FLIP_THREE,
    "sprite-sx2": CardKind.DOUBLE,
})

_NUMBER_SPRITE = re.compile(r"^sprite-c(\d+)$")
_BONUS_SPRITE = re.compile(r"^sprite-s(\d+)$")


def full_composition() -> dict[CardKind, int]:
    """Fresh copy of the starting deck."""
    return dict(FULL_COMPOSITION)


def empty_counts() -> dict[CardKind, int]:
    """A zero count for every card kind."""
    return {kind: 0 for kind in CardKind}


def card_kind_from_key(key: str) -> Optional[CardKind]:
    """Look up a kind by its canonical key ("5card", "Plus4", "Freeze")."""
    try:
        return CardKind(key)
    except ValueError:
        return None


def card_kind_from_sprite(sprite: str) -> Optional[CardKind]:
    """
    Map a card sprite class to its kind.

    sprite-c<n> is a number card, sprite-s<n> a modifier, and four fixed
    names cover the action cards. Anything else (including numbers outside
    the deck, like sprite-c13) is unmapped.
    """
    if not sprite:
        return None
    sprite = sprite.strip()

    match = _NUMBER_SPRITE.match(sprite)
    if match:
        return card_kind_from_key(f"{int(match.group(1))}card")

    match = _BONUS_SPRITE.match(sprite)
    if match:
        return card_kind_from_key(f"Plus{int(match.group(1))}")

    return ACTION_SPRITES.get(sprite)


def coerce_kind(kind) -> CardKind:
    """Accept a CardKind or its canonical key. Raises ValueError otherwise."""
    if isinstance(kind, CardKind):
        return kind
    found = card_kind_from_key(kind) if isinstance(kind, str) else None
    if found is None:
        raise ValueError(f"Unknown card kind: {kind!r}")
    return found
