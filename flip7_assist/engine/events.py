"""
Event classification for Flip 7 game logs.
Turns one raw log observation into at most one structured event.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .cards import CardKind, card_kind_from_sprite


@dataclass(frozen=True)
class NewRoundStarted:
    pass


@dataclass(frozen=True)
class ReshuffleOccurred:
    pass


@dataclass(frozen=True)
class PlayerBusted:
    name: str


@dataclass(frozen=True)
class PlayerStayed:
    name: str


@dataclass(frozen=True)
class PlayerFrozen:
    name: str


@dataclass(frozen=True)
class SecondChanceDiscarded:
    pass


@dataclass(frozen=True)
class CardRevealed:
    kind: CardKind


Event = Union[
    NewRoundStarted, ReshuffleOccurred, PlayerBusted, PlayerStayed, PlayerFrozen,
    SecondChanceDiscarded, CardRevealed,
]

StatusEvent = Union[PlayerBusted, PlayerStayed, PlayerFrozen]


class DropReason(Enum):
    """Why an observation produced no event."""
    UNRECOGNIZED = "unrecognized"
    NO_ACTOR = "no_actor"
    UNKNOWN_ACTOR = "unknown_actor"


@dataclass(frozen=True)
class LogEntry:
    """
    One game-log line as scraped by the adapter.

    actor is the player name shown in the same line, sprite the sprite
    class of a card token shown in it. Both are optional.
    """
    text: str
    actor: Optional[str] = None
    sprite: Optional[str] = None


@dataclass(frozen=True)
class _Rule:
    """A primary-language keyword set and/or an English fallback pattern."""
    event: type
    keywords: tuple = ()      # all must appear
    pattern: Optional[re.Pattern] = None
    needs_actor: bool = False

    def matches(self, text: str) -> bool:
        if self.keywords and all(k in text for k in self.keywords):
            return True
        return bool(self.pattern and self.pattern.search(text))


# Evaluated in order, first match wins.
RULES = (
    _Rule(NewRoundStarted, ("新的一轮",), re.compile(r"new round", re.IGNORECASE)),
    _Rule(ReshuffleOccurred, ("弃牌堆洗牌",), re.compile(r"shuffle", re.IGNORECASE)),
    _Rule(PlayerBusted, ("爆牌",), re.compile(r"bust", re.IGNORECASE), needs_actor=True),
    _Rule(PlayerStayed, (), re.compile(r"stay", re.IGNORECASE), needs_actor=True),
    _Rule(PlayerFrozen, (), re.compile(r"freezes", re.IGNORECASE), needs_actor=True),
    _Rule(SecondChanceDiscarded, ("第二次机会", "弃除"), re.compile(r"second chance", re.IGNORECASE)),
)


def _as_entry(observation: Union[str, LogEntry]) -> LogEntry:
    if isinstance(observation, LogEntry):
        return observation
    return LogEntry(text=observation or "")


class EventClassifier:
    """Stateless log-line classifier."""

    def __init__(self, rules: tuple = RULES):
        self.rules = rules

    def classify_with_reason(self, observation) -> tuple[Optional[Event], Optional[DropReason]]:
        """Classify an observation, also reporting why it was dropped."""
        entry = _as_entry(observation)
        text = (entry.text or "").strip()

        for rule in self.rules:
            if not rule.matches(text):
                continue
            if rule.needs_actor:
                actor = (entry.actor or "").strip()
                if not actor:
                    return None, DropReason.NO_ACTOR
                return rule.event(actor), None
            return rule.event(), None

        if entry.sprite:
            kind = card_kind_from_sprite(entry.sprite)
            if kind is not None:
                return CardRevealed(kind), None

        return None, DropReason.UNRECOGNIZED

    def classify(self, observation) -> Optional[Event]:
        """Classify an observation into one event, or None."""
        event, _ = self.classify_with_reason(observation)
        return event


_default_classifier = EventClassifier()


def classify(observation: Union[str, LogEntry]) -> Optional[Event]:
    """Convenience function to classify one observation."""
    return _default_classifier.classify(observation)


def classify_reason(observation: Union[str, LogEntry]) -> Optional[DropReason]:
    """Why classify() returns None for this observation (None if it doesn't)."""
    _, reason = _default_classifier.classify_with_reason(observation)
    return reason
