"""
Deck tracking for Flip 7.
Keeps count of cards still in the draw pile and cards seen this round.
"""

import logging
from dataclasses import dataclass, field

from .cards import CardKind, empty_counts, full_composition, coerce_kind
from .events import (
    CardRevealed, Event, NewRoundStarted, ReshuffleOccurred, SecondChanceDiscarded,
)

logger = logging.getLogger(__name__)


@dataclass
class DeckState:
    """
    Deck-level ledger. Knows nothing about who holds which card.

    remaining: cards not yet drawn from the pile.
    seen_this_round: cards drawn since the round began; still out of the
    pile after a reshuffle.
    """
    remaining: dict[CardKind, int] = field(default_factory=full_composition)
    seen_this_round: dict[CardKind, int] = field(default_factory=empty_counts)

    @classmethod
    def from_counts(cls, remaining: dict, seen_this_round: dict = None) -> "DeckState":
        """Build a deck from partial counts. Missing kinds count as zero."""
        deck = cls(remaining=empty_counts())
        for kind, count in remaining.items():
            deck.remaining[coerce_kind(kind)] = max(0, int(count))
        for kind, count in (seen_this_round or {}).items():
            deck.seen_this_round[coerce_kind(kind)] = max(0, int(count))
        return deck

    def apply_event(self, event: Event) -> None:
        """Update counts for one classified event. Status events are ignored."""
        if isinstance(event, CardRevealed):
            self._take(event.kind)
            self.seen_this_round[event.kind] += 1
        elif isinstance(event, SecondChanceDiscarded):
            self._take(CardKind.SECOND_CHANCE)
        elif isinstance(event, ReshuffleOccurred):
            self.reshuffle()
        elif isinstance(event, NewRoundStarted):
            self.start_new_round()

    def _take(self, kind: CardKind) -> None:
        """Remove one card from the pile, never going below zero."""
        if self.remaining[kind] > 0:
            self.remaining[kind] -= 1
        else:
            logger.debug("No %s left to draw, count stays at 0", kind)

    def reshuffle(self) -> None:
        """Discards go back in: pile becomes the full deck minus cards still out."""
        full = full_composition()
        self.remaining = {
            kind: max(0, count - self.seen_this_round[kind])
            for kind, count in full.items()
        }
        logger.debug("Reshuffled, %d cards in pile", self.total_remaining())

    def start_new_round(self) -> None:
        """Forget the previous round's visible cards."""
        self.seen_this_round = empty_counts()

    def reset(self) -> None:
        """Back to a fresh, undealt deck."""
        self.remaining = full_composition()
        self.seen_this_round = empty_counts()

    def remaining_of(self, kind) -> int:
        return self.remaining[coerce_kind(kind)]

    def total_remaining(self) -> int:
        """Cards left to draw."""
        return sum(self.remaining.values())
