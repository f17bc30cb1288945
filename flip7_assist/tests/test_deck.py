from __future__ import annotations

import random
import unittest

from flip7_assist.engine.cards import CardKind, full_composition
from flip7_assist.engine.deck import DeckState
from flip7_assist.engine.events import (
    CardRevealed,
    NewRoundStarted,
    PlayerBusted,
    ReshuffleOccurred,
    SecondChanceDiscarded,
)


class DeckStateTest(unittest.TestCase):
    def test_starts_full(self) -> None:
        deck = DeckState()
        self.assertEqual(deck.remaining, full_composition())
        self.assertEqual(sum(deck.seen_this_round.values()), 0)
        self.assertEqual(deck.total_remaining(), 94)

    def test_card_revealed(self) -> None:
        deck = DeckState()
        deck.apply_event(CardRevealed(CardKind.SEVEN))
        self.assertEqual(deck.remaining[CardKind.SEVEN], 6)
        self.assertEqual(deck.seen_this_round[CardKind.SEVEN], 1)

    def test_reveal_saturates_at_zero(self) -> None:
        deck = DeckState()
        for _ in range(3):
            deck.apply_event(CardRevealed(CardKind.ZERO))
        self.assertEqual(deck.remaining[CardKind.ZERO], 0)
        self.assertEqual(deck.seen_this_round[CardKind.ZERO], 3)

    def test_second_chance_discard_leaves_round_counts(self) -> None:
        deck = DeckState()
        for _ in range(5):
            deck.apply_event(SecondChanceDiscarded())
        self.assertEqual(deck.remaining[CardKind.SECOND_CHANCE], 0)
        self.assertEqual(deck.seen_this_round[CardKind.SECOND_CHANCE], 0)

    def test_reshuffle_subtracts_cards_still_out(self) -> None:
        deck = DeckState()
        for _ in range(2):
            deck.apply_event(CardRevealed(CardKind.TWELVE))
        deck.apply_event(CardRevealed(CardKind.FIVE))
        deck.remaining = {kind: 0 for kind in CardKind}

        deck.apply_event(ReshuffleOccurred())

        self.assertEqual(deck.remaining[CardKind.TWELVE], 10)
        self.assertEqual(deck.remaining[CardKind.FIVE], 4)
        self.assertEqual(deck.remaining[CardKind.NINE], 9)
        self.assertEqual(deck.seen_this_round[CardKind.TWELVE], 2)

    def test_reshuffle_floors_at_zero(self) -> None:
        deck = DeckState()
        deck.seen_this_round[CardKind.ONE] = 4
        deck.apply_event(ReshuffleOccurred())
        self.assertEqual(deck.remaining[CardKind.ONE], 0)

    def test_new_round_only_clears_seen(self) -> None:
        deck = DeckState()
        deck.apply_event(CardRevealed(CardKind.EIGHT))
        deck.apply_event(NewRoundStarted())
        self.assertEqual(deck.seen_this_round[CardKind.EIGHT], 0)
        self.assertEqual(deck.remaining[CardKind.EIGHT], 7)

    def test_new_round_then_reshuffle_restores_full_deck(self) -> None:
        deck = DeckState()
        for kind in [CardKind.TWELVE, CardKind.FREEZE, CardKind.PLUS_6, CardKind.THREE]:
            deck.apply_event(CardRevealed(kind))
        deck.start_new_round()
        deck.apply_event(ReshuffleOccurred())
        self.assertEqual(deck.remaining, full_composition())

    def test_status_events_are_ignored(self) -> None:
        deck = DeckState()
        deck.apply_event(PlayerBusted("Alice"))
        self.assertEqual(deck.remaining, full_composition())

    def test_reset(self) -> None:
        deck = DeckState()
        deck.apply_event(CardRevealed(CardKind.TEN))
        deck.reset()
        self.assertEqual(deck.remaining, full_composition())
        self.assertEqual(deck.seen_this_round[CardKind.TEN], 0)

    def test_never_negative_under_random_events(self) -> None:
        rng = random.Random(7)
        kinds = list(CardKind)
        makers = [
            lambda: CardRevealed(rng.choice(kinds)),
            SecondChanceDiscarded,
            ReshuffleOccurred,
            NewRoundStarted,
        ]
        deck = DeckState()
        for _ in range(2000):
            deck.apply_event(rng.choices(makers, weights=[20, 2, 1, 1])[0]())
            self.assertTrue(all(v >= 0 for v in deck.remaining.values()))

    def test_from_counts(self) -> None:
        deck = DeckState.from_counts({"5card": 3, CardKind.SEVEN: 2})
        self.assertEqual(deck.total_remaining(), 5)
        self.assertEqual(deck.remaining_of("5card"), 3)
        self.assertEqual(deck.remaining_of(CardKind.TWELVE), 0)


if __name__ == "__main__":
    unittest.main()
