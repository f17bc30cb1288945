from __future__ import annotations

import unittest

from flip7_assist.engine.cards import CardKind
from flip7_assist.engine.events import (
    CardRevealed,
    DropReason,
    LogEntry,
    NewRoundStarted,
    PlayerBusted,
    PlayerFrozen,
    PlayerStayed,
    ReshuffleOccurred,
    SecondChanceDiscarded,
    classify,
    classify_reason,
)


class ClassifyTextTest(unittest.TestCase):
    def test_new_round(self) -> None:
        self.assertEqual(classify("A New Round begins"), NewRoundStarted())
        self.assertEqual(classify("新的一轮开始"), NewRoundStarted())

    def test_reshuffle(self) -> None:
        self.assertEqual(classify("Discard pile is SHUFFLED"), ReshuffleOccurred())
        self.assertEqual(classify("弃牌堆洗牌"), ReshuffleOccurred())

    def test_second_chance_discard(self) -> None:
        self.assertEqual(classify("Bob discards Second Chance"), SecondChanceDiscarded())
        self.assertEqual(classify("Bob 弃除了 第二次机会"), SecondChanceDiscarded())

    def test_primary_keywords_need_all_parts(self) -> None:
        self.assertIsNone(classify("第二次机会"))
        self.assertEqual(classify_reason("第二次机会"), DropReason.UNRECOGNIZED)

    def test_noise_is_unrecognized(self) -> None:
        for text in ["", "   ", "Welcome to the table", "Alice flips a card"]:
            self.assertIsNone(classify(text))
            self.assertEqual(classify_reason(text), DropReason.UNRECOGNIZED)

    def test_first_match_wins(self) -> None:
        # Mentions both a new round and a shuffle.
        self.assertEqual(classify("New round: deck shuffled"), NewRoundStarted())
        self.assertEqual(classify("Shuffle before the bust"), ReshuffleOccurred())


class ClassifyActorTest(unittest.TestCase):
    def test_status_events_carry_actor(self) -> None:
        self.assertEqual(classify(LogEntry("Alice busts!", actor="Alice")), PlayerBusted("Alice"))
        self.assertEqual(classify(LogEntry("Alice 爆牌", actor=" Alice ")), PlayerBusted("Alice"))
        self.assertEqual(classify(LogEntry("Bob stays", actor="Bob")), PlayerStayed("Bob"))
        self.assertEqual(classify(LogEntry("Carol freezes Bob", actor="Bob")), PlayerFrozen("Bob"))

    def test_status_without_actor_is_dropped(self) -> None:
        self.assertIsNone(classify("Bob stays"))
        self.assertEqual(classify_reason("Bob stays"), DropReason.NO_ACTOR)
        self.assertIsNone(classify(LogEntry("Alice busts", actor="  ")))

    def test_status_without_actor_does_not_fall_through(self) -> None:
        entry = LogEntry("Alice busts", sprite="sprite-c7")
        self.assertIsNone(classify(entry))


class ClassifyCardTest(unittest.TestCase):
    def test_card_reveal_from_sprite(self) -> None:
        entry = LogEntry("Alice flips a card", actor="Alice", sprite="sprite-c9")
        self.assertEqual(classify(entry), CardRevealed(CardKind.NINE))
        self.assertEqual(classify(LogEntry("", sprite="sprite-s8")), CardRevealed(CardKind.PLUS_8))
        self.assertEqual(classify(LogEntry("", sprite="sprite-sx2")), CardRevealed(CardKind.DOUBLE))

    def test_unmapped_sprite(self) -> None:
        entry = LogEntry("Alice flips a card", sprite="sprite-c99")
        self.assertIsNone(classify(entry))
        self.assertEqual(classify_reason(entry), DropReason.UNRECOGNIZED)

    def test_text_rules_come_before_sprite(self) -> None:
        entry = LogEntry("Bob draws Second chance", actor="Bob", sprite="sprite-sch")
        self.assertEqual(classify(entry), SecondChanceDiscarded())

    def test_missing_text(self) -> None:
        self.assertEqual(classify(LogEntry(None, sprite="sprite-c6")), CardRevealed(CardKind.SIX))
        self.assertIsNone(classify(LogEntry(None)))
        self.assertIsNone(classify(None))

    def test_pure(self) -> None:
        entry = LogEntry("Alice flips a card", sprite="sprite-c3")
        self.assertEqual(classify(entry), classify(entry))


if __name__ == "__main__":
    unittest.main()
