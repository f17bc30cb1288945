#!/usr/bin/env python3
"""
Demo script for Flip 7 tracking.
Replays a short scripted game (or a transcript file) and prints the
deck and per-player advice after each step.
"""

import argparse
import logging

from .engine.cards import CardKind
from .engine.events import classify
from .engine.deck import DeckState
from .engine.board import PlayerBoard
from .engine.scoring import evaluate
from .engine.strategy import advise
from .transcript import BoardSnapshot, apply_observation, load_transcript
from .session import GameSession
from .utils import setup_logger


def sample_transcript() -> dict:
    """A two-player round with a Second chance save and a reshuffle."""
    return {
        "roster": ["Alice", "Bob"],
        "observations": [
            {"type": "log", "text": "A new round begins"},
            {"type": "log", "text": "Alice flips a card", "actor": "Alice", "sprite": "sprite-c12"},
            {"type": "board", "player": 0, "sprites": ["sprite-c12"]},
            {"type": "log", "text": "Bob flips a card", "actor": "Bob", "sprite": "sprite-c5"},
            {"type": "board", "player": 1, "sprites": ["sprite-c5"]},
            {"type": "log", "text": "Alice flips a card", "actor": "Alice", "sprite": "sprite-sch"},
            {"type": "board", "player": 0, "sprites": ["sprite-c12", "sprite-sch"]},
            {"type": "log", "text": "Bob flips a card", "actor": "Bob", "sprite": "sprite-s4"},
            {"type": "board", "player": 1, "sprites": ["sprite-c5", "sprite-s4"]},
            {"type": "log", "text": "Alice flips a card", "actor": "Alice", "sprite": "sprite-c12"},
            {"type": "log", "text": "Alice discards her Second chance", "actor": "Alice"},
            {"type": "board", "player": 0, "sprites": ["sprite-c12"]},
            {"type": "log", "text": "Bob flips a card", "actor": "Bob", "sprite": "sprite-c11"},
            {"type": "board", "player": 1, "sprites": ["sprite-c5", "sprite-s4", "sprite-c11"]},
            {"type": "log", "text": "Bob stays", "actor": "Bob"},
            {"type": "log", "text": "The discard pile is shuffled into the deck"},
            {"type": "log", "text": "Alice flips a card", "actor": "Alice", "sprite": "sprite-c12"},
            {"type": "log", "text": "Alice 爆牌", "actor": "Alice"},
            {"type": "log", "text": "Cosmetic: table chat message"},
        ],
    }


def demo_single_board():
    """Evaluate one hand-built board against a fresh deck."""
    print("=" * 60)
    print("SINGLE BOARD DEMO")
    print("=" * 60)

    deck = DeckState()
    for line in ["A new round begins", "Discard pile shuffled", "Bob stays"]:
        print(f"  {line!r} -> {classify(line)}")

    board = PlayerBoard.of({CardKind.TWELVE: 1, CardKind.NINE: 1, CardKind.PLUS_4: 1})
    stats = evaluate(deck, board)
    advice = advise(stats)
    print(f"\nBoard: {', '.join(str(k) for k in board.kinds_present())}")
    print(f"  Score: {stats.current_score}")
    print(f"  Survival: {stats.survival_rate}%")
    print(f"  Advice: {advice.action.value} ({advice.reason})")


def print_state(session: GameSession):
    for report in session.reports():
        print(f"    {report}")


def print_deck(session: GameSession):
    print("\n  Remaining deck:")
    for entry in session.deck_breakdown():
        print(f"    {str(entry.kind):<14} {entry.count:>3} ({entry.percent:>3}%) {entry.density.value}")
    print(f"  Total: {session.deck.total_remaining()}")


def demo_replay(source, verbose: bool = False):
    """Step through a transcript, printing advice after each observation."""
    transcript = load_transcript(source)

    print("\n" + "=" * 60)
    print(f"REPLAY ({len(transcript)} observations, players: {', '.join(transcript.roster)})")
    print("=" * 60)

    session = GameSession(transcript.roster)
    for obs in transcript.observations:
        apply_observation(session, obs)
        if isinstance(obs, BoardSnapshot):
            if verbose:
                print(f"  [board] player {obs.player}: {', '.join(obs.sprites)}")
            continue
        print(f"  {obs.text}")
        print_state(session)

    print_deck(session)
    summary = session.history.to_dict()["summary"]
    print(f"\n  History: {summary}")
    return session


def main():
    parser = argparse.ArgumentParser(description="Flip 7 assistant demo")
    parser.add_argument("--transcript", type=str, help="Replay a transcript JSON file")
    parser.add_argument("--save-history", type=str, help="Write the session history JSON here")
    parser.add_argument("--verbose", action="store_true", help="Show snapshots and debug logs")
    args = parser.parse_args()

    setup_logger("flip7_assist", logging.DEBUG if args.verbose else logging.INFO)

    if args.transcript:
        source = args.transcript
    else:
        demo_single_board()
        source = sample_transcript()

    session = demo_replay(source, verbose=args.verbose)
    if args.save_history:
        session.history.save(args.save_history)
        print(f"\nSaved history to {args.save_history}")


if __name__ == "__main__":
    main()
