"""
Scoring and survival odds for Flip 7.
Combines the deck ledger with one player's board.
"""

from dataclasses import dataclass

from .cards import CardKind, NUMBER_KINDS, MODIFIER_KINDS
from .deck import DeckState
from .board import PlayerBoard


@dataclass(frozen=True)
class PlayerStats:
    """What the advisor needs to know about one player."""
    survival_rate: int      # % chance the next card doesn't bust
    current_score: int
    card_count: int         # distinct kinds on the board
    has_second_chance: bool


NEUTRAL_STATS = PlayerStats(survival_rate=100, current_score=0, card_count=0,
                            has_second_chance=False)


def round_percent(numerator: int, denominator: int) -> int:
    """100 * numerator / denominator, rounded half up."""
    return (200 * numerator + denominator) // (2 * denominator)


def board_score(board: PlayerBoard) -> int:
    """Number cards plus modifiers. Action cards score nothing."""
    score = 0
    for kind in NUMBER_KINDS + MODIFIER_KINDS:
        score += board[kind] * kind.face_value
    return score


def killer_cards(deck: DeckState, board: PlayerBoard) -> int:
    """Cards left in the pile that would duplicate a number already showing."""
    return sum(deck.remaining[kind] for kind in NUMBER_KINDS if board[kind] > 0)


def survival_rate(deck: DeckState, board: PlayerBoard) -> int:
    total = deck.total_remaining()
    if total == 0:
        return 100  # nothing left to draw
    return round_percent(total - killer_cards(deck, board), total)


def evaluate(deck: DeckState, board: PlayerBoard) -> PlayerStats:
    """Survival rate, score, distinct card count and protection for a board."""
    return PlayerStats(
        survival_rate=survival_rate(deck, board),
        current_score=board_score(board),
        card_count=len(board.kinds_present()),
        has_second_chance=board[CardKind.SECOND_CHANCE] > 0,
    )
