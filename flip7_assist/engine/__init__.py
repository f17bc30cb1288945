"""
Flip 7 tracking engine components.
"""

from .cards import CardKind, CardCategory, FULL_COMPOSITION, card_kind_from_sprite, full_composition
from .events import (
    Event, LogEntry, DropReason, EventClassifier, classify, classify_reason,
    NewRoundStarted, ReshuffleOccurred, PlayerBusted, PlayerStayed, PlayerFrozen,
    SecondChanceDiscarded, CardRevealed,
)
from .deck import DeckState
from .board import BoardTracker, PlayerBoard, PlayerStatus, Status, board_from_sprites
from .scoring import PlayerStats, evaluate
from .strategy import Action, Advice, AdvisorConfig, Rule, Severity, StrategicAdvisor, RISK_TABLE, advise
from .history import SessionHistory, HistoryEntry
