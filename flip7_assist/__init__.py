"""
Flip 7 Assistant
"""

from .engine.cards import CardKind, CardCategory, FULL_COMPOSITION
from .engine.events import Event, LogEntry, classify
from .engine.deck import DeckState
from .engine.board import BoardTracker, PlayerBoard, Status
from .engine.scoring import PlayerStats, evaluate
from .engine.strategy import Action, Advice, AdvisorConfig, StrategicAdvisor, advise
from .session import GameSession, SessionConfig, PlayerReport

__version__ = "0.1.0"
