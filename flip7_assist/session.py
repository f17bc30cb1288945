"""
Main API for Flip 7 tracking.
A GameSession owns all state for one game and answers the adapter's queries.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Sequence, Union

from .engine.cards import CardKind, coerce_kind
from .engine.events import (
    DropReason, Event, EventClassifier, LogEntry, NewRoundStarted,
    PlayerBusted, PlayerFrozen, PlayerStayed,
)
from .engine.deck import DeckState
from .engine.board import BoardTracker, Status, board_from_sprites
from .engine.scoring import NEUTRAL_STATS, PlayerStats, evaluate, round_percent
from .engine.strategy import Advice, AdvisorConfig, StrategicAdvisor
from .engine.history import SessionHistory

logger = logging.getLogger(__name__)

Observation = Union[str, LogEntry]


@dataclass
class SessionConfig:
    """Configuration for a tracking session."""
    advisor: AdvisorConfig = field(default_factory=AdvisorConfig)
    max_players: int = 12


class Density(Enum):
    """How much of a card kind is left in the pile."""
    LOW = "low"        # 0-2 left
    MEDIUM = "medium"  # 3-5 left
    HIGH = "high"      # 6+


@dataclass(frozen=True)
class DeckEntry:
    """One row of the deck-composition display."""
    kind: CardKind
    count: int
    percent: int
    density: Density


@dataclass(frozen=True)
class PlayerReport:
    """Everything the panel shows for one player."""
    index: int
    name: str
    status: Optional[Status]
    stats: PlayerStats
    advice: Optional[Advice]  # None once the player is out for the round

    @property
    def active(self) -> bool:
        return self.status is None

    def __str__(self):
        if self.status is not None:
            return f"{self.name}: {self.status.value}"
        return (f"{self.name}: score {self.stats.current_score}, "
                f"safe {self.stats.survival_rate}% -> {self.advice.action.value} ({self.advice.reason})")


def density_of(count: int) -> Density:
    if count <= 2:
        return Density.LOW
    if count <= 5:
        return Density.MEDIUM
    return Density.HIGH


class GameSession:
    """
    Deck, boards and statuses for one game.

    Usage:
        session = GameSession(["Alice", "Bob"])
        cursor = session.ingest_log(log_lines)            # new cursor
        session.apply_board_sprites(0, ["sprite-c5", "sprite-c7"])
        print(session.report(0))

    Nothing here waits or schedules; the caller decides when to push
    observations and when to ask for reports.
    """

    def __init__(self, roster: Iterable[str] = (), config: SessionConfig = None):
        self.config = config or SessionConfig()
        self.classifier = EventClassifier()
        self.advisor = StrategicAdvisor(self.config.advisor)
        self.deck = DeckState()
        self.players = BoardTracker()
        self.history = SessionHistory()
        roster = list(roster)
        if roster:
            self.set_roster(roster)

    @property
    def roster(self) -> list[str]:
        return list(self.players.roster)

    def set_roster(self, names: Sequence[str]) -> None:
        """Supply the player list. It is fixed for the rest of the session."""
        names = [n.strip() for n in names if n and n.strip()]
        if self.players.roster:
            if names == self.players.roster:
                return
            raise ValueError(f"Roster already set to {self.players.roster}")
        if len(names) > self.config.max_players:
            raise ValueError(f"At most {self.config.max_players} players, got {len(names)}")
        self.players = BoardTracker(names)
        self.history.metadata["roster"] = list(names)

    # Inbound: log observations

    def observe(self, observation: Observation) -> Optional[Event]:
        """Classify one log observation and apply it. Returns the applied event."""
        event, reason = self.classifier.classify_with_reason(observation)
        text = (observation.text if isinstance(observation, LogEntry) else observation) or ""

        if event is None:
            logger.debug("Dropped observation (%s): %r", reason.value, text)
            self.history.add_dropped(reason, text)
            return None

        if isinstance(event, (PlayerBusted, PlayerStayed, PlayerFrozen)):
            if not self.players.apply_event(event):
                self.history.add_dropped(DropReason.UNKNOWN_ACTOR, text, event)
                return None
        else:
            self.deck.apply_event(event)
            if isinstance(event, NewRoundStarted):
                self.players.reset_all()
                logger.debug("New round")

        self.history.add_event(event)
        return event

    def ingest_log(self, entries: Sequence[Observation], cursor: int = 0) -> int:
        """
        Apply entries[cursor:] in order and return the next cursor.

        Passing the returned cursor back with the grown log applies only
        the new lines.
        """
        cursor = max(0, cursor)
        for entry in entries[cursor:]:
            self.observe(entry)
        return max(cursor, len(entries))

    # Inbound: board snapshots

    def apply_board_snapshot(self, player_index: int, observed: dict) -> bool:
        """
        Replace a player's visible cards with kind -> count.

        Only snapshots that change the board are recorded in history, so
        polling an unchanged board does not grow it.
        """
        board = self.players.board(player_index)
        before = dict(board.counts) if board is not None else None
        if not self.players.apply_board_snapshot(player_index, observed):
            return False
        if board.counts != before:
            self.history.add_snapshot(player_index, board.counts)
        return True

    def apply_board_sprites(self, player_index: int, sprites: Iterable[str]) -> bool:
        """Replace a player's visible cards from their sprite classes."""
        return self.apply_board_snapshot(player_index, board_from_sprites(sprites))

    # Outbound queries

    def stats(self, player_index: int) -> PlayerStats:
        board = self.players.board(player_index)
        if board is None:
            return NEUTRAL_STATS
        return evaluate(self.deck, board)

    def advise(self, player_index: int) -> Advice:
        return self.advisor.advise(self.stats(player_index))

    def report(self, player_index: int) -> PlayerReport:
        """Stats and advice for one player; no advice if they are out this round."""
        status = self.players.status(player_index)
        if status is None:
            name, terminal = "", None
        else:
            name, terminal = self.players.roster[player_index], status.terminal
        stats = self.stats(player_index)
        advice = self.advisor.advise(stats) if terminal is None else None
        return PlayerReport(index=player_index, name=name, status=terminal,
                            stats=stats, advice=advice)

    def reports(self) -> list[PlayerReport]:
        return [self.report(i) for i in range(len(self.players.roster))]

    def remaining(self) -> dict[str, int]:
        """Cards left in the pile, keyed by canonical card name."""
        return {kind.value: count for kind, count in self.deck.remaining.items()}

    def remaining_of(self, kind) -> int:
        return self.deck.remaining[coerce_kind(kind)]

    def deck_breakdown(self) -> list[DeckEntry]:
        """Each card kind's count, share of the pile and density band."""
        total = self.deck.total_remaining() or 1
        return [
            DeckEntry(kind=kind, count=count, percent=round_percent(count, total),
                      density=density_of(count))
            for kind, count in self.deck.remaining.items()
        ]

    def reset(self) -> None:
        """Start a new game with the same players."""
        self.deck.reset()
        self.players.reset_all()
        self.history = SessionHistory(roster=self.players.roster)
