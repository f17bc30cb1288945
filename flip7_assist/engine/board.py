"""
Player board tracking for Flip 7.
Holds the cards each player currently shows and their round status.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from .cards import CardKind, card_kind_from_sprite, coerce_kind, empty_counts
from .events import PlayerBusted, PlayerFrozen, PlayerStayed, StatusEvent

logger = logging.getLogger(__name__)


class Status(Enum):
    BUSTED = "busted"
    STAYED = "stayed"
    FROZEN = "frozen"


STATUS_EVENTS = {
    PlayerBusted: Status.BUSTED,
    PlayerStayed: Status.STAYED,
    PlayerFrozen: Status.FROZEN,
}


@dataclass
class PlayerStatus:
    busted: bool = False
    stayed: bool = False
    frozen: bool = False

    def set(self, status: Status) -> None:
        setattr(self, status.value, True)

    def clear(self) -> None:
        self.busted = False
        self.stayed = False
        self.frozen = False

    @property
    def terminal(self) -> Optional[Status]:
        """The status to show, busted first, then frozen, then stayed."""
        if self.busted:
            return Status.BUSTED
        if self.frozen:
            return Status.FROZEN
        if self.stayed:
            return Status.STAYED
        return None


@dataclass
class PlayerBoard:
    """Cards visible on one player's board, by kind."""
    counts: dict[CardKind, int] = field(default_factory=empty_counts)

    def __getitem__(self, kind: CardKind) -> int:
        return self.counts.get(kind, 0)

    def replace(self, observed: dict) -> None:
        """Replace the whole board with a fresh snapshot."""
        counts = empty_counts()
        for kind, count in observed.items():
            counts[coerce_kind(kind)] += max(0, int(count))
        self.counts = counts

    def clear(self) -> None:
        self.counts = empty_counts()

    def kinds_present(self) -> list[CardKind]:
        return [kind for kind, count in self.counts.items() if count > 0]

    @classmethod
    def of(cls, observed: dict) -> "PlayerBoard":
        board = cls()
        board.replace(observed)
        return board


def board_from_sprites(sprites: Iterable[str]) -> dict[CardKind, int]:
    """Count card sprites from a board snapshot. Unmapped sprites are skipped."""
    counts: dict[CardKind, int] = {}
    for sprite in sprites:
        kind = card_kind_from_sprite(sprite)
        if kind is None:
            logger.debug("Skipping unmapped board sprite %r", sprite)
            continue
        counts[kind] = counts.get(kind, 0) + 1
    return counts


class BoardTracker:
    """Boards and statuses for a fixed roster of players."""

    def __init__(self, roster: Iterable[str] = ()):
        self.roster: list[str] = [name.strip() for name in roster]
        if len(set(self.roster)) != len(self.roster):
            raise ValueError(f"Duplicate player names in roster: {self.roster}")
        self.boards: list[PlayerBoard] = [PlayerBoard() for _ in self.roster]
        self.statuses: dict[str, PlayerStatus] = {name: PlayerStatus() for name in self.roster}

    def board(self, player_index: int) -> Optional[PlayerBoard]:
        if 0 <= player_index < len(self.boards):
            return self.boards[player_index]
        return None

    def status(self, player_index: int) -> Optional[PlayerStatus]:
        if 0 <= player_index < len(self.roster):
            return self.statuses[self.roster[player_index]]
        return None

    def apply_board_snapshot(self, player_index: int, observed: dict) -> bool:
        """Replace a player's board. Returns False for an index outside the roster."""
        board = self.board(player_index)
        if board is None:
            logger.debug("Snapshot for unknown player index %d ignored", player_index)
            return False
        board.replace(observed)
        return True

    def apply_status_event(self, player_name: str, status: Status) -> bool:
        """Flag a player busted/stayed/frozen. Returns False if the name is unknown."""
        player = self.statuses.get(player_name.strip())
        if player is None:
            logger.debug("Status %s for unknown player %r dropped", status.value, player_name)
            return False
        player.set(status)
        return True

    def apply_event(self, event: StatusEvent) -> bool:
        return self.apply_status_event(event.name, STATUS_EVENTS[type(event)])

    def reset_all(self) -> None:
        """Start of round: empty boards, clear every flag."""
        for board in self.boards:
            board.clear()
        for status in self.statuses.values():
            status.clear()
