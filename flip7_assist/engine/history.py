"""
Session history for Flip 7 tracking.
Records what each observation did to the session, in order.
"""

from dataclasses import dataclass, asdict
from typing import Optional
import json
from pathlib import Path

from .events import CardRevealed, DropReason, Event


@dataclass
class HistoryEntry:
    """Single step in a session."""
    sequence: int
    kind: str  # "event", "dropped", "snapshot"
    data: dict


def describe_event(event: Event) -> dict:
    """Plain-dict form of an event for logs and JSON."""
    data = {"event": type(event).__name__}
    if isinstance(event, CardRevealed):
        data["card"] = event.kind.value
    elif hasattr(event, "name"):
        data["player"] = event.name
    return data


class SessionHistory:
    """Ordered record of applied events, dropped observations and snapshots."""

    def __init__(self, roster: list = None):
        self.entries: list[HistoryEntry] = []
        self.metadata = {"roster": list(roster or [])}
        self._counter = 0

    def add_entry(self, kind: str, data: dict):
        self.entries.append(HistoryEntry(sequence=self._counter, kind=kind, data=data))
        self._counter += 1

    def add_event(self, event: Event):
        self.add_entry("event", describe_event(event))

    def add_dropped(self, reason: DropReason, text: str, event: Optional[Event] = None):
        """Log an observation that changed nothing."""
        data = {"reason": reason.value, "text": text}
        if event is not None:
            data.update(describe_event(event))
        self.add_entry("dropped", data)

    def add_snapshot(self, player_index: int, counts: dict):
        self.add_entry("snapshot", {
            "player": player_index,
            "cards": {k.value: v for k, v in counts.items() if v > 0},
        })

    def events(self) -> list[HistoryEntry]:
        return [e for e in self.entries if e.kind == "event"]

    def dropped(self, reason: DropReason = None) -> list[HistoryEntry]:
        return [e for e in self.entries
                if e.kind == "dropped" and (reason is None or e.data["reason"] == reason.value)]

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "metadata": self.metadata,
            "entries": [asdict(e) for e in self.entries],
            "summary": self._generate_summary(),
        }

    def _generate_summary(self) -> dict:
        events = self.events()
        return {
            "events_applied": len(events),
            "observations_dropped": len(self.dropped()),
            "snapshots": sum(1 for e in self.entries if e.kind == "snapshot"),
            "rounds": sum(1 for e in events if e.data["event"] == "NewRoundStarted"),
            "reshuffles": sum(1 for e in events if e.data["event"] == "ReshuffleOccurred"),
            "cards_revealed": sum(1 for e in events if e.data["event"] == "CardRevealed"),
        }

    def save(self, filepath: str):
        """Save history to JSON."""
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, filepath: str) -> 'SessionHistory':
        """Load history from JSON."""
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)

        history = cls(roster=data["metadata"].get("roster", []))
        history.metadata = data["metadata"]

        for entry_data in data["entries"]:
            history.entries.append(HistoryEntry(**entry_data))
            history._counter = max(history._counter, entry_data["sequence"] + 1)

        return history
