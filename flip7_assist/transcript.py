"""
Recorded observation streams.
A transcript is the roster plus every log line and board snapshot an
adapter saw, in order, so a game can be replayed without a browser.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .engine.events import LogEntry
from .session import GameSession, SessionConfig


@dataclass(frozen=True)
class BoardSnapshot:
    """Sprite classes visible on one player's board."""
    player: int
    sprites: tuple


@dataclass
class Transcript:
    roster: list[str] = field(default_factory=list)
    observations: list = field(default_factory=list)  # LogEntry | BoardSnapshot

    def __len__(self):
        return len(self.observations)

    def to_dict(self) -> dict:
        items = []
        for obs in self.observations:
            if isinstance(obs, BoardSnapshot):
                items.append({"type": "board", "player": obs.player, "sprites": list(obs.sprites)})
            else:
                item = {"type": "log", "text": obs.text}
                if obs.actor:
                    item["actor"] = obs.actor
                if obs.sprite:
                    item["sprite"] = obs.sprite
                items.append(item)
        return {"roster": list(self.roster), "observations": items}

    @classmethod
    def from_dict(cls, data: dict) -> "Transcript":
        observations = []
        for i, item in enumerate(data.get("observations", [])):
            kind = item.get("type")
            if kind == "log":
                observations.append(LogEntry(
                    text=item.get("text") or "",
                    actor=item.get("actor"),
                    sprite=item.get("sprite"),
                ))
            elif kind == "board":
                observations.append(BoardSnapshot(
                    player=int(item["player"]),
                    sprites=tuple(item.get("sprites", [])),
                ))
            else:
                raise ValueError(f"Observation {i}: unknown type {kind!r}")
        return cls(roster=list(data.get("roster", [])), observations=observations)

    def save(self, filepath: str):
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)


def load_transcript(source: Union[str, Path, dict]) -> Transcript:
    """Load a transcript from a JSON file path or an already-parsed dict."""
    if isinstance(source, dict):
        return Transcript.from_dict(source)
    with open(source, encoding="utf-8") as f:
        return Transcript.from_dict(json.load(f))


def apply_observation(session: GameSession, obs) -> None:
    if isinstance(obs, BoardSnapshot):
        session.apply_board_sprites(obs.player, obs.sprites)
    else:
        session.observe(obs)


def replay(transcript: Transcript, config: SessionConfig = None,
           until: Optional[int] = None) -> GameSession:
    """
    Drive a fresh session through a transcript.

    Args:
        transcript: Recorded observations
        config: Session configuration
        until: Stop after this many observations (default: all)

    Returns:
        The session in its state after the last applied observation
    """
    session = GameSession(transcript.roster, config)
    stop = len(transcript) if until is None else max(0, min(until, len(transcript)))
    for obs in transcript.observations[:stop]:
        apply_observation(session, obs)
    return session
