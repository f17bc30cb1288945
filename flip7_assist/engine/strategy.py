"""
Hit/stop advice for Flip 7.
A short rule cascade backed by a score-indexed risk table.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from .scoring import PlayerStats


class Action(Enum):
    HIT = "HIT"
    STOP = "STOP"


class Severity(Enum):
    SAFE = "safe"
    DANGER = "danger"


class Rule(Enum):
    """Which branch of the cascade decided."""
    PROTECTED = "protected"
    BONUS_CHASE = "bonus_chase"
    RISK_TABLE = "risk_table"


# Minimum survival % needed to hit, by current score.
RISK_TABLE = MappingProxyType({
    0: 50, 1: 50, 2: 50, 3: 50, 4: 50, 5: 50,
    6: 51, 7: 51, 8: 52, 9: 52, 10: 53,
    11: 53, 12: 54, 13: 54, 14: 55, 15: 55,
    16: 56, 17: 57, 18: 58, 19: 59, 20: 60,
    21: 61, 22: 62, 23: 63, 24: 64, 25: 66,
    26: 67, 27: 68, 28: 69, 29: 70, 30: 71,
    31: 72, 32: 73, 33: 74, 34: 75, 35: 76,
    36: 77, 37: 78, 38: 79, 39: 80, 40: 81,
    41: 82, 42: 83, 43: 84, 44: 85, 45: 86,
    46: 88, 47: 90, 48: 92, 49: 94, 50: 95,
    51: 96, 52: 97, 53: 98, 54: 99, 55: 99,
})


@dataclass
class AdvisorConfig:
    """Thresholds for the advice cascade."""
    bonus_card_threshold: int = 6   # one short of the seven-kind bonus
    bonus_min_survival: int = 50
    risk_ceiling: int = 99          # scores past the table
    risk_table: dict = field(default_factory=lambda: dict(RISK_TABLE))


@dataclass(frozen=True)
class Advice:
    action: Action
    reason: str
    severity: Severity
    rule: Rule

    @property
    def is_hit(self) -> bool:
        return self.action is Action.HIT


def _hit(reason: str, rule: Rule) -> Advice:
    return Advice(Action.HIT, reason, Severity.SAFE, rule)


def _stop(reason: str, rule: Rule) -> Advice:
    return Advice(Action.STOP, reason, Severity.DANGER, rule)


class StrategicAdvisor:
    """
    Decides HIT or STOP for one player's stats.

    Rules, first match wins:
    1. Holding a Second chance: always hit, a bust would just burn it.
    2. Six or more kinds showing: chase the bonus at a flat 50%.
    3. Otherwise hit only if survival meets the risk table for the score.
    """

    def __init__(self, config: AdvisorConfig = None):
        self.config = config or AdvisorConfig()

    def required_rate(self, score: int) -> int:
        return self.config.risk_table.get(score, self.config.risk_ceiling)

    def advise(self, stats: PlayerStats) -> Advice:
        if stats.has_second_chance:
            return _hit("Protected", Rule.PROTECTED)

        if stats.card_count >= self.config.bonus_card_threshold:
            if stats.survival_rate >= self.config.bonus_min_survival:
                return _hit("Chase Bonus", Rule.BONUS_CHASE)
            return _stop("Risk > Bonus", Rule.BONUS_CHASE)

        required = self.required_rate(stats.current_score)
        if stats.survival_rate >= required:
            return _hit(f"Safe (> {required}%)", Rule.RISK_TABLE)
        return _stop(f"Risky (Need {required}%)", Rule.RISK_TABLE)


def advise(stats: PlayerStats, config: AdvisorConfig = None) -> Advice:
    """Convenience function to get advice with default thresholds."""
    return StrategicAdvisor(config).advise(stats)
