"""Crack-time estimates per attack scenario and the 0-4 score bucket."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

from guessmeter.config import SCORE_THRESHOLDS

Score = Literal[0, 1, 2, 3, 4]

# scenario -> guesses per second
ATTACK_SCENARIOS: dict[str, float] = {
    "online_throttling_100_per_hour": 100 / 3600,
    "online_no_throttling_10_per_second": 10,
    "offline_slow_hashing_1e4_per_second": 1e4,
    "offline_fast_hashing_1e10_per_second": 1e10,
}

MINUTE = 60
HOUR = MINUTE * 60
DAY = HOUR * 24
MONTH = DAY * 31
YEAR = MONTH * 12
CENTURY = YEAR * 100


@dataclass(frozen=True)
class AttackTimes:
    crack_times_seconds: dict[str, float]
    crack_times_display: dict[str, str]
    score: Score


def guesses_to_score(guesses: float) -> Score:
    """Bucket guesses into 0 (too guessable) .. 4 (very unguessable)."""
    for score, threshold in enumerate(SCORE_THRESHOLDS):
        if guesses < threshold:
            return score  # type: ignore[return-value]
    return 4


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def display_time(seconds: float) -> str:
    if seconds < 1:
        return "less than a second"
    if seconds >= CENTURY:
        return "centuries"
    for unit_seconds, unit, next_unit in (
        (1, "second", MINUTE),
        (MINUTE, "minute", HOUR),
        (HOUR, "hour", DAY),
        (DAY, "day", MONTH),
        (MONTH, "month", YEAR),
        (YEAR, "year", CENTURY),
    ):
        if seconds < next_unit:
            base = _round_half_up(seconds / unit_seconds)
            return f"{base} {unit}" if base == 1 else f"{base} {unit}s"
    return "centuries"


def estimate_attack_times(guesses: float) -> AttackTimes:
    seconds = {scenario: guesses / rate for scenario, rate in ATTACK_SCENARIOS.items()}
    return AttackTimes(
        crack_times_seconds=seconds,
        crack_times_display={scenario: display_time(value) for scenario, value in seconds.items()},
        score=guesses_to_score(guesses),
    )
