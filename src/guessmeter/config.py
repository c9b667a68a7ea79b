"""Fixed scoring constants and evaluation settings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

MAX_PASSWORD_LENGTH = 64  # code points; longer input is truncated

REFERENCE_YEAR = date.today().year
MIN_YEAR_SPACE = 20
DATE_MIN_YEAR = 1000
DATE_MAX_YEAR = 2050

MIN_SUBMATCH_GUESSES_SINGLE_CHAR = 10
MIN_SUBMATCH_GUESSES_MULTI_CHAR = 40
MIN_GUESSES_BEFORE_GROWING_SEQUENCE = 1000

# Upper bounds (exclusive) of score buckets 0..3; anything above is 4.
# The small delta keeps values landing just over a power of ten in the lower bucket.
SCORE_DELTA = 5
SCORE_THRESHOLDS = (
    1e3 + SCORE_DELTA,
    1e6 + SCORE_DELTA,
    1e8 + SCORE_DELTA,
    1e10 + SCORE_DELTA,
)


@dataclass(frozen=True)
class EvaluationSettings:
    max_password_length: int = MAX_PASSWORD_LENGTH
    language: str | None = None


def default_settings() -> EvaluationSettings:
    """Return the recommended evaluation settings."""

    return EvaluationSettings()
