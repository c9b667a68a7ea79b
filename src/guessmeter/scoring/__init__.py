"""Guess estimation and optimal match-sequence selection."""
from __future__ import annotations

from guessmeter.scoring.estimators import estimate_guesses
from guessmeter.scoring.scorer import GuessAnalysis, most_guessable_match_sequence

__all__ = [
    "GuessAnalysis",
    "estimate_guesses",
    "most_guessable_match_sequence",
]
