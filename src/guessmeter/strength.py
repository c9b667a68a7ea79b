"""Password strength estimation: guesses, score, crack times and feedback."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Iterable

from guessmeter.config import MAX_PASSWORD_LENGTH, EvaluationSettings, default_settings
from guessmeter.dictionaries import DEFAULT_DICTIONARIES, RankedDictionaries
from guessmeter.feedback import Feedback, get_feedback
from guessmeter.i18n import Translations, load_translations, translate_feedback
from guessmeter.match import Match
from guessmeter.matching import find_matches
from guessmeter.scoring import most_guessable_match_sequence
from guessmeter.time_estimates import Score, estimate_attack_times

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrengthResult:
    password: str
    guesses: float
    guesses_log10: float
    sequence: list[Match]
    score: Score  # 0-4
    crack_times_seconds: dict[str, float]
    crack_times_display: dict[str, str]
    feedback: Feedback
    calc_time: float


def sanitize_inputs(user_inputs: Iterable[object]) -> list[str]:
    return [str(value).lower() for value in user_inputs]


def evaluate(
    password: str,
    user_inputs: Iterable[object] = (),
    *,
    translations: Translations | None = None,
    dictionaries: RankedDictionaries = DEFAULT_DICTIONARIES,
    max_password_length: int = MAX_PASSWORD_LENGTH,
) -> StrengthResult:
    """Estimate how many guesses an attacker needs for ``password``.

    Passwords longer than ``max_password_length`` code points are truncated,
    not rejected. ``user_inputs`` (names, e-mail addresses, site names) are
    lower-cased and ranked as an extra dictionary for this call only.
    ``translations`` localizes the feedback phrases; ``None`` keeps English.
    """
    started = time.perf_counter()

    if len(password) > max_password_length:
        logger.debug("Password truncated from %d to %d characters", len(password), max_password_length)
        password = password[:max_password_length]

    matches = find_matches(password, sanitize_inputs(user_inputs), dictionaries=dictionaries)
    analysis = most_guessable_match_sequence(password, matches)
    attack_times = estimate_attack_times(analysis.guesses)
    feedback = get_feedback(attack_times.score, analysis.sequence)
    if translations:
        feedback = translate_feedback(feedback, translations)

    return StrengthResult(
        password=analysis.password,
        guesses=analysis.guesses,
        guesses_log10=analysis.guesses_log10,
        sequence=analysis.sequence,
        score=attack_times.score,
        crack_times_seconds=attack_times.crack_times_seconds,
        crack_times_display=attack_times.crack_times_display,
        feedback=feedback,
        calc_time=time.perf_counter() - started,
    )


class PasswordEstimator:
    """Evaluator that carries its own feedback language.

    Usage::

        estimator = PasswordEstimator()
        estimator.set_feedback_language("cs")
        result = estimator.evaluate("password1", ["jan", "novak"])
    """

    def __init__(
        self,
        settings: EvaluationSettings | None = None,
        *,
        dictionaries: RankedDictionaries = DEFAULT_DICTIONARIES,
    ) -> None:
        self.settings = settings or default_settings()
        self.dictionaries = dictionaries
        self.translations: dict[str, str] = {}
        if self.settings.language:
            self.set_feedback_language(self.settings.language)

    def set_feedback_language(self, code: str) -> None:
        """Load translations for ``code``; unknown codes leave feedback in English."""
        self.translations = load_translations(code)

    def evaluate(self, password: str, user_inputs: Iterable[object] = ()) -> StrengthResult:
        return evaluate(
            password,
            user_inputs,
            translations=self.translations,
            dictionaries=self.dictionaries,
            max_password_length=self.settings.max_password_length,
        )
