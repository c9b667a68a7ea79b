"""Warning and suggestions for a scored password."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from guessmeter.match import (
    DictionaryPayload,
    Match,
    RegexPayload,
    RepeatPayload,
    SpatialPayload,
)
from guessmeter.scoring.estimators import ALL_UPPER, START_UPPER

EXTRA_SUGGESTION = "Add another word or two. Uncommon words are better."

NAME_DICTIONARIES = frozenset({"surnames", "male_names", "female_names"})


@dataclass(frozen=True)
class Feedback:
    warning: str = ""
    suggestions: list[str] = field(default_factory=list)


def default_feedback() -> Feedback:
    return Feedback(
        warning="",
        suggestions=[
            "Use a few words, avoid common phrases",
            "No need for symbols, digits, or uppercase letters",
        ],
    )


def get_feedback(score: int, sequence: Sequence[Match]) -> Feedback:
    """Advice tied to the longest match of a weak password; nothing for strong ones."""
    if not sequence:
        return default_feedback()
    if score > 2:
        return Feedback()

    longest = sequence[0]
    for match in sequence[1:]:
        if len(match.token) > len(longest.token):
            longest = match

    match_feedback = get_match_feedback(longest, len(sequence) == 1)
    if match_feedback is None:
        return Feedback(warning="", suggestions=[EXTRA_SUGGESTION])
    return Feedback(
        warning=match_feedback.warning,
        suggestions=[EXTRA_SUGGESTION, *match_feedback.suggestions],
    )


def get_match_feedback(match: Match, is_sole_match: bool) -> Feedback | None:
    payload = match.payload
    if isinstance(payload, DictionaryPayload):
        return get_dictionary_match_feedback(match, payload, is_sole_match)

    if isinstance(payload, SpatialPayload):
        if payload.turns == 1:
            warning = "Straight rows of keys are easy to guess"
        else:
            warning = "Short keyboard patterns are easy to guess"
        return Feedback(warning=warning, suggestions=["Use a longer keyboard pattern with more turns"])

    if isinstance(payload, RepeatPayload):
        if len(payload.base_token) == 1:
            warning = 'Repeats like "aaa" are easy to guess'
        else:
            warning = 'Repeats like "abcabcabc" are only slightly harder to guess than "abc"'
        return Feedback(warning=warning, suggestions=["Avoid repeated words and characters"])

    if match.pattern == "sequence":
        return Feedback(
            warning="Sequences like abc or 6543 are easy to guess",
            suggestions=["Avoid sequences"],
        )

    if isinstance(payload, RegexPayload) and payload.regex_name == "recent_year":
        return Feedback(
            warning="Recent years are easy to guess",
            suggestions=["Avoid recent years", "Avoid years that are associated with you"],
        )

    if match.pattern == "date":
        return Feedback(
            warning="Dates are often easy to guess",
            suggestions=["Avoid dates and years that are associated with you"],
        )

    return None


def get_dictionary_match_feedback(
    match: Match, payload: DictionaryPayload, is_sole_match: bool
) -> Feedback:
    warning = ""
    if payload.dictionary_name == "passwords":
        if is_sole_match and not payload.l33t and not payload.reversed:
            if payload.rank <= 10:
                warning = "This is a top-10 common password"
            elif payload.rank <= 100:
                warning = "This is a top-100 common password"
            else:
                warning = "This is a very common password"
        elif match.guesses_log10() <= 4:
            warning = "This is similar to a commonly used password"
    elif payload.dictionary_name == "english_wikipedia":
        if is_sole_match:
            warning = "A word by itself is easy to guess"
    elif payload.dictionary_name in NAME_DICTIONARIES:
        if is_sole_match:
            warning = "Names and surnames by themselves are easy to guess"
        else:
            warning = "Common names and surnames are easy to guess"

    suggestions: list[str] = []
    word = match.token
    if START_UPPER.match(word):
        suggestions.append("Capitalization doesn't help very much")
    elif ALL_UPPER.match(word) and word.lower() != word:
        suggestions.append("All-uppercase is almost as easy to guess as all-lowercase")

    if payload.reversed and len(word) >= 4:
        suggestions.append("Reversed words aren't much harder to guess")
    if payload.l33t:
        suggestions.append("Predictable substitutions like '@' instead of 'a' don't help very much")

    return Feedback(warning=warning, suggestions=suggestions)
