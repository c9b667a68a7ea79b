"""Run every base matcher over a password and collect their matches."""
from __future__ import annotations

import logging
from typing import Iterable

from guessmeter.dictionaries import DEFAULT_DICTIONARIES, RankedDictionaries
from guessmeter.match import DictionaryPayload, Match
from guessmeter.matching.dates import date_match
from guessmeter.matching.dictionary import dictionary_match, l33t_match, reverse_dictionary_match
from guessmeter.matching.regex import regex_match
from guessmeter.matching.repeat import repeat_match
from guessmeter.matching.sequence import sequence_match
from guessmeter.matching.spatial import spatial_match
from guessmeter.scoring.scorer import GuessAnalysis, most_guessable_match_sequence

logger = logging.getLogger(__name__)

__all__ = ["analyse_token", "find_matches"]


def analyse_token(token: str, dictionaries: RankedDictionaries = DEFAULT_DICTIONARIES) -> GuessAnalysis:
    """Match and score a standalone token; used for repeat base tokens."""
    return most_guessable_match_sequence(token, find_matches(token, dictionaries=dictionaries))


def find_matches(
    password: str,
    user_inputs: Iterable[str] = (),
    *,
    dictionaries: RankedDictionaries = DEFAULT_DICTIONARIES,
) -> list[Match]:
    """Union of all base matchers' candidates, sorted by ``(begin, end)``.

    ``user_inputs`` must already be lower-cased; they form an extra ranked
    dictionary for this call only. Overlapping and redundant matches are kept.
    """
    if not password:
        return []

    ranked = dictionaries.with_user_inputs(user_inputs)

    plain = dictionary_match(password, ranked)
    seen = {
        (match.begin, match.end, match.payload.dictionary_name)
        for match in plain
        if isinstance(match.payload, DictionaryPayload)
    }

    matches: list[Match] = []
    matches.extend(plain)
    matches.extend(reverse_dictionary_match(password, ranked))
    matches.extend(l33t_match(password, ranked, exclude=seen))
    matches.extend(spatial_match(password))
    # base tokens are scored against the bundled dictionaries only
    matches.extend(repeat_match(password, lambda token: analyse_token(token, dictionaries)))
    matches.extend(sequence_match(password))
    matches.extend(regex_match(password))
    matches.extend(date_match(password))

    matches.sort(key=Match.sort_key)
    logger.debug("Found %d candidate matches over %d characters", len(matches), len(password))
    return matches
