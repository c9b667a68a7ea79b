"""Guess estimation, one formula per pattern kind.

Every estimate is floored: a match shorter than the password it was found in
costs at least ``MIN_SUBMATCH_GUESSES_SINGLE_CHAR`` (one character) or
``MIN_SUBMATCH_GUESSES_MULTI_CHAR`` guesses, so a short common word inside a
longer password ("you" in "rockyou") cannot look cheaper than its length.
"""
from __future__ import annotations

import math
import re
import sys
from typing import TYPE_CHECKING, Callable, Mapping

from guessmeter.config import (
    MIN_SUBMATCH_GUESSES_MULTI_CHAR,
    MIN_SUBMATCH_GUESSES_SINGLE_CHAR,
    MIN_YEAR_SPACE,
    REFERENCE_YEAR,
)
from guessmeter.errors import UnknownPatternError
from guessmeter.keyboards import (
    KEYBOARD_AVERAGE_DEGREE,
    KEYBOARD_GRAPHS,
    KEYBOARD_STARTING_POSITIONS,
    KEYPAD_AVERAGE_DEGREE,
    KEYPAD_STARTING_POSITIONS,
)

if TYPE_CHECKING:
    from guessmeter.match import Match

START_UPPER = re.compile(r"^[A-Z][^A-Z]+$")
END_UPPER = re.compile(r"^[^A-Z]+[A-Z]$")
ALL_UPPER = re.compile(r"^[^a-z]+$")
ALL_LOWER = re.compile(r"^[^A-Z]+$")

OBVIOUS_SEQUENCE_STARTS = frozenset("aAzZ019")

DIGITS_CARDINALITY = 10
LOWER_CARDINALITY = 26
UPPER_CARDINALITY = 26
SYMBOLS_CARDINALITY = 33
UNICODE_CARDINALITY = 100


def n_choose_k(n: int, k: int) -> int:
    if k > n:
        return 0
    return math.comb(n, k)


def minimum_guesses(match: Match) -> float:
    token_length = len(match.token)
    if token_length >= len(match.password):
        return 1
    if token_length == 1:
        return MIN_SUBMATCH_GUESSES_SINGLE_CHAR
    return MIN_SUBMATCH_GUESSES_MULTI_CHAR


def estimate_guesses(match: Match) -> float:
    """Raw estimate for the match's pattern, raised to the submatch floor."""
    estimator = ESTIMATORS.get(match.pattern)
    if estimator is None:
        raise UnknownPatternError(f"No guess estimator for pattern {match.pattern!r}")
    return float(max(estimator(match), minimum_guesses(match)))


def bruteforce_cardinality(token: str) -> int:
    """Size of the character space spanned by the classes present in ``token``."""
    digits = lower = upper = symbols = unicode = 0
    for char in token:
        if "0" <= char <= "9":
            digits = DIGITS_CARDINALITY
        elif "a" <= char <= "z":
            lower = LOWER_CARDINALITY
        elif "A" <= char <= "Z":
            upper = UPPER_CARDINALITY
        elif ord(char) < 0x80:
            symbols = SYMBOLS_CARDINALITY
        else:
            unicode = UNICODE_CARDINALITY
    return digits + lower + upper + symbols + unicode


def bruteforce_guesses(match: Match) -> float:
    try:
        guesses = float(bruteforce_cardinality(match.token)) ** len(match.token)
    except OverflowError:
        guesses = sys.float_info.max
    if math.isinf(guesses):
        guesses = sys.float_info.max
    # one more than the floor, so a real match over the same span wins a tie
    if len(match.token) == 1:
        min_guesses = MIN_SUBMATCH_GUESSES_SINGLE_CHAR + 1
    else:
        min_guesses = MIN_SUBMATCH_GUESSES_MULTI_CHAR + 1
    return max(guesses, min_guesses)


def uppercase_variations(token: str) -> int:
    if ALL_LOWER.match(token) or token.lower() == token:
        return 1
    # capitalised, all caps and end-capitalised are common enough to only double
    # the search space
    for regex in (START_UPPER, END_UPPER, ALL_UPPER):
        if regex.match(token):
            return 2
    # otherwise count the ways to place up to min(U, L) of the rarer case
    upper = sum(1 for char in token if "A" <= char <= "Z")
    lower = sum(1 for char in token if "a" <= char <= "z")
    return sum(n_choose_k(upper + lower, i) for i in range(1, min(upper, lower) + 1))


def l33t_variations(token: str, substitutions: Mapping[str, str]) -> int:
    variations = 1
    chars = token.lower()
    for subbed, plain in substitutions.items():
        subbed_count = chars.count(subbed)
        plain_count = chars.count(plain)
        if subbed_count == 0 or plain_count == 0:
            # fully substituted ("444") or not at all: attacker tries both
            variations *= 2
        else:
            shortest = min(plain_count, subbed_count)
            variations *= sum(
                n_choose_k(plain_count + subbed_count, i) for i in range(1, shortest + 1)
            )
    return variations


def dictionary_guesses(match: Match) -> float:
    payload = match.payload
    reversed_variations = 2 if payload.reversed else 1
    l33t = l33t_variations(match.token, payload.substitutions) if payload.l33t else 1
    return payload.rank * uppercase_variations(match.token) * l33t * reversed_variations


def spatial_guesses(match: Match) -> float:
    payload = match.payload
    if payload.graph_name in KEYBOARD_GRAPHS:
        starts = KEYBOARD_STARTING_POSITIONS
        degree = KEYBOARD_AVERAGE_DEGREE
    else:
        starts = KEYPAD_STARTING_POSITIONS
        degree = KEYPAD_AVERAGE_DEGREE

    length = len(match.token)
    turns = payload.turns
    guesses = 0.0
    # patterns of length <= L with at most t turns
    for i in range(2, length + 1):
        possible_turns = min(turns, i - 1)
        for j in range(1, possible_turns + 1):
            guesses += n_choose_k(i - 1, j - 1) * starts * degree**j

    shifted = payload.shifted_count
    if shifted:
        unshifted = length - shifted
        if unshifted == 0:
            guesses *= 2
        else:
            guesses *= sum(
                n_choose_k(shifted + unshifted, i) for i in range(1, min(shifted, unshifted) + 1)
            )
    return guesses


def sequence_guesses(match: Match) -> float:
    first_char = match.token[0]
    if first_char in OBVIOUS_SEQUENCE_STARTS:
        base_guesses = 4
    elif first_char.isdigit():
        base_guesses = 10
    else:
        # upper-case sequences could start higher; 26 is the conservative choice
        base_guesses = 26
    if not match.payload.ascending:
        base_guesses *= 2
    return base_guesses * len(match.token)


def repeat_guesses(match: Match) -> float:
    return match.payload.base_guesses * match.payload.repeat_count


def date_guesses(match: Match) -> float:
    payload = match.payload
    year_space = max(abs(payload.year - REFERENCE_YEAR), MIN_YEAR_SPACE)
    guesses = year_space * 365
    if payload.separator:
        # one of a handful of separators
        guesses *= 4
    return guesses


def regex_guesses(match: Match) -> float:
    if match.payload.regex_name == "recent_year":
        return max(abs(int(match.token) - REFERENCE_YEAR), MIN_YEAR_SPACE)
    raise UnknownPatternError(f"No guess estimator for regex {match.payload.regex_name!r}")


ESTIMATORS: dict[str, Callable[[Match], float]] = {
    "bruteforce": bruteforce_guesses,
    "dictionary": dictionary_guesses,
    "spatial": spatial_guesses,
    "sequence": sequence_guesses,
    "repeat": repeat_guesses,
    "date": date_guesses,
    "regex": regex_guesses,
}
