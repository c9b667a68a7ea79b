from __future__ import annotations

import pytest

from guessmeter.dictionaries import RankedDictionaries
from guessmeter.match import Match, RepeatPayload
from guessmeter.matching.core import analyse_token
from guessmeter.matching.repeat import repeat_match
from guessmeter.scoring.scorer import GuessAnalysis

NO_WORDS = RankedDictionaries({})


def _analyse(token: str) -> GuessAnalysis:
    return analyse_token(token, NO_WORDS)


def _payload(match: Match) -> RepeatPayload:
    assert isinstance(match.payload, RepeatPayload)
    return match.payload


@pytest.mark.parametrize("password", ["", "#", "abc", "abcab"])
def test_no_repeat(password: str) -> None:
    assert repeat_match(password, _analyse) == []


@pytest.mark.parametrize(
    ("password", "base_token", "repeat_count"),
    [
        ("aaaaa", "a", 5),
        ("abab", "ab", 2),
        ("aabaab", "aab", 2),
        ("aabaabaabaab", "aab", 4),
        ("abcabcabc", "abc", 3),
    ],
)
def test_base_token_is_the_shortest_unit(password: str, base_token: str, repeat_count: int) -> None:
    matches = repeat_match(password, _analyse)

    assert [(match.begin, match.end) for match in matches] == [(0, len(password) - 1)]
    payload = _payload(matches[0])
    assert payload.base_token == base_token
    assert payload.repeat_count == repeat_count


def test_several_repeats_in_one_password() -> None:
    matches = repeat_match("BBB1111aaaaa@@@@@@", _analyse)

    assert [(match.begin, match.end, match.token) for match in matches] == [
        (0, 2, "BBB"),
        (3, 6, "1111"),
        (7, 11, "aaaaa"),
        (12, 17, "@@@@@@"),
    ]


def test_repeat_embedded_in_noise() -> None:
    matches = repeat_match("x%2y%sdfgsdfg!", _analyse)

    assert [(match.begin, match.end, match.token) for match in matches] == [(5, 12, "sdfgsdfg")]


def test_base_token_is_analysed() -> None:
    matches = repeat_match("sdfgsdfg", _analyse)

    payload = _payload(matches[0])
    # "sdfg" alone is a straight qwerty walk: 3 lengths * 94 keys * 432/94 neighbours
    assert payload.base_guesses == pytest.approx(1296 + 1)
    assert [match.pattern for match in payload.base_matches] == ["spatial"]
    assert matches[0].guesses() == pytest.approx(2 * 1297)
