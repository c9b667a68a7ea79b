from __future__ import annotations

import sys
from types import MappingProxyType

import pytest

from guessmeter.config import MIN_YEAR_SPACE, REFERENCE_YEAR
from guessmeter.errors import UnknownPatternError
from guessmeter.keyboards import KEYBOARD_AVERAGE_DEGREE, KEYBOARD_STARTING_POSITIONS
from guessmeter.match import (
    BruteforcePayload,
    DatePayload,
    DictionaryPayload,
    Match,
    Payload,
    RegexPayload,
    RepeatPayload,
    SequencePayload,
    SpatialPayload,
)
from guessmeter.scoring.estimators import (
    bruteforce_cardinality,
    estimate_guesses,
    l33t_variations,
    n_choose_k,
    uppercase_variations,
)


def _match(pattern: str, token: str, payload: Payload, password: str | None = None) -> Match:
    password = token if password is None else password
    begin = password.index(token)
    return Match(
        pattern=pattern,  # type: ignore[arg-type]
        begin=begin,
        end=begin + len(token) - 1,
        token=token,
        password=password,
        payload=payload,
    )


@pytest.mark.parametrize(
    ("n", "k", "expected"),
    [(0, 0, 1), (1, 0, 1), (5, 0, 1), (0, 1, 0), (0, 5, 0), (2, 1, 2), (4, 2, 6), (33, 7, 4272048)],
)
def test_n_choose_k(n: int, k: int, expected: int) -> None:
    assert n_choose_k(n, k) == expected


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("", 1),
        ("a", 1),
        ("A", 2),
        ("123", 1),
        ("abcdef", 1),
        ("Abcdef", 2),
        ("abcdeF", 2),
        ("ABCDEF", 2),
        ("aBcdef", 6),
        ("aBcDef", 21),
        ("ABCDEf", 6),
        ("aBC", 3),
        ("AAAaaa", 41),
    ],
)
def test_uppercase_variations(token: str, expected: int) -> None:
    assert uppercase_variations(token) == expected


@pytest.mark.parametrize(
    ("token", "subs", "expected"),
    [
        ("", {}, 1),
        ("a", {}, 1),
        ("4", {"4": "a"}, 2),
        ("4pple", {"4": "a"}, 2),
        ("abcet", {}, 1),
        ("4bcet", {"4": "a"}, 2),
        ("a8cet", {"8": "b"}, 2),
        ("abce+", {"+": "t"}, 2),
        ("48cet", {"4": "a", "8": "b"}, 4),
        ("a4a4aa", {"4": "a"}, 21),
        ("4a4a44", {"4": "a"}, 21),
        ("a44att+", {"4": "a", "+": "t"}, 30),
        ("Aa44aA", {"4": "a"}, 21),
    ],
)
def test_l33t_variations(token: str, subs: dict[str, str], expected: int) -> None:
    assert l33t_variations(token, subs) == expected


@pytest.mark.parametrize(
    ("token", "expected"),
    [("", 0), ("abc", 26), ("aB1", 62), ("a b", 59), ("ü", 100), ("Zz9~ü", 195)],
)
def test_bruteforce_cardinality(token: str, expected: int) -> None:
    assert bruteforce_cardinality(token) == expected


def test_bruteforce_guesses() -> None:
    assert estimate_guesses(_match("bruteforce", "abc", BruteforcePayload())) == 26**3
    assert estimate_guesses(_match("bruteforce", "a1B!", BruteforcePayload())) == 95**4
    assert estimate_guesses(_match("bruteforce", "a", BruteforcePayload())) == 26


def test_bruteforce_floor_is_above_the_submatch_floor() -> None:
    assert estimate_guesses(_match("bruteforce", "1", BruteforcePayload())) == 11
    assert estimate_guesses(_match("bruteforce", "1", BruteforcePayload(), password="x1")) == 11
    assert estimate_guesses(_match("bruteforce", "12", BruteforcePayload(), password="x12")) == 100
    assert estimate_guesses(_match("bruteforce", "12", BruteforcePayload())) == 100


def test_bruteforce_saturates_instead_of_overflowing() -> None:
    assert estimate_guesses(_match("bruteforce", "a" * 500, BruteforcePayload())) == sys.float_info.max


def test_dictionary_guesses() -> None:
    def word(token: str, **kwargs: object) -> Match:
        payload = DictionaryPayload(
            matched_word=token.lower(), rank=32, dictionary_name="d", **kwargs  # type: ignore[arg-type]
        )
        return _match("dictionary", token, payload)

    assert estimate_guesses(word("aaaaa")) == 32
    assert estimate_guesses(word("AAAaaa")) == 32 * 41
    assert estimate_guesses(word("aaa", reversed=True)) == 32 * 2
    assert estimate_guesses(word("aaa@@@", l33t=True, substitutions=MappingProxyType({"@": "a"}))) == 32 * 41
    assert (
        estimate_guesses(word("AaA@@@", l33t=True, substitutions=MappingProxyType({"@": "a"})))
        == 32 * 41 * 3
    )


def test_submatch_floor() -> None:
    you = DictionaryPayload(matched_word="you", rank=1, dictionary_name="d")
    a = DictionaryPayload(matched_word="a", rank=1, dictionary_name="d")

    assert estimate_guesses(_match("dictionary", "you", you)) == 1
    assert estimate_guesses(_match("dictionary", "you", you, password="rockyou")) == 40
    assert estimate_guesses(_match("dictionary", "a", a, password="ab")) == 10


def test_spatial_guesses() -> None:
    base = KEYBOARD_STARTING_POSITIONS * KEYBOARD_AVERAGE_DEGREE

    straight = SpatialPayload(graph_name="qwerty", turns=1, shifted_count=0)
    assert estimate_guesses(_match("spatial", "zxcvbn", straight)) == pytest.approx(5 * base)

    shifted = SpatialPayload(graph_name="qwerty", turns=1, shifted_count=2)
    assert estimate_guesses(_match("spatial", "ZxCvbn", shifted)) == pytest.approx(5 * base * (6 + 15))

    all_shifted = SpatialPayload(graph_name="qwerty", turns=1, shifted_count=6)
    assert estimate_guesses(_match("spatial", "ZXCVBN", all_shifted)) == pytest.approx(5 * base * 2)


def test_spatial_guesses_grow_with_turns() -> None:
    one_turn = SpatialPayload(graph_name="qwerty", turns=1, shifted_count=0)
    three_turns = SpatialPayload(graph_name="qwerty", turns=3, shifted_count=0)

    assert estimate_guesses(_match("spatial", "zxcftzgy", three_turns)) > estimate_guesses(
        _match("spatial", "zxcftzgy", one_turn)
    )


@pytest.mark.parametrize(
    ("token", "ascending", "expected"),
    [
        ("abc", True, 4 * 3),
        ("cba", False, 26 * 2 * 3),
        ("987", False, 4 * 2 * 3),
        ("456", True, 10 * 3),
        ("xyz", True, 26 * 3),
        ("ZYX", False, 4 * 2 * 3),
    ],
)
def test_sequence_guesses(token: str, ascending: bool, expected: int) -> None:
    payload = SequencePayload(sequence_name="any", sequence_space=26, ascending=ascending)

    assert estimate_guesses(_match("sequence", token, payload)) == expected


def test_repeat_guesses() -> None:
    payload = RepeatPayload(base_token="a", base_guesses=11, base_matches=(), repeat_count=2)

    assert estimate_guesses(_match("repeat", "aa", payload)) == 22
    assert estimate_guesses(_match("repeat", "aa", payload, password="aa!")) == 40


def test_date_guesses() -> None:
    payload = DatePayload(separator="", year=1923, month=1, day=1)
    assert estimate_guesses(_match("date", "1123", payload)) == 365 * abs(REFERENCE_YEAR - 1923)

    recent = DatePayload(separator="/", year=REFERENCE_YEAR, month=1, day=1)
    assert estimate_guesses(_match("date", "1/1/26", recent)) == 365 * MIN_YEAR_SPACE * 4


def test_regex_guesses() -> None:
    payload = RegexPayload(regex_name="recent_year")

    assert estimate_guesses(_match("regex", "1972", payload)) == abs(REFERENCE_YEAR - 1972)
    assert estimate_guesses(_match("regex", str(REFERENCE_YEAR), payload)) == MIN_YEAR_SPACE


def test_unknown_regex_name() -> None:
    with pytest.raises(UnknownPatternError):
        estimate_guesses(_match("regex", "abc", RegexPayload(regex_name="alphabet")))


def test_unknown_pattern() -> None:
    with pytest.raises(UnknownPatternError):
        estimate_guesses(_match("hexadecimal", "abc", BruteforcePayload()))


def test_guesses_are_cached() -> None:
    match = _match("bruteforce", "abc", BruteforcePayload())

    assert match.guesses() == match.guesses() == 26**3
    assert match.guesses_log10() == pytest.approx(3 * 1.414973347970818)


def test_match_rejects_inconsistent_span() -> None:
    with pytest.raises(ValueError):
        Match(pattern="bruteforce", begin=2, end=1, token="", password="abc", payload=BruteforcePayload())
    with pytest.raises(ValueError):
        Match(pattern="bruteforce", begin=0, end=1, token="abc", password="abc", payload=BruteforcePayload())
