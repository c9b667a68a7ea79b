from __future__ import annotations

import pytest

from guessmeter.match import SequencePayload
from guessmeter.matching.sequence import sequence_match


@pytest.mark.parametrize("password", ["", "a", "1", "ab", "aceg", "1357", "aaaa"])
def test_no_sequence(password: str) -> None:
    assert sequence_match(password) == []


def test_overlapping_runs_share_a_character() -> None:
    matches = sequence_match("abcbabc")

    assert [(match.begin, match.end, match.token) for match in matches] == [
        (0, 2, "abc"),
        (2, 4, "cba"),
        (4, 6, "abc"),
    ]
    assert [match.payload.ascending for match in matches] == [True, False, True]  # type: ignore[union-attr]


def test_embedded_sequence() -> None:
    matches = sequence_match("!jihg22")

    assert [(match.begin, match.end, match.token) for match in matches] == [(1, 4, "jihg")]


@pytest.mark.parametrize(
    ("password", "name", "space", "ascending"),
    [
        ("ABC", "upper", 26, True),
        ("CBA", "upper", 26, False),
        ("PQR", "upper", 26, True),
        ("abc", "lower", 26, True),
        ("zyxw", "lower", 26, False),
        ("01234567", "digits", 10, True),
        ("9876", "digits", 10, False),
        ("ΑΒΓ", "unicode", 26, True),
    ],
)
def test_sequence_classification(password: str, name: str, space: int, ascending: bool) -> None:
    matches = sequence_match(password)

    assert len(matches) == 1
    assert (matches[0].begin, matches[0].end) == (0, len(password) - 1)
    assert matches[0].payload == SequencePayload(sequence_name=name, sequence_space=space, ascending=ascending)
    assert matches[0].payload.delta == (1 if ascending else -1)  # type: ignore[union-attr]
