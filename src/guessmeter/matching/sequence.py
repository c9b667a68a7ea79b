"""Character-sequence matcher ("abcd", "4321", "ΑΒΓ")."""
from __future__ import annotations

import re

from guessmeter.match import Match, SequencePayload

MIN_SEQUENCE_LENGTH = 3
MAX_DELTA = 1

_LOWER_RX = re.compile(r"^[a-z]+$")
_UPPER_RX = re.compile(r"^[A-Z]+$")
_DIGITS_RX = re.compile(r"^\d+$", re.ASCII)


def _classify(token: str) -> tuple[str, int]:
    if _LOWER_RX.match(token):
        return "lower", 26
    if _UPPER_RX.match(token):
        return "upper", 26
    if _DIGITS_RX.match(token):
        return "digits", 10
    # other alphabets: stay with the roman alphabet size
    return "unicode", 26


def sequence_match(password: str) -> list[Match]:
    """Maximal runs whose consecutive code points differ by +1 or -1.

    Runs are found by walking the code-point differences: for ``abcdb975zy``
    the differences are ``1 1 1 -2 -41 -2 -2 69 1`` and only ``abcd`` is
    long enough with a unit step.
    """
    if len(password) < MIN_SEQUENCE_LENGTH:
        return []

    matches: list[Match] = []

    def update(i: int, j: int, delta: int) -> None:
        if j - i + 1 < MIN_SEQUENCE_LENGTH or abs(delta) != MAX_DELTA:
            return
        token = password[i : j + 1]
        sequence_name, sequence_space = _classify(token)
        matches.append(
            Match(
                pattern="sequence",
                begin=i,
                end=j,
                token=token,
                password=password,
                payload=SequencePayload(
                    sequence_name=sequence_name,
                    sequence_space=sequence_space,
                    ascending=delta > 0,
                ),
            )
        )

    i = 0
    last_delta = ord(password[1]) - ord(password[0])
    for k in range(2, len(password)):
        delta = ord(password[k]) - ord(password[k - 1])
        if delta == last_delta:
            continue
        update(i, k - 1, last_delta)
        i = k - 1
        last_delta = delta
    update(i, len(password) - 1, last_delta)
    return matches
