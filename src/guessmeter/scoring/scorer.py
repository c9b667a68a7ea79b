"""Minimum-guesses decomposition of a password into matches.

An attacker who does not know which combination of patterns produced a
password has to try the ways a sequence of ``l`` matches could have been
assembled, so a decomposition costs::

    l! * prod(guesses_i) + MIN_GUESSES_BEFORE_GROWING_SEQUENCE ** (l - 1)

The additive term charges an attacker for reaching longer sequences at all.
Because of the ``l!`` factor the best decomposition of a prefix cannot be
decided locally; for every prefix the scorer keeps the best product for each
sequence length that is still competitive and picks the winner at the end.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable

from guessmeter.config import MIN_GUESSES_BEFORE_GROWING_SEQUENCE
from guessmeter.match import BruteforcePayload, Match

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuessAnalysis:
    password: str
    guesses: float
    guesses_log10: float
    sequence: list[Match]


class _Optimal:
    """DP tables indexed by end position ``k`` then sequence length ``l``.

    ``m[k][l]`` is the last match of the best length-``l`` sequence covering
    ``password[:k + 1]``, ``pi[k][l]`` its guess product and ``g[k][l]`` its
    overall cost. A length is absent when a no-longer sequence has a no larger
    ``l! * pi``.
    """

    def __init__(self, n: int) -> None:
        self.m: list[dict[int, Match]] = [{} for _ in range(n)]
        self.pi: list[dict[int, float]] = [{} for _ in range(n)]
        self.g: list[dict[int, float]] = [{} for _ in range(n)]


def most_guessable_match_sequence(
    password: str,
    matches: Iterable[Match],
    *,
    exclude_additive: bool = False,
) -> GuessAnalysis:
    """Select the non-overlapping, gap-free match sequence with the fewest guesses.

    Gaps are filled with bruteforce matches generated on the fly.
    """
    n = len(password)
    if n == 0:
        return GuessAnalysis(password=password, guesses=1.0, guesses_log10=0.0, sequence=[])

    matches_by_end: list[list[Match]] = [[] for _ in range(n)]
    for match in matches:
        matches_by_end[match.end].append(match)
    for bucket in matches_by_end:
        bucket.sort(key=lambda match: match.begin)

    optimal = _Optimal(n)

    def update(match: Match, length: int) -> None:
        k = match.end
        pi = match.guesses()
        if length > 1:
            pi *= optimal.pi[match.begin - 1][length - 1]
        weighted = math.factorial(length) * pi
        # skip if an equal-or-shorter sequence over the same prefix has a no larger
        # l! * product; every extension of it then stays at least as cheap
        for competing_length, competing_pi in optimal.pi[k].items():
            if competing_length <= length and math.factorial(competing_length) * competing_pi <= weighted:
                return
        g = weighted
        if not exclude_additive:
            g += MIN_GUESSES_BEFORE_GROWING_SEQUENCE ** (length - 1)
        optimal.g[k][length] = g
        optimal.m[k][length] = match
        optimal.pi[k][length] = pi

    def make_bruteforce_match(i: int, j: int) -> Match:
        return Match(
            pattern="bruteforce",
            begin=i,
            end=j,
            token=password[i : j + 1],
            password=password,
            payload=BruteforcePayload(),
        )

    def bruteforce_update(k: int) -> None:
        # a single bruteforce match spanning the whole prefix
        update(make_bruteforce_match(0, k), 1)
        for i in range(1, k + 1):
            # a bruteforce match over [i, k] appended to each sequence ending at i - 1;
            # splitting a gap at a character-class boundary can be cheaper than one span
            match = make_bruteforce_match(i, k)
            for length in sorted(optimal.m[i - 1]):
                update(match, length + 1)

    def unwind() -> list[Match]:
        k = n - 1
        best_length = 0
        best_g = math.inf
        for length in sorted(optimal.g[k]):
            if optimal.g[k][length] < best_g:
                best_length = length
                best_g = optimal.g[k][length]

        sequence: list[Match] = []
        length = best_length
        while k >= 0:
            match = optimal.m[k][length]
            sequence.append(match)
            k = match.begin - 1
            length -= 1
        sequence.reverse()
        return sequence

    for k in range(n):
        for match in matches_by_end[k]:
            if match.begin > 0:
                for length in sorted(optimal.m[match.begin - 1]):
                    update(match, length + 1)
            else:
                update(match, 1)
        bruteforce_update(k)

    sequence = unwind()
    guesses = optimal.g[n - 1][len(sequence)]
    logger.debug("Selected %d-match sequence over %d characters", len(sequence), n)
    return GuessAnalysis(
        password=password,
        guesses=guesses,
        guesses_log10=math.log10(guesses),
        sequence=sequence,
    )
