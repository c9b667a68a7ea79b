"""Repeat matcher ("aaa", "abcabcabc", "sdfgsdfg")."""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Callable

from guessmeter.match import Match, RepeatPayload

if TYPE_CHECKING:
    from guessmeter.scoring.scorer import GuessAnalysis

GREEDY_RX = re.compile(r"(.+)\1+", re.DOTALL)
LAZY_RX = re.compile(r"(.+?)\1+", re.DOTALL)
LAZY_ANCHORED_RX = re.compile(r"^(.+?)\1+$", re.DOTALL)


def repeat_match(password: str, analyse: Callable[[str], GuessAnalysis]) -> list[Match]:
    """Runs of a base token repeated back to back.

    ``analyse`` scores the base token on its own; its decomposition and guess
    count become part of the repeat match. The base token is always shorter
    than the repeated span, so the recursion terminates.
    """
    matches: list[Match] = []
    last_index = 0
    while last_index < len(password):
        greedy = GREEDY_RX.search(password, last_index)
        lazy = LAZY_RX.search(password, last_index)
        if greedy is None or lazy is None:
            break
        if len(greedy.group(0)) > len(lazy.group(0)):
            # greedy wins for "aabaab" (lazy stops at "aa"); its unit may repeat
            # itself, as "aabaab" does in "aabaabaabaab", so shrink it
            found = greedy
            anchored = LAZY_ANCHORED_RX.match(found.group(0))
            base_token = anchored.group(1) if anchored else found.group(1)
        else:
            # lazy wins for "aaaaa" (greedy stops at "aaaa")
            found = lazy
            base_token = found.group(1)

        begin, end = found.start(), found.end() - 1
        analysis = analyse(base_token)
        matches.append(
            Match(
                pattern="repeat",
                begin=begin,
                end=end,
                token=found.group(0),
                password=password,
                payload=RepeatPayload(
                    base_token=base_token,
                    base_guesses=analysis.guesses,
                    base_matches=tuple(analysis.sequence),
                    repeat_count=len(found.group(0)) / len(base_token),
                ),
            )
        )
        last_index = end + 1
    return matches
