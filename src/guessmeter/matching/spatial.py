"""Keyboard-walk matcher (qwerty, dvorak, keypad)."""
from __future__ import annotations

import re
from typing import Mapping

from guessmeter.keyboards import GRAPHS, KEYBOARD_GRAPHS, Graph
from guessmeter.match import Match, SpatialPayload

SHIFTED_RX = re.compile(r'[~!@#$%^&*()_+QWERTYUIOP{}|ASDFGHJKL:"ZXCVBNM<>?]')

MIN_SPATIAL_LENGTH = 3


def spatial_match(password: str, graphs: Mapping[str, Graph] = GRAPHS) -> list[Match]:
    matches: list[Match] = []
    for graph_name, graph in graphs.items():
        matches.extend(spatial_match_helper(password, graph, graph_name))
    return sorted(matches, key=Match.sort_key)


def spatial_match_helper(password: str, graph: Graph, graph_name: str) -> list[Match]:
    """Maximal runs of adjacent keys on one graph, at least three keys long."""
    matches: list[Match] = []
    length = len(password)
    i = 0
    while i < length - 1:
        j = i + 1
        last_direction: int | None = None
        turns = 0
        shifted_count = 1 if graph_name in KEYBOARD_GRAPHS and SHIFTED_RX.match(password[i]) else 0
        while True:
            found = False
            if j < length:
                cur_char = password[j]
                for direction, adjacent in enumerate(graph.get(password[j - 1], [])):
                    if adjacent is None or cur_char not in adjacent:
                        continue
                    found = True
                    # index 1 of a key is its shifted character: '@' in '2@'
                    if adjacent.index(cur_char) == 1:
                        shifted_count += 1
                    # the first step of a walk always counts as a turn
                    if last_direction != direction:
                        turns += 1
                        last_direction = direction
                    break
            if found:
                j += 1
                continue
            if j - i >= MIN_SPATIAL_LENGTH:
                matches.append(
                    Match(
                        pattern="spatial",
                        begin=i,
                        end=j - 1,
                        token=password[i:j],
                        password=password,
                        payload=SpatialPayload(
                            graph_name=graph_name,
                            turns=turns,
                            shifted_count=shifted_count,
                        ),
                    )
                )
            i = j
            break
    return matches
