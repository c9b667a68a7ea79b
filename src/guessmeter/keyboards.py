"""Keyboard adjacency graphs.

Graphs are built from the layout drawings below when the module is imported.
Each graph maps a character to a fixed-length list of neighbouring keys, in
clockwise order starting from the key to the left; a neighbouring key is the
string of characters it produces (unshifted first, shifted second), or
``None`` past the edge of the board. The position in the list is the
direction, which is what the spatial matcher counts turns with.
"""
from __future__ import annotations

import logging
from typing import Callable

from guessmeter.errors import BundledDataError

logger = logging.getLogger(__name__)

Graph = dict[str, list[str | None]]

QWERTY = r"""
`~ 1! 2@ 3# 4$ 5% 6^ 7& 8* 9( 0) -_ =+
    qQ wW eE rR tT yY uU iI oO pP [{ ]} \|
     aA sS dD fF gG hH jJ kK lL ;: '"
      zZ xX cC vV bB nN mM ,< .> /?
"""

DVORAK = r"""
`~ 1! 2@ 3# 4$ 5% 6^ 7& 8* 9( 0) [{ ]}
    '" ,< .> pP yY fF gG cC rR lL /? =+ \|
     aA oO eE uU iI dD hH tT nN sS -_
      ;: qQ jJ kK xX bB mM wW vV zZ
"""

KEYPAD = r"""
  / * -
7 8 9 +
4 5 6
1 2 3
  0 .
"""

MAC_KEYPAD = r"""
  = / *
7 8 9 -
4 5 6 +
1 2 3
  0 .
"""

Coords = tuple[int, int]


def slanted_adjacent_coords(x: int, y: int) -> list[Coords]:
    """Six neighbours on a keyboard whose rows are each shifted right of the last."""
    return [(x - 1, y), (x, y - 1), (x + 1, y - 1), (x + 1, y), (x, y + 1), (x - 1, y + 1)]


def aligned_adjacent_coords(x: int, y: int) -> list[Coords]:
    """Eight neighbours on a keypad whose rows are vertically aligned."""
    return [
        (x - 1, y),
        (x - 1, y - 1),
        (x, y - 1),
        (x + 1, y - 1),
        (x + 1, y),
        (x + 1, y + 1),
        (x, y + 1),
        (x - 1, y + 1),
    ]


def build_graph(layout: str, *, slanted: bool) -> Graph:
    """Build an adjacency graph from a layout drawing.

    On qwerty ``g`` maps to ``['fF', 'tT', 'yY', 'hH', 'bB', 'vV']``; on the
    keypad ``7`` maps to ``[None, None, None, '/', '8', '5', '4', None]``.
    """
    tokens = layout.split()
    if not tokens:
        raise BundledDataError("Keyboard layout is empty")
    token_size = len(tokens[0])
    if any(len(token) != token_size for token in tokens):
        raise BundledDataError(f"Key width mismatch in layout:\n{layout}")

    x_unit = token_size + 1
    adjacency: Callable[[int, int], list[Coords]] = (
        slanted_adjacent_coords if slanted else aligned_adjacent_coords
    )

    positions: dict[Coords, str] = {}
    for y, line in enumerate(layout.split("\n")):
        # each slanted row is drawn one column further right than the row above
        slant = y - 1 if slanted else 0
        for token in line.split():
            x, remainder = divmod(line.index(token) - slant, x_unit)
            if remainder != 0:
                raise BundledDataError(f"Unexpected offset for key {token!r} in layout:\n{layout}")
            positions[(x, y)] = token

    graph: Graph = {}
    for (x, y), chars in positions.items():
        for char in chars:
            graph[char] = [positions.get(coord) for coord in adjacency(x, y)]
    return graph


def average_degree(graph: Graph) -> float:
    """Average number of real neighbours per key (``g`` has 6 on qwerty, ``\\`` has 1)."""
    total = sum(len([key for key in neighbours if key is not None]) for neighbours in graph.values())
    return total / len(graph)


GRAPHS: dict[str, Graph] = {
    "qwerty": build_graph(QWERTY, slanted=True),
    "dvorak": build_graph(DVORAK, slanted=True),
    "keypad": build_graph(KEYPAD, slanted=False),
    "mac_keypad": build_graph(MAC_KEYPAD, slanted=False),
}

KEYBOARD_GRAPHS = frozenset({"qwerty", "dvorak"})

KEYBOARD_STARTING_POSITIONS = len(GRAPHS["qwerty"])
KEYBOARD_AVERAGE_DEGREE = average_degree(GRAPHS["qwerty"])
# mac keypad differs slightly from the keypad; close enough to share constants
KEYPAD_STARTING_POSITIONS = len(GRAPHS["keypad"])
KEYPAD_AVERAGE_DEGREE = average_degree(GRAPHS["keypad"])

logger.debug("Built %d keyboard adjacency graphs", len(GRAPHS))
