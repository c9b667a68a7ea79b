"""Match records shared by every matcher and the scorer.

A :class:`Match` is a claim that ``password[begin:end + 1]`` is explained by
one pattern kind. The common header (``pattern``, ``begin``, ``end``,
``token``) is the same for all kinds; everything kind-specific lives in the
``payload`` dataclass, so the scorer never needs to know which kind it holds.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, Mapping, Union

PatternKind = Literal[
    "dictionary",
    "spatial",
    "sequence",
    "repeat",
    "date",
    "regex",
    "bruteforce",
]


@dataclass(frozen=True)
class DictionaryPayload:
    matched_word: str
    rank: int
    dictionary_name: str
    reversed: bool = False
    l33t: bool = False
    # substituted character -> canonical character, e.g. {"4": "a"}
    substitutions: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def substitution_display(self) -> str:
        return ", ".join(f"{subbed} -> {plain}" for subbed, plain in self.substitutions.items())


@dataclass(frozen=True)
class SpatialPayload:
    graph_name: str
    turns: int
    shifted_count: int


@dataclass(frozen=True)
class SequencePayload:
    sequence_name: str
    sequence_space: int
    ascending: bool

    @property
    def delta(self) -> int:
        return 1 if self.ascending else -1


@dataclass(frozen=True)
class RepeatPayload:
    base_token: str
    base_guesses: float
    base_matches: tuple[Match, ...]
    repeat_count: float


@dataclass(frozen=True)
class DatePayload:
    separator: str
    year: int
    month: int
    day: int


@dataclass(frozen=True)
class RegexPayload:
    regex_name: str


@dataclass(frozen=True)
class BruteforcePayload:
    pass


Payload = Union[
    DictionaryPayload,
    SpatialPayload,
    SequencePayload,
    RepeatPayload,
    DatePayload,
    RegexPayload,
    BruteforcePayload,
]


@dataclass(eq=False)
class Match:
    pattern: PatternKind
    begin: int
    end: int
    token: str
    # The string this match was found in; the guess floor depends on it.
    password: str = field(repr=False)
    payload: Payload
    _guesses: float | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not 0 <= self.begin <= self.end < len(self.password):
            raise ValueError(
                f"Match span [{self.begin}, {self.end}] outside password of length {len(self.password)}"
            )
        if len(self.token) != self.end - self.begin + 1:
            raise ValueError("Match token length does not agree with its span")

    def guesses(self) -> float:
        """Estimated guesses for this match, computed once on first use."""
        if self._guesses is None:
            from guessmeter.scoring.estimators import estimate_guesses

            self._guesses = estimate_guesses(self)
        return self._guesses

    def guesses_log10(self) -> float:
        return math.log10(self.guesses())

    def sort_key(self) -> tuple[int, int]:
        return (self.begin, self.end)
