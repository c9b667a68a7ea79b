"""Ranked dictionaries built from the bundled frequency lists.

Each dictionary maps a lower-cased word to its rank, the 1-based position of
the word in a frequency-ordered list. The bundled lists are loaded once when
this module is imported; a missing or malformed data file is fatal and raises
:class:`~guessmeter.errors.BundledDataError` straight away.
"""
from __future__ import annotations

import json
import logging
from importlib import resources
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from guessmeter.errors import BundledDataError

logger = logging.getLogger(__name__)

FREQUENCY_LISTS_RESOURCE = "data/frequency_lists.json"
USER_INPUTS_DICTIONARY = "user_inputs"

RankedDictionary = Mapping[str, int]


def build_ranked_dict(ordered_list: Iterable[str]) -> dict[str, int]:
    """Rank words by first appearance, starting at 1."""
    ranked: dict[str, int] = {}
    for rank, word in enumerate(ordered_list, start=1):
        ranked.setdefault(word, rank)
    return ranked


class RankedDictionaries(Mapping[str, RankedDictionary]):
    """Read-only mapping of dictionary name -> ranked dictionary."""

    def __init__(self, dictionaries: Mapping[str, Mapping[str, int]]) -> None:
        self._dictionaries: Mapping[str, RankedDictionary] = MappingProxyType(
            {name: MappingProxyType(dict(ranked)) for name, ranked in dictionaries.items()}
        )

    @classmethod
    def from_frequency_lists(cls, frequency_lists: Mapping[str, Iterable[str]]) -> RankedDictionaries:
        return cls({name: build_ranked_dict(words) for name, words in frequency_lists.items()})

    def __getitem__(self, name: str) -> RankedDictionary:
        return self._dictionaries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._dictionaries)

    def __len__(self) -> int:
        return len(self._dictionaries)

    def with_user_inputs(self, user_inputs: Iterable[str]) -> RankedDictionaries:
        """Return a copy that also holds a dictionary of caller-supplied words.

        Inputs are expected to be lower-cased already; empty strings are skipped.
        """
        ranked = build_ranked_dict(word for word in user_inputs if word)
        merged = dict(self._dictionaries)
        merged[USER_INPUTS_DICTIONARY] = ranked
        return RankedDictionaries(merged)


def parse_frequency_lists(raw: str) -> dict[str, list[str]]:
    """Validate the bundled JSON document and return its word lists."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise BundledDataError(f"Frequency lists are not valid JSON: {exc}") from exc

    if not isinstance(data, dict) or not data:
        raise BundledDataError("Frequency lists must be a non-empty JSON object")

    lists: dict[str, list[str]] = {}
    for name, words in data.items():
        if not isinstance(words, list) or not all(isinstance(word, str) and word for word in words):
            raise BundledDataError(f"Frequency list {name!r} must be a list of non-empty strings")
        lists[name] = [word.lower() for word in words]
    return lists


def load_bundled_dictionaries() -> RankedDictionaries:
    try:
        raw = resources.files("guessmeter").joinpath(FREQUENCY_LISTS_RESOURCE).read_text(encoding="utf-8")
    except (FileNotFoundError, OSError) as exc:
        raise BundledDataError(f"Bundled frequency lists not found: {exc}") from exc

    dictionaries = RankedDictionaries.from_frequency_lists(parse_frequency_lists(raw))
    logger.debug(
        "Loaded %d ranked dictionaries (%d words)",
        len(dictionaries),
        sum(len(ranked) for ranked in dictionaries.values()),
    )
    return dictionaries


DEFAULT_DICTIONARIES = load_bundled_dictionaries()
