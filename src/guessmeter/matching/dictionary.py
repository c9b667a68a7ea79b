"""Dictionary, reversed-dictionary and leetspeak matchers."""
from __future__ import annotations

import itertools
from types import MappingProxyType
from typing import Iterable, Mapping, cast

from guessmeter.dictionaries import RankedDictionaries
from guessmeter.match import DictionaryPayload, Match

# canonical character -> characters commonly substituted for it
L33T_TABLE: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "a": ("4", "@"),
        "b": ("8",),
        "c": ("(", "{", "[", "<"),
        "e": ("3",),
        "g": ("6", "9"),
        "i": ("1", "!", "|"),
        "l": ("1", "|", "7"),
        "o": ("0",),
        "s": ("$", "5"),
        "t": ("+", "7"),
        "x": ("%",),
        "z": ("2",),
    }
)


def dictionary_match(password: str, dictionaries: RankedDictionaries) -> list[Match]:
    """Every substring whose lower-cased form is a word in some dictionary."""
    matches: list[Match] = []
    length = len(password)
    for dictionary_name, ranked in dictionaries.items():
        for i in range(length):
            for j in range(i, length):
                word = password[i : j + 1].lower()
                rank = ranked.get(word)
                if rank is None:
                    continue
                matches.append(
                    Match(
                        pattern="dictionary",
                        begin=i,
                        end=j,
                        token=password[i : j + 1],
                        password=password,
                        payload=DictionaryPayload(
                            matched_word=word,
                            rank=rank,
                            dictionary_name=dictionary_name,
                        ),
                    )
                )
    return sorted(matches, key=Match.sort_key)


def reverse_dictionary_match(password: str, dictionaries: RankedDictionaries) -> list[Match]:
    """Dictionary words spelled backwards; tokens keep their original order."""
    length = len(password)
    matches: list[Match] = []
    for found in dictionary_match(password[::-1], dictionaries):
        begin = length - 1 - found.end
        end = length - 1 - found.begin
        payload = cast(DictionaryPayload, found.payload)
        matches.append(
            Match(
                pattern="dictionary",
                begin=begin,
                end=end,
                token=password[begin : end + 1],
                password=password,
                payload=DictionaryPayload(
                    matched_word=payload.matched_word,
                    rank=payload.rank,
                    dictionary_name=payload.dictionary_name,
                    reversed=True,
                ),
            )
        )
    return sorted(matches, key=Match.sort_key)


def reverse_l33t_table(table: Mapping[str, Iterable[str]] = L33T_TABLE) -> dict[str, list[str]]:
    """Invert the table: substituted character -> canonical characters it may stand for."""
    reverse: dict[str, list[str]] = {}
    for plain, substitutes in table.items():
        for substitute in substitutes:
            reverse.setdefault(substitute, []).append(plain)
    return reverse


def relevant_l33t_subtable(
    password: str, table: Mapping[str, Iterable[str]] = L33T_TABLE
) -> dict[str, list[str]]:
    """Restrict the reversed table to substituted characters present in the password."""
    present = set(password)
    return {subbed: plains for subbed, plains in reverse_l33t_table(table).items() if subbed in present}


def enumerate_l33t_subs(subtable: Mapping[str, Iterable[str]]) -> list[dict[str, str]]:
    """Every assignment of one canonical character to each substituted character.

    The count is the product of the choices per character, so it is bounded by
    the handful of ambiguous substitutes (``1``, ``|``, ``7``) in the table, not
    by the password length.
    """
    subbed_chars = sorted(subtable)
    if not subbed_chars:
        return []
    choices = [tuple(subtable[subbed]) for subbed in subbed_chars]
    return [dict(zip(subbed_chars, assignment)) for assignment in itertools.product(*choices)]


def translate(text: str, char_map: Mapping[str, str]) -> str:
    return "".join(char_map.get(char, char) for char in text)


def l33t_match(
    password: str,
    dictionaries: RankedDictionaries,
    table: Mapping[str, Iterable[str]] = L33T_TABLE,
    *,
    exclude: Iterable[tuple[int, int, str]] = (),
) -> list[Match]:
    """Dictionary words written with common character substitutions.

    Only matches that used at least one real substitution are kept. A match is
    dropped when ``(begin, end, dictionary_name)`` is already in ``exclude`` or
    was produced by an earlier substitution assignment.
    """
    seen = set(exclude)
    matches: list[Match] = []
    for sub in enumerate_l33t_subs(relevant_l33t_subtable(password, table)):
        subbed_password = translate(password, sub)
        if subbed_password == password:
            continue
        for found in dictionary_match(subbed_password, dictionaries):
            token = password[found.begin : found.end + 1]
            payload = cast(DictionaryPayload, found.payload)
            if token.lower() == payload.matched_word:
                # no substitution inside this span
                continue
            if len(token) == 1:
                continue
            key = (found.begin, found.end, payload.dictionary_name)
            if key in seen:
                continue
            seen.add(key)
            used = {subbed: plain for subbed, plain in sub.items() if subbed in token}
            matches.append(
                Match(
                    pattern="dictionary",
                    begin=found.begin,
                    end=found.end,
                    token=token,
                    password=password,
                    payload=DictionaryPayload(
                        matched_word=payload.matched_word,
                        rank=payload.rank,
                        dictionary_name=payload.dictionary_name,
                        l33t=True,
                        substitutions=MappingProxyType(used),
                    ),
                )
            )
    return sorted(matches, key=Match.sort_key)
