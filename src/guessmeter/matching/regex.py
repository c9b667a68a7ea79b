"""Fixed-pattern matcher."""
from __future__ import annotations

import re
from typing import Mapping, Pattern

from guessmeter.match import Match, RegexPayload

REGEXEN: Mapping[str, Pattern[str]] = {
    "recent_year": re.compile(r"19\d\d|20[0-4]\d", re.ASCII),
}


def regex_match(password: str, regexen: Mapping[str, Pattern[str]] = REGEXEN) -> list[Match]:
    matches: list[Match] = []
    for regex_name, regex in regexen.items():
        for found in regex.finditer(password):
            matches.append(
                Match(
                    pattern="regex",
                    begin=found.start(),
                    end=found.end() - 1,
                    token=found.group(0),
                    password=password,
                    payload=RegexPayload(regex_name=regex_name),
                )
            )
    return sorted(matches, key=Match.sort_key)
