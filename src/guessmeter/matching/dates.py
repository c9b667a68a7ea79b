"""Date matcher.

A date is any 3-tuple of integers that starts or ends with a 2- or 4-digit
year, written with either no separator ("1191", "11111991") or the same
separator twice ("1.1.91"), possibly zero-padded, with a month between 1 and
12 and a day between 1 and 31. Leap years and month lengths are not checked.

Every substring of plausible length is tried against anchored regexes, the
integers are mapped onto day/month/year, and finally dates that lie strictly
inside another date match are dropped to reduce noise ("2015_06_04" would
otherwise also yield "15_06_04", "5_06_04" and so on).
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from guessmeter.config import DATE_MAX_YEAR, DATE_MIN_YEAR, REFERENCE_YEAR
from guessmeter.match import DatePayload, Match

MAYBE_DATE_NO_SEPARATOR = re.compile(r"^\d{4,8}$", re.ASCII)
MAYBE_DATE_WITH_SEPARATOR = re.compile(
    r"""
    ^
    (\d{1,4})       # day, month, year
    ([\s/\\_.-])    # separator
    (\d{1,2})       # day, month
    \2              # same separator
    (\d{1,4})       # day, month, year
    $
    """,
    re.VERBOSE | re.ASCII,
)

# token length -> candidate split points (k, l) giving token[:k], token[k:l], token[l:]
DATE_SPLITS: dict[int, tuple[tuple[int, int], ...]] = {
    4: ((1, 2), (2, 3)),  # 1 1 91, 91 1 1
    5: ((1, 3), (2, 3)),  # 1 11 91, 11 1 91
    6: ((1, 2), (2, 4), (4, 5)),  # 1 1 1991, 11 11 91, 1991 1 1
    7: ((1, 3), (2, 3), (4, 5), (4, 6)),  # 1 11 1991, 11 1 1991, 1991 1 11, 1991 11 1
    8: ((2, 4), (4, 6)),  # 11 11 1991, 1991 11 11
}


@dataclass(frozen=True)
class DayMonth:
    day: int
    month: int


@dataclass(frozen=True)
class DayMonthYear:
    day: int
    month: int
    year: int


def map_ints_to_dm(ints: tuple[int, int]) -> DayMonth | None:
    for day, month in (ints, ints[::-1]):
        if 1 <= day <= 31 and 1 <= month <= 12:
            return DayMonth(day=day, month=month)
    return None


def two_to_four_digit_year(year: int) -> int:
    if year > 99:
        return year
    if year > 50:
        return year + 1900
    return year + 2000


def map_ints_to_dmy(ints: tuple[int, int, int]) -> DayMonthYear | None:
    """Interpret three integers as a date, or return ``None``.

    Rejected outright: a middle value over 31 or not positive (years never sit
    in the middle), any value over the max year, any 3-digit value, two values
    over 31, two values not positive, or all three over 12.
    """
    if ints[1] > 31 or ints[1] <= 0:
        return None
    over_12 = over_31 = under_1 = 0
    for value in ints:
        if 99 < value < DATE_MIN_YEAR or value > DATE_MAX_YEAR:
            return None
        if value > 31:
            over_31 += 1
        if value > 12:
            over_12 += 1
        if value <= 0:
            under_1 += 1
    if over_31 >= 2 or over_12 == 3 or under_1 >= 2:
        return None

    year_splits = (
        (ints[2], (ints[0], ints[1])),  # year last
        (ints[0], (ints[1], ints[2])),  # year first
    )
    for year, rest in year_splits:
        if DATE_MIN_YEAR <= year <= DATE_MAX_YEAR:
            dm = map_ints_to_dm(rest)
            if dm is None:
                # a four-digit year whose remainder is no day/month: not a date
                return None
            return DayMonthYear(day=dm.day, month=dm.month, year=year)

    # no four-digit year: two-digit years are the most flexible part
    for year, rest in year_splits:
        dm = map_ints_to_dm(rest)
        if dm is not None:
            return DayMonthYear(day=dm.day, month=dm.month, year=two_to_four_digit_year(year))
    return None


def _date_match(password: str, i: int, j: int, separator: str, dmy: DayMonthYear) -> Match:
    return Match(
        pattern="date",
        begin=i,
        end=j,
        token=password[i : j + 1],
        password=password,
        payload=DatePayload(separator=separator, year=dmy.year, month=dmy.month, day=dmy.day),
    )


def date_match(password: str, reference_year: int = REFERENCE_YEAR) -> list[Match]:
    matches: list[Match] = []
    length = len(password)

    # without separators: length 4 "1191" up to 8 "11111991"
    for i in range(length - 3):
        for j in range(i + 3, i + 8):
            if j >= length:
                break
            token = password[i : j + 1]
            if not MAYBE_DATE_NO_SEPARATOR.match(token):
                continue
            candidates = []
            for k, l in DATE_SPLITS[len(token)]:
                dmy = map_ints_to_dmy((int(token[:k]), int(token[k:l]), int(token[l:])))
                if dmy is not None:
                    candidates.append(dmy)
            if not candidates:
                continue
            # prefer the reading whose year is closest to the present:
            # "111504" is 11-15-04 rather than 1-1-1504
            best = min(candidates, key=lambda candidate: abs(candidate.year - reference_year))
            matches.append(_date_match(password, i, j, "", best))

    # with separators: length 6 "1/1/91" up to 10 "11/11/1991"
    for i in range(length - 5):
        for j in range(i + 5, i + 10):
            if j >= length:
                break
            found = MAYBE_DATE_WITH_SEPARATOR.match(password[i : j + 1])
            if found is None:
                continue
            dmy = map_ints_to_dmy((int(found.group(1)), int(found.group(3)), int(found.group(4))))
            if dmy is None:
                continue
            matches.append(_date_match(password, i, j, found.group(2), dmy))

    kept = [
        match
        for match in matches
        if not any(
            other is not match and other.begin <= match.begin and other.end >= match.end
            for other in matches
        )
    ]
    return sorted(kept, key=Match.sort_key)
