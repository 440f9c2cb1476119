"""Calendar dates that can be compared and moved forward by days, and a summation helper."""

from __future__ import annotations

import re
from dataclasses import dataclass

_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DATE_TEXT = re.compile(r"\s*(\d+)\s*(?:-|\s)\s*(\d+)\s*(?:-|\s)\s*(\d+)\s*")


def _is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


@dataclass(frozen=True, order=True)
class Date:
    """A day of the Gregorian calendar; dates order chronologically."""

    year: int = 1
    month: int = 1
    day: int = 1

    def __post_init__(self) -> None:
        if not 1 <= self.day <= Date.days_in_month(self.year, self.month):
            raise ValueError(
                f"day {self.day} is out of range for {self.year}-{self.month}"
            )

    @staticmethod
    def days_in_month(year: int, month: int) -> int:
        """Number of days in the given month, counting 29 for a leap February."""
        if not 1 <= month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {month}")
        if month == 2 and _is_leap(year):
            return 29
        return _DAYS_IN_MONTH[month]

    def __add__(self, days: int) -> Date:
        """The date ``days`` days later."""
        if not isinstance(days, int):
            return NotImplemented
        if days < 0:
            raise ValueError("cannot add a negative number of days")
        year, month, day = self.year, self.month, self.day + days
        while day > (length := Date.days_in_month(year, month)):
            day -= length
            month += 1
            if month == 13:
                year += 1
                month = 1
        return Date(year, month, day)

    def __iadd__(self, days: int) -> Date:
        return self + days

    def __str__(self) -> str:
        return f"{self.year}-{self.month}-{self.day}"

    @classmethod
    def parse(cls, text: str) -> Date:
        """Read ``year month day`` separated by whitespace or by '-'."""
        match = _DATE_TEXT.fullmatch(text)
        if match is None:
            raise ValueError(f"cannot parse a date from {text!r}")
        year, month, day = (int(part) for part in match.groups())
        return cls(year, month, day)


def sum_to(n: int) -> int:
    """The sum 1 + 2 + ... + n."""
    if n < 0:
        raise ValueError("n must not be negative")
    return sum(range(1, n + 1))