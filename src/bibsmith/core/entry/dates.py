"""Month and publication-date value types.

`Month`
: Parses the many spellings found in bibliographies (``mar``, ``#mar#``,
  ``March``, ``3``, ``03``) and renders the canonical ``#mar#`` form used when
  writing the ``month`` field.

`Date`
: A year with optional month and day, parsed either from the three BibTeX
  components or from a free-text ``date`` value (ISO 8601, ``d.M.yyyy``,
  ``March 5, 2020`` and a few more). ``normalized`` renders ``YYYY``,
  ``YYYY-MM`` or ``YYYY-MM-DD``; ranges such as ``2015/2016`` keep their end.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from enum import Enum
import re


class Month(Enum):
    """Calendar months with their bibliography spellings."""

    JANUARY = (1, "jan", "January")
    FEBRUARY = (2, "feb", "February")
    MARCH = (3, "mar", "March")
    APRIL = (4, "apr", "April")
    MAY = (5, "may", "May")
    JUNE = (6, "jun", "June")
    JULY = (7, "jul", "July")
    AUGUST = (8, "aug", "August")
    SEPTEMBER = (9, "sep", "September")
    OCTOBER = (10, "oct", "October")
    NOVEMBER = (11, "nov", "November")
    DECEMBER = (12, "dec", "December")

    @property
    def number(self) -> int:
        return self.value[0]

    @property
    def short_name(self) -> str:
        return self.value[1]

    @property
    def full_name(self) -> str:
        return self.value[2]

    @property
    def two_digit_number(self) -> str:
        return f"{self.number:02d}"

    @property
    def macro_format(self) -> str:
        """Canonical field value, a BibTeX month macro wrapped in ``#``."""
        return f"#{self.short_name}#"

    @classmethod
    def from_number(cls, number: int) -> Month | None:
        for month in cls:
            if month.number == number:
                return month
        return None

    @classmethod
    def from_short_name(cls, name: str) -> Month | None:
        lowered = name.lower()
        for month in cls:
            if month.short_name == lowered:
                return month
        return None

    @classmethod
    def parse(cls, value: str | None) -> Month | None:
        """Parse a month from free text; ``None`` when it is not recognised."""
        if value is None or not value.strip():
            return None
        candidate = value.replace("#", "").strip().rstrip(".")
        month = cls.from_short_name(candidate[:3])
        if month is not None:
            return month
        if candidate.isdigit():
            return cls.from_number(int(candidate))
        return None


_ISO_RE = re.compile(
    r"^(?P<year>\d{4})(?:-(?P<month>\d{1,2})(?:-(?P<day>\d{1,2}))?)?(?:T[\d:.+\-Z]*)?$"
)
_DAY_MONTH_YEAR_DASH_RE = re.compile(r"^(?P<day>\d{1,2})-(?P<month>\d{1,2})-(?P<year>\d{4})$")
_DAY_MONTH_YEAR_DOT_RE = re.compile(r"^(?P<day>\d{1,2})\.(?P<month>\d{1,2})\.(?P<year>\d{4})$")
_YEAR_MONTH_DAY_DOT_RE = re.compile(
    r"^(?P<year>\d{4})\.(?P<month>\d{1,2})(?:\.(?P<day>\d{1,2}))?$"
)
_MONTH_SLASH_YEAR_RE = re.compile(r"^(?P<month>\d{1,2})/(?P<year>\d{4}|\d{2})$")
_NAMED_MONTH_DAY_YEAR_RE = re.compile(
    r"^(?P<month>[A-Za-z]+)\.?\s+(?P<day>\d{1,2}),?\s+(?P<year>\d{4})$"
)
_DAY_NAMED_MONTH_YEAR_RE = re.compile(
    r"^(?P<day>\d{1,2})\.?\s+(?P<month>[A-Za-z]+)\.?\s+(?P<year>\d{4})$"
)
_NAMED_MONTH_YEAR_RE = re.compile(r"^(?P<month>[A-Za-z]+)\.?,?\s+(?P<year>\d{4})$")

_PATTERNS = (
    _ISO_RE,
    _DAY_MONTH_YEAR_DASH_RE,
    _DAY_MONTH_YEAR_DOT_RE,
    _YEAR_MONTH_DAY_DOT_RE,
    _MONTH_SLASH_YEAR_RE,
    _NAMED_MONTH_DAY_YEAR_RE,
    _DAY_NAMED_MONTH_YEAR_RE,
    _NAMED_MONTH_YEAR_RE,
)


def _to_int(value: str | None) -> int | None:
    if value is None:
        return None
    candidate = value.strip()
    if not candidate.isdigit():
        return None
    return int(candidate)


@dataclass(frozen=True, slots=True)
class Date:
    """A publication date of year, month, or day precision."""

    year: int
    month: Month | None = None
    day: int | None = None
    end: Date | None = None

    @classmethod
    def from_parts(
        cls,
        year: str | None,
        month: str | None = None,
        day: str | None = None,
    ) -> Date | None:
        """Combine BibTeX ``year``/``month``/``day`` values; the year is mandatory."""
        year_value = _to_int(year)
        if year_value is None:
            return None
        parsed_month = Month.parse(month)
        if parsed_month is None:
            return cls(year_value)
        day_value = _to_int(day)
        return cls._build(year_value, parsed_month, day_value) or cls(year_value, parsed_month)

    @classmethod
    def parse(cls, text: str | None) -> Date | None:
        """Parse free-text dates, including ``start/end`` ranges."""
        if text is None:
            return None
        candidate = text.strip()
        if not candidate:
            return None

        if "/" in candidate and not _MONTH_SLASH_YEAR_RE.match(candidate):
            start_text, _, end_text = candidate.partition("/")
            start = cls._parse_single(start_text.strip())
            end = cls._parse_single(end_text.strip())
            if start is None or end is None:
                return None
            return cls(start.year, start.month, start.day, end)

        return cls._parse_single(candidate)

    @classmethod
    def _parse_single(cls, text: str) -> Date | None:
        for pattern in _PATTERNS:
            match = pattern.match(text)
            if match is None:
                continue
            groups = match.groupdict()
            year = int(groups["year"])
            if len(groups["year"]) == 2:
                year += 2000
            raw_month = groups.get("month")
            if raw_month is None:
                return cls(year)
            month = Month.parse(raw_month)
            if month is None:
                return None
            return cls._build(year, month, _to_int(groups.get("day")))
        return None

    @classmethod
    def _build(cls, year: int, month: Month, day: int | None) -> Date | None:
        if day is None:
            return cls(year, month)
        if not 1 <= day <= calendar.monthrange(year, month.number)[1]:
            return None
        return cls(year, month, day)

    @property
    def normalized(self) -> str:
        text = f"{self.year:04d}"
        if self.month is not None:
            text += f"-{self.month.two_digit_number}"
            if self.day is not None:
                text += f"-{self.day:02d}"
        if self.end is not None:
            text += f"/{self.end.normalized}"
        return text

    def __str__(self) -> str:
        return self.normalized


__all__ = ["Date", "Month"]
