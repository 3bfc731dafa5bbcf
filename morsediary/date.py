"""Calendar dates in the dd.mm.yyyy diary format."""

import datetime
from dataclasses import dataclass

from morsediary.utils import is_valid_date


@dataclass(frozen=True)
class Date:
    """A day, month and year; defaults to 01.01.1970."""

    day: int = 1
    month: int = 1
    year: int = 1970

    @classmethod
    def from_string(cls, text: str) -> "Date":
        """Parse and validate a date written as dd.mm.yyyy."""
        if not is_valid_date(text):
            raise ValueError("Invalid date format. Use dd.mm.yyyy")
        day, month, year = (int(part) for part in text.split("."))
        if not 1 <= day <= 31 or not 1 <= month <= 12 or year < 1900:
            raise ValueError("Invalid date values.")
        return cls(day, month, year)

    @classmethod
    def today(cls) -> "Date":
        """Return the current local date."""
        now = datetime.date.today()
        return cls(now.day, now.month, now.year)

    def __str__(self) -> str:
        return f"{self.day:02d}.{self.month:02d}.{self.year}"