"""Diary entries and their pipe-separated line format."""

from dataclasses import dataclass

from morsediary.date import Date
from morsediary.morse import text_to_morse
from morsediary.utils import is_valid_time


@dataclass(frozen=True)
class Entry:
    """A diary entry: a date, a time of day (hh:mm) and its text."""

    date: Date
    time: str
    text: str

    def __post_init__(self) -> None:
        if not is_valid_time(self.time):
            raise ValueError("Invalid time format. Use hh:mm")

    def to_line(self) -> str:
        """Serialise as ``date|time|morse|text``."""
        return f"{self.date}|{self.time}|{self.morse}|{self.text}"

    @classmethod
    def from_line(cls, line: str) -> "Entry":
        """Parse a line written by :meth:`to_line`; the Morse field is ignored."""
        fields = line.split("|", 3)
        fields += [""] * (4 - len(fields))
        date_str, time_str, _morse, text = fields
        return cls(Date.from_string(date_str), time_str, text)

    @property
    def morse(self) -> str:
        """The entry text encoded as Morse code."""
        return text_to_morse(self.text)

    def decode(self) -> str:
        """Return the plain text of the entry."""
        return self.text