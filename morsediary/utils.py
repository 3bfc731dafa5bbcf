"""Terminal and input-validation helpers."""

import re
import subprocess
import sys

_DATE_PATTERN = re.compile(r"[0-9]{2}\.[0-9]{2}\.[0-9]{4}")
_TIME_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}")


def clear_screen() -> None:
    """Clear the terminal using the platform's shell command."""
    command = "cls" if sys.platform == "win32" else "clear"
    try:
        subprocess.run(command, shell=True, check=False)
    except OSError:
        pass


def is_valid_date(date_str: str) -> bool:
    """Return whether the string has the form dd.mm.yyyy."""
    return _DATE_PATTERN.fullmatch(date_str) is not None


def is_valid_time(time_str: str) -> bool:
    """Return whether the string has the form hh:mm."""
    return _TIME_PATTERN.fullmatch(time_str) is not None