"""Command-line tools for searching the log and exporting decoded entries."""

import re
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from morsediary.entry import Entry
from morsediary.utils import clear_screen

DIARY_FILE = "diary.txt"
LOG_FILE = "logs.txt"

_RESET = "\033[0m"
_RED = "\033[1;31m"
_GREEN = "\033[1;32m"
_YELLOW = "\033[1;33m"
_BLUE = "\033[1;34m"

_ENTRY_PATTERN = re.compile(
    r"Added entry on ([0-9]{2}\.[0-9]{2}\.[0-9]{4}) at ([0-9]{2}:[0-9]{2}): (.*)"
)

PathLike = Union[str, Path]


def search_word_in_logs(word: str, directory: PathLike = ".") -> list[tuple[str, str, str]]:
    """Print and return the ``(date, time, text)`` log entries whose text contains ``word``."""
    clear_screen()
    matches: list[tuple[str, str, str]] = []
    try:
        with open(Path(directory) / LOG_FILE, encoding="utf-8") as log:
            for line in log:
                match = _ENTRY_PATTERN.fullmatch(line.rstrip("\n"))
                if match and word in match.group(3):
                    date, time, text = match.groups()
                    matches.append((date, time, text))
                    print(f"{_BLUE}{date} {time}:{_RESET} {text}")
    except FileNotFoundError:
        pass

    if not matches:
        print(f'{_RED}No entries found with the word "{word}".{_RESET}')
    return matches


def export_decoded_entries(filename: PathLike, directory: PathLike = ".") -> int:
    """Write every diary entry as ``date time: text`` to ``filename``.

    Returns the number of entries written. Raises ValueError on a diary line
    that is not in the entry line format.
    """
    clear_screen()
    base = Path(directory)
    target = base / filename
    count = 0
    with open(target, "w", encoding="utf-8") as out:
        try:
            source = open(base / DIARY_FILE, encoding="utf-8")
        except FileNotFoundError:
            source = None
        if source is not None:
            with source:
                for line in source:
                    entry = Entry.from_line(line.rstrip("\n"))
                    out.write(f"{entry.date} {entry.time}: {entry.decode()}\n")
                    count += 1
    print(f"{_GREEN}Entries exported to {_YELLOW}{filename}{_RESET}")
    return count


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run ``search_word <word>`` or ``export_entries <filename>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(f"{_RED}Usage:{_RESET}", file=sys.stderr)
        print("diary-tools search_word <word>", file=sys.stderr)
        print("diary-tools export_entries <filename>", file=sys.stderr)
        return 1

    command, argument = args[0], args[1]
    if command == "search_word":
        search_word_in_logs(argument)
    elif command == "export_entries":
        try:
            export_decoded_entries(argument)
        except ValueError as exc:
            print(f"{_RED}{exc}{_RESET}", file=sys.stderr)
            return 1
    else:
        print(f"{_RED}Unknown command.{_RESET}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())