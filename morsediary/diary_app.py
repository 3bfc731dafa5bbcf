"""Command-line and menu-driven front end for writing and reading the diary."""

import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from morsediary.date import Date
from morsediary.entry import Entry
from morsediary.utils import clear_screen, is_valid_date, is_valid_time

DIARY_FILE = "diary.txt"
DECODED_FILE = "diary_decoded.txt"
LOG_FILE = "logs.txt"

_RESET = "\033[0m"
_RED = "\033[1;31m"
_GREEN = "\033[1;32m"
_YELLOW = "\033[1;33m"
_BLUE = "\033[1;34m"
_MAGENTA = "\033[1;35m"
_CYAN = "\033[1;36m"

PathLike = Union[str, Path]


def _pause(prompt: str) -> None:
    try:
        input(prompt)
    except EOFError:
        pass


def save_entry(
    entry: Entry,
    date_str: str,
    time_str: str,
    text: str,
    directory: PathLike = ".",
) -> None:
    """Append an entry to the Morse diary, the decoded diary and the log."""
    base = Path(directory)
    with open(base / DIARY_FILE, "a", encoding="utf-8") as out:
        out.write(f"{entry.date} {entry.time} | {entry.morse}\n")
    with open(base / DECODED_FILE, "a", encoding="utf-8") as out:
        out.write(f"{entry.date} {entry.time} | {entry.text}\n")
    with open(base / LOG_FILE, "a", encoding="utf-8") as log:
        log.write(f"{date_str}|{time_str}|{text}\n")


def read_entries(decoded: bool = False, directory: PathLike = ".") -> list[str]:
    """Return the lines of the Morse or decoded diary; empty if it does not exist."""
    path = Path(directory) / (DECODED_FILE if decoded else DIARY_FILE)
    try:
        with open(path, encoding="utf-8") as source:
            return [line.rstrip("\n") for line in source]
    except FileNotFoundError:
        return []


def _view_entries(decoded: bool, directory: PathLike) -> None:
    clear_screen()
    for line in read_entries(decoded, directory):
        print(line)
    _pause("\nPress Enter to continue...")


def _how_to_use() -> None:
    clear_screen()
    print(f"\n{_BLUE}Usage examples:{_RESET}")
    print('diary add_entry <dd.mm.yyyy> <hh:mm> "Your text"')
    print("diary view_entries [--decoded]\n")
    _pause("Press Enter to return...")


def _add_entry_interactive(directory: PathLike) -> None:
    clear_screen()
    prompt = (
        f"{_BLUE}Enter date and time{_RESET} "
        f"(format {_YELLOW}dd.mm.yyyy hh:mm{_RESET}): "
    )
    try:
        while True:
            date_str, _, time_str = input(prompt).partition(" ")
            if is_valid_date(date_str) and is_valid_time(time_str):
                try:
                    entry_date = Date.from_string(date_str)
                    break
                except ValueError:
                    pass
            prompt = f"{_RED}Invalid date or time. Try again:{_RESET} "
        text = input(f"{_BLUE}Enter diary entry:{_RESET} ")
    except EOFError:
        return

    entry = Entry(entry_date, time_str, text)
    save_entry(entry, date_str, time_str, text, directory)
    print(f"{_GREEN}Saved successfully!{_RESET}")
    _pause("Press Enter to continue...")


def _print_menu() -> None:
    clear_screen()
    print(f"{_CYAN}=== Welcome to Morse Diary ==={_RESET}")
    print(f"{_MAGENTA}1.{_RESET} \033[38;5;225mHow to use?{_RESET}")
    print(f"{_MAGENTA}2.{_RESET} \033[38;5;222mView entries (Morse){_RESET}")
    print(f"{_MAGENTA}3.{_RESET} \033[38;5;151mView entries (Decoded){_RESET}")
    print(f"{_MAGENTA}4.{_RESET} \033[38;5;159mAdd a new entry{_RESET}")
    print(f"{_MAGENTA}5.{_RESET} \033[38;5;245mExit{_RESET}")


def _run_menu(directory: PathLike) -> None:
    while True:
        _print_menu()
        try:
            choice = input("Choose an option: ").strip()
        except EOFError:
            print()
            return
        if choice == "1":
            _how_to_use()
        elif choice == "2":
            _view_entries(False, directory)
        elif choice == "3":
            _view_entries(True, directory)
        elif choice == "4":
            _add_entry_interactive(directory)
        elif choice == "5":
            clear_screen()
            print(f"{_CYAN}Goodbye!{_RESET}")
            return
        else:
            print(f"{_RED}Invalid option.{_RESET}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a diary command, or the interactive menu when none is given."""
    args = list(sys.argv[1:] if argv is None else argv)
    directory = Path(".")

    if not args:
        _run_menu(directory)
        return 0

    command = args[0]
    if command == "add_entry" and len(args) == 4:
        date_str, time_str, text = args[1:]
        if not is_valid_date(date_str) or not is_valid_time(time_str):
            print(f"{_RED}Invalid date/time format.{_RESET}", file=sys.stderr)
            return 1
        try:
            entry = Entry(Date.from_string(date_str), time_str, text)
        except ValueError as exc:
            print(f"{_RED}{exc}{_RESET}", file=sys.stderr)
            return 1
        save_entry(entry, date_str, time_str, text, directory)
        print(f"{_GREEN}Entry saved.{_RESET}")
    elif command == "view_entries":
        decoded = len(args) == 2 and args[1] == "--decoded"
        _view_entries(decoded, directory)
    else:
        print(f"{_RED}Invalid command.{_RESET}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())