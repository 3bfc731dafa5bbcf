# morsediary

morsediary is a small terminal diary. Each entry has a date (`dd.mm.yyyy`), a time (`hh:mm`) and some text. Entries are kept in three files in the current directory:

- `diary.txt`: one line per entry, `dd.mm.yyyy hh:mm | <morse>`
- `diary_decoded.txt`: one line per entry, `dd.mm.yyyy hh:mm | <text>`
- `logs.txt`: one line per entry, `dd.mm.yyyy|hh:mm|<text>`

## Installation

```
pip install .
```

This installs two commands, `diary` and `diary-tools`. Both can also be run as `python -m morsediary.diary_app` and `python -m morsediary.tools_app`.

## The diary

Run with no arguments, it opens an interactive menu:

```
diary
```

The menu offers:

1. How to use?
2. View entries (Morse): prints `diary.txt`
3. View entries (Decoded): prints `diary_decoded.txt`
4. Add a new entry: asks for `dd.mm.yyyy hh:mm` on one line, repeating the question until both are valid, then for the text
5. Exit

The screen is cleared before each screen with the system's `clear` (or `cls` on Windows) command.

Commands can also be given directly:

```
diary add_entry 06.06.2025 14:30 "Learned the Morse alphabet"
diary view_entries
diary view_entries --decoded
```

`add_entry` exits with status 1 and an error message if the date or time is malformed, or if the date's values are out of range (day outside 1–31, month outside 1–12, year before 1900). An unknown command prints `Invalid command.` to standard error.

## Tools

```
diary-tools search_word <word>
diary-tools export_entries <filename>
```

- `search_word` reads `logs.txt` and prints every line of the form `Added entry on dd.mm.yyyy at hh:mm: <text>` whose text contains the word (case-sensitive). If there is none it says so.
- `export_entries` reads `diary.txt`, where each line must be in the `date|time|morse|text` format that `Entry.to_line()` produces, and writes `dd.mm.yyyy hh:mm: <text>` lines to the file you name. If `diary.txt` does not exist, an empty file is written. A line in any other format stops the export with an error and exit status 1.

## Using it as a library

```python
from morsediary.morse import text_to_morse, morse_to_text
from morsediary.date import Date
from morsediary.entry import Entry

text_to_morse("SOS")          # '... --- ... '
morse_to_text("... --- ...")  # 'SOS'

date = Date.from_string("06.06.2025")
str(date)                     # '06.06.2025'
Date.today()                  # the current local date

entry = Entry(date, "14:30", "hello")
entry.morse                   # '.... . .-.. .-.. --- '
entry.to_line()               # '06.06.2025|14:30|.... . .-.. .-.. --- |hello'
Entry.from_line(entry.to_line()) == entry  # True
```

- `morsediary.morse`: `text_to_morse` handles the letters A–Z (either case), the digits 0–9 and the space (written `/`); every code is followed by one space and any other character is dropped. `morse_to_text` decodes whitespace-separated codes and skips unknown ones.
- `morsediary.date.Date`: a frozen dataclass with `day`, `month` and `year` (default 01.01.1970). `from_string` raises `ValueError` on a malformed or out-of-range date.
- `morsediary.entry.Entry`: a frozen dataclass with `date`, `time` and `text`. A time not of the form `hh:mm` raises `ValueError`. `decode()` returns the text.
- `morsediary.utils`: `is_valid_date`, `is_valid_time` (format checks only) and `clear_screen`.
- `morsediary.diary_app`: `save_entry(entry, date_str, time_str, text, directory=".")` appends to the three diary files; `read_entries(decoded=False, directory=".")` returns the lines of `diary.txt` or `diary_decoded.txt`, or an empty list if the file is missing.
- `morsediary.tools_app`: `search_word_in_logs(word, directory=".")` returns the matching `(date, time, text)` tuples; `export_decoded_entries(filename, directory=".")` returns the number of entries written.

## What it does not do

The three files the diary writes are not in the formats the tools read. `diary-tools search_word` only finds `Added entry on ...` lines, which the diary never writes, and `diary-tools export_entries` fails on the `date time | morse` lines that `diary add_entry` writes to `diary.txt`. The tools work only on files in their own formats, such as lines produced by `Entry.to_line()`. There is no editing or deleting of entries, and dates are checked only for the ranges above, not against the calendar (31.02.2025 is accepted).

## Running the tests

```
pip install .[test]
pytest
```