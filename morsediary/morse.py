"""Conversion between plain text and International Morse code."""

_TEXT_TO_MORSE: dict[str, str] = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".",
    "F": "..-.", "G": "--.", "H": "....", "I": "..", "J": ".---",
    "K": "-.-", "L": ".-..", "M": "--", "N": "-.", "O": "---",
    "P": ".--.", "Q": "--.-", "R": ".-.", "S": "...", "T": "-",
    "U": "..-", "V": "...-", "W": ".--", "X": "-..-", "Y": "-.--",
    "Z": "--..",
    "0": "-----", "1": ".----", "2": "..---", "3": "...--",
    "4": "....-", "5": ".....", "6": "-....", "7": "--...",
    "8": "---..", "9": "----.",
    " ": "/",
}

_MORSE_TO_TEXT: dict[str, str] = {code: char for char, code in _TEXT_TO_MORSE.items()}


def text_to_morse(text: str) -> str:
    """Encode text as Morse code.

    Each known character becomes its code followed by a single space; a space
    becomes ``/``. Letters are case-insensitive and unknown characters are
    dropped.
    """
    return "".join(
        f"{_TEXT_TO_MORSE[char.upper()]} "
        for char in text
        if char.upper() in _TEXT_TO_MORSE
    )


def morse_to_text(morse: str) -> str:
    """Decode whitespace-separated Morse tokens, skipping unknown ones."""
    return "".join(
        _MORSE_TO_TEXT[token] for token in morse.split() if token in _MORSE_TO_TEXT
    )