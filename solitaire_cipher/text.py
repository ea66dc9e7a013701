"""
Text adapters
=============
The boundary between free text and the keystream.

TextChunker turns a message into the classic five-letter groups:
uppercase, letters only, last group padded with X.

    "Code in Ruby, live longer!"  ->  "CODEI NRUBY LIVEL ONGER"

NumericCodec maps letters to 1-26 (A=1 ... Z=26), which is what the
combination step adds mod 26. That step is left to the caller.
"""

import re
from typing import List

from .cards import ALPHABET


class TextChunker:
    """Normalize text into fixed-width, X-padded letter groups."""

    GROUP_SIZE = 5
    PAD        = "X"

    _NON_LETTERS = re.compile(r"[^A-Z]")

    @classmethod
    def groups(cls, text: str) -> List[str]:
        letters = cls._NON_LETTERS.sub("", text.upper())
        size = cls.GROUP_SIZE
        return [letters[i:i + size].ljust(size, cls.PAD)
                for i in range(0, len(letters), size)]

    @classmethod
    def chunk(cls, text: str) -> str:
        """Groups joined by single spaces. Empty input gives ""."""
        return " ".join(cls.groups(text))


class NumericCodec:
    """Letter <-> 1-based alphabet position. Encode direction only."""

    SEPARATOR = " "

    @staticmethod
    def encode(letter: str) -> int:
        if (not isinstance(letter, str) or len(letter) != 1
                or letter not in ALPHABET + ALPHABET.lower()):
            raise ValueError(f"Not a letter A-Z: {letter!r}")
        return ALPHABET.index(letter.upper()) + 1

    @classmethod
    def encode_all(cls, text: str) -> List[int]:
        """Encode every character of chunked text, skipping group separators."""
        return [cls.encode(ch) for ch in text if ch != cls.SEPARATOR]
