"""
solitaire_cipher — Solitaire (Pontifex) keystream generator
===========================================================
Bruce Schneier's hand cipher: a 54-card deck, four shuffle steps per
round, one keystream letter per round.

Modules:
    cards      Deck model: ranks 1-52, jokers A/B, count/letter mappings
    keystream  KeystreamEngine and the four step functions
    text       TextChunker (5-letter groups), NumericCodec (A=1..Z=26)
    snapshot   DeckSnapshot: save / verify / replay deck state

Combining keystream with plaintext (mod 26 addition) and keying a deck
from a passphrase are left to the caller.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .cards     import (Joker, JOKER_A, JOKER_B, InvalidDeckError,
                        InvalidJokerError, card_count, card_letter,
                        unkeyed_deck, validate_deck, is_valid_deck)
from .keystream import KeystreamEngine
from .text      import TextChunker, NumericCodec
from .snapshot  import DeckSnapshot

__all__ = [
    "Joker",
    "JOKER_A",
    "JOKER_B",
    "InvalidDeckError",
    "InvalidJokerError",
    "card_count",
    "card_letter",
    "unkeyed_deck",
    "validate_deck",
    "is_valid_deck",
    "KeystreamEngine",
    "TextChunker",
    "NumericCodec",
    "DeckSnapshot",
]
