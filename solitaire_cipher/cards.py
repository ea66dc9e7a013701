"""
Cards — the Solitaire deck model
================================
A Solitaire deck holds 54 cards: the 52 ranks of an ordinary deck
(suits ignored, Ace of Clubs = 1 ... King of Spades = 52) plus two
distinguishable jokers, A and B.

Ranks are plain ints. Jokers are members of the `Joker` enum, so a
card is always either an int in [1, 52] or a Joker, never both.

Mappings:
  count value   rank -> rank,  either joker -> 53
  letter        rank v -> ALPHABET[(v - 1) % 26],  joker -> None
"""

import enum
from typing import Iterable, List, Optional, Union


DECK_SIZE         = 54
RANK_COUNT        = 52
JOKER_COUNT_VALUE = 53
ALPHABET          = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class InvalidDeckError(ValueError):
    """Sequence is not a 54-card Solitaire deck."""


class InvalidJokerError(ValueError):
    """Joker identity other than Joker.A / Joker.B."""


class Joker(enum.Enum):
    A = "A"
    B = "B"

    def __repr__(self):
        return f"Joker.{self.name}"


JOKER_A = Joker.A
JOKER_B = Joker.B

Card = Union[int, Joker]


def is_rank(card) -> bool:
    # bool is an int subclass; True must not pass for the Ace
    return (isinstance(card, int) and not isinstance(card, bool)
            and 1 <= card <= RANK_COUNT)


def card_count(card: Card) -> int:
    """Count value used by the count cut and the output step."""
    if isinstance(card, Joker):
        return JOKER_COUNT_VALUE
    if is_rank(card):
        return card
    raise InvalidDeckError(f"Not a Solitaire card: {card!r}")


def card_letter(card: Card) -> Optional[str]:
    """Output letter for a card, or None for either joker."""
    if isinstance(card, Joker):
        return None
    return ALPHABET[(card_count(card) - 1) % 26]


def unkeyed_deck() -> List[Card]:
    """Ranks in order followed by joker A then joker B."""
    return list(range(1, RANK_COUNT + 1)) + [Joker.A, Joker.B]


def validate_deck(cards: Iterable[Card]) -> List[Card]:
    """
    Check the deck invariant and return a fresh list copy.

    Raises InvalidDeckError naming the first defect found (wrong size,
    out-of-domain value or duplicated card). A duplicate implies a
    missing card, since the size is fixed.
    """
    try:
        deck = list(cards)
    except TypeError as exc:
        raise InvalidDeckError(
            f"Deck must be a sequence of cards, got {cards!r}.") from exc
    if len(deck) != DECK_SIZE:
        raise InvalidDeckError(
            f"Deck must hold {DECK_SIZE} cards, got {len(deck)}.")
    seen = set()
    for card in deck:
        if not (isinstance(card, Joker) or is_rank(card)):
            raise InvalidDeckError(f"Not a Solitaire card: {card!r}")
        if card in seen:
            raise InvalidDeckError(f"Duplicate card in deck: {card!r}")
        seen.add(card)
    # 54 distinct cards out of a 54-card domain: nothing can be missing
    return deck


def is_valid_deck(cards: Iterable[Card]) -> bool:
    try:
        validate_deck(cards)
    except InvalidDeckError:
        return False
    return True
