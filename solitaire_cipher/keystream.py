"""
Solitaire Keystream Engine
==========================
Bruce Schneier's Solitaire (Pontifex) cipher, as published in the
appendix of Neal Stephenson's Cryptonomicon (1999). A deck of cards
is the whole key and the whole machine: every round shuffles the deck
in four fixed steps and reads one letter off the result.

One round:
  1. Move joker A down one card   (deck is circular)
  2. Move joker B down two cards  (never left on top)
  3. Triple cut around the jokers
  4. Count cut by the bottom card's value
Then count down from the top by the top card's value and read the
next card. A joker there yields no letter; the round is discarded and
another one is run.

The step functions below are pure: they take a list of cards and
return a new one. KeystreamEngine owns a 54-card deck and applies them
in place of its private state.

Keying the deck from a passphrase is not done here. The engine starts
from whatever valid ordering the caller hands it.
"""

import logging
from typing import Iterator, List, Optional

from .cards import (
    Card, Joker, InvalidJokerError,
    card_count, card_letter, validate_deck,
)

logger = logging.getLogger(__name__)

# Joker -> how many single steps it moves down per round
_JOKER_STEPS = {Joker.A: 1, Joker.B: 2}


# ── Step functions ───────────────────────────────────────────────────────────

def move_joker(cards: List[Card], joker: Joker) -> List[Card]:
    """
    Move `joker` down (A one step, B two steps) and return the new deck.

    A single step swaps the joker with the card below it. A joker on the
    bottom falls through to the top instead; the rest of the deck does
    not rotate. If B finishes on top it is swapped one further down, so
    it never stays the first card. A is allowed to finish on top.
    """
    if not isinstance(joker, Joker):
        raise InvalidJokerError(f"Unknown joker: {joker!r}")
    deck = list(cards)
    for _ in range(_JOKER_STEPS[joker]):
        if deck[-1] is joker:
            deck.insert(0, deck.pop())
        else:
            i = deck.index(joker)
            deck[i], deck[i + 1] = deck[i + 1], deck[i]
    if joker is Joker.B and deck[0] is Joker.B:
        deck[0], deck[1] = deck[1], deck[0]
    return deck


def triple_cut(cards: List[Card]) -> List[Card]:
    """Swap the block above the upper joker with the block below the lower one."""
    upper, lower = sorted((cards.index(Joker.A), cards.index(Joker.B)))
    return cards[lower + 1:] + cards[upper:lower + 1] + cards[:upper]


def count_cut(cards: List[Card]) -> List[Card]:
    """
    Cut count(bottom) cards off the top and put them just above the
    bottom card. With a joker on the bottom (count 53) a full deck is
    left unchanged.
    """
    bottom = cards[-1]
    rest = cards[:-1]
    n = card_count(bottom)
    return rest[n:] + rest[:n] + [bottom]


def output_letter(cards: List[Card]) -> Optional[str]:
    """
    Letter read off the deck, without changing it.

    The top card's count n picks the card at index n (count n cards
    from the top, top card included, and take the next). A joker on top
    counts 53, which picks the bottom card of a full deck. None only if
    the picked card is a joker.
    """
    return card_letter(cards[card_count(cards[0])])


# ── Engine ───────────────────────────────────────────────────────────────────

class KeystreamEngine:
    """
    Solitaire keystream generator over a private 54-card deck.

    The deck passed in is copied, and current_deck() hands out copies,
    so no caller can reach the engine's state. Every round mutates the
    deck; to replay a keystream, snapshot the deck first and restore it
    (or build a new engine from the copy).

    Not thread-safe. Give each thread its own engine.
    """

    def __init__(self, initial_deck):
        self._deck   = validate_deck(initial_deck)
        self._rounds = 0
        logger.debug(f"KeystreamEngine ready | top card {_token(self._deck[0])}")

    def __repr__(self):
        top = " ".join(_token(c) for c in self._deck[:5])
        return f"KeystreamEngine(top=[{top} ...], rounds={self._rounds})"

    @property
    def rounds(self) -> int:
        """Raw rounds run so far, discarded joker rounds included."""
        return self._rounds

    def current_deck(self) -> List[Card]:
        return list(self._deck)

    def restore(self, deck) -> None:
        """Replace the engine state with a copy of `deck` (validated first)."""
        self._deck = validate_deck(deck)
        logger.debug(f"Deck restored after {self._rounds} rounds")

    # -- the four steps --------------------------------------------------------

    def move_joker_down(self, joker: Joker) -> None:
        self._deck = move_joker(self._deck, joker)

    def triple_cut(self) -> None:
        self._deck = triple_cut(self._deck)

    def count_cut(self) -> None:
        self._deck = count_cut(self._deck)

    def output_card(self) -> Optional[str]:
        return output_letter(self._deck)

    def iterate(self) -> None:
        """One full shuffle round. Produces no output."""
        self.move_joker_down(Joker.A)
        self.move_joker_down(Joker.B)
        self.triple_cut()
        self.count_cut()
        self._rounds += 1

    # -- output ----------------------------------------------------------------

    def next_output_letter(self) -> str:
        """
        Run rounds until one yields a letter, and return it.

        Rounds that land on a joker are dropped. There is no round cap:
        on a valid deck a letter always turns up within a few rounds.
        """
        while True:
            self.iterate()
            letter = self.output_card()
            if letter is not None:
                return letter
            logger.debug(f"Round {self._rounds}: joker output skipped")

    def generate_keystream(self, length: int) -> Iterator[str]:
        """
        Lazily yield `length` keystream letters.

        The engine advances as the iterator is consumed. For an
        independent stream, build a new engine from a copied deck.
        """
        if isinstance(length, bool) or not isinstance(length, int):
            raise ValueError(f"Keystream length must be an int, got {length!r}.")
        if length < 0:
            raise ValueError("Keystream length must be non-negative.")
        logger.debug(f"Keystream requested: {length} letters")
        return (self.next_output_letter() for _ in range(length))

    def keystream_for(self, chunked_text: str) -> str:
        """
        One keystream letter per letter of `chunked_text`, keeping the
        group spaces in place: "HELLO WORLD" -> "DWJXH YRFDG" on the
        unkeyed deck.
        """
        return "".join(" " if ch == " " else self.next_output_letter()
                       for ch in chunked_text)


def _token(card: Card) -> str:
    return card.value if isinstance(card, Joker) else str(card)


if __name__ == "__main__":
    from .cards import unkeyed_deck

    logging.basicConfig(level=logging.DEBUG, format=' %(message)s')

    engine = KeystreamEngine(unkeyed_deck())
    letters = list(engine.generate_keystream(10))
    print(f"Unkeyed deck, first ten letters: {' '.join(letters)}")
    print(f"Raw rounds run: {engine.rounds}")
    assert letters == list("DWJXHYRFDG")
