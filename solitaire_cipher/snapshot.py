"""
Deck snapshots
==============
The engine's only state is its deck, so saving a keystream position
means saving 54 cards verbatim, joker identities included.

Text format (one line):

    1 2 3 ... 52 A B:<sha256 hex of the card list>

Cards are space-separated; ranks as decimal, jokers as "A" / "B".
The SHA-256 fingerprint catches a corrupted or hand-edited snapshot
before it silently produces a different keystream.

Dependencies: cryptography >= 41.0
"""

import hmac
import logging
from typing import List

from cryptography.hazmat.primitives import hashes

from .cards import Card, Joker, InvalidDeckError, validate_deck
from .keystream import KeystreamEngine

logger = logging.getLogger(__name__)


class DeckSnapshot:
    """Immutable copy of a valid deck that can be saved and replayed."""

    SEPARATOR = ":"

    def __init__(self, cards):
        self._cards = tuple(validate_deck(cards))

    @classmethod
    def capture(cls, engine: KeystreamEngine) -> "DeckSnapshot":
        return cls(engine.current_deck())

    def __eq__(self, other):
        if not isinstance(other, DeckSnapshot):
            return NotImplemented
        return self._cards == other._cards

    def __hash__(self):
        return hash(self._cards)

    def __repr__(self):
        return f"DeckSnapshot({self.fingerprint[:16]}...)"

    @property
    def cards(self) -> List[Card]:
        return list(self._cards)

    def serialize(self) -> str:
        return " ".join(c.value if isinstance(c, Joker) else str(c)
                        for c in self._cards)

    @property
    def fingerprint(self) -> str:
        digest = hashes.Hash(hashes.SHA256())
        digest.update(self.serialize().encode("ascii"))
        return digest.finalize().hex()

    def dumps(self) -> str:
        return f"{self.serialize()}{self.SEPARATOR}{self.fingerprint}"

    @classmethod
    def loads(cls, text: str) -> "DeckSnapshot":
        """
        Parse a dumps() line.
        Raises InvalidDeckError on bad tokens, an invalid deck, or a
        fingerprint that does not match the cards.
        """
        body, sep, fingerprint = text.strip().rpartition(cls.SEPARATOR)
        if not sep:
            raise InvalidDeckError("Snapshot has no fingerprint.")
        snapshot = cls(_parse_token(t) for t in body.split())
        if not hmac.compare_digest(snapshot.fingerprint.encode(),
                                   fingerprint.lower().encode("utf-8")):
            raise InvalidDeckError(
                "Snapshot fingerprint mismatch -- corrupt or edited deck.")
        logger.debug(f"Snapshot verified: {fingerprint[:16]}")
        return snapshot

    def restore(self, engine: KeystreamEngine) -> None:
        engine.restore(self._cards)
        logger.info(f"Engine rewound to snapshot {self.fingerprint[:16]}")

    def new_engine(self) -> KeystreamEngine:
        logger.info(f"New engine from snapshot {self.fingerprint[:16]}")
        return KeystreamEngine(self._cards)


def _parse_token(token: str) -> Card:
    if token in ("A", "B"):
        return Joker(token)
    # canonical decimal only, so one deck has exactly one text form
    if token.isascii() and token.isdigit() and str(int(token)) == token:
        return int(token)
    raise InvalidDeckError(f"Bad card token in snapshot: {token!r}")
