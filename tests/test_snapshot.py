"""
solitaire_cipher — Deck Snapshot Tests
======================================
Run with:  python -m pytest tests/test_snapshot.py -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from solitaire_cipher.cards     import Joker, InvalidDeckError, unkeyed_deck
from solitaire_cipher.keystream import KeystreamEngine
from solitaire_cipher.snapshot  import DeckSnapshot

UNKEYED_TEXT = " ".join(str(n) for n in range(1, 53)) + " A B"

# ── Serialization ────────────────────────────────────────────────────────────
def test_serialize_keeps_joker_identity():
    snap = DeckSnapshot(unkeyed_deck())
    assert snap.serialize() == UNKEYED_TEXT

def test_fingerprint_is_sha256_hex():
    fp = DeckSnapshot(unkeyed_deck()).fingerprint
    assert len(fp) == 64
    int(fp, 16)

def test_fingerprint_differs_when_jokers_swapped():
    a_first = DeckSnapshot(unkeyed_deck())
    b_first = DeckSnapshot(list(range(1, 53)) + [Joker.B, Joker.A])
    assert a_first.fingerprint != b_first.fingerprint

def test_dumps_loads_restores_same_deck():
    engine = KeystreamEngine(unkeyed_deck())
    list(engine.generate_keystream(7))
    snap = DeckSnapshot.capture(engine)
    loaded = DeckSnapshot.loads(snap.dumps())
    assert loaded == snap
    assert loaded.cards == engine.current_deck()

def test_snapshot_rejects_invalid_deck():
    with pytest.raises(InvalidDeckError):
        DeckSnapshot(list(range(1, 53)))

def test_snapshot_cards_is_a_copy():
    snap = DeckSnapshot(unkeyed_deck())
    snap.cards.clear()
    assert snap.cards == unkeyed_deck()

# ── Tamper detection ─────────────────────────────────────────────────────────
def test_loads_rejects_edited_deck():
    line = DeckSnapshot(unkeyed_deck()).dumps()
    edited = line.replace("1 2 3", "2 1 3", 1)
    with pytest.raises(InvalidDeckError):
        DeckSnapshot.loads(edited)

def test_loads_rejects_non_canonical_rank():
    line = DeckSnapshot(unkeyed_deck()).dumps()
    padded = "01" + line[1:]
    assert padded.startswith("01 2 3")
    with pytest.raises(InvalidDeckError):
        DeckSnapshot.loads(padded)

def test_loads_rejects_missing_fingerprint():
    with pytest.raises(InvalidDeckError):
        DeckSnapshot.loads(UNKEYED_TEXT)

@pytest.mark.parametrize("token", ["C", "-1", "x", "0x1"])
def test_loads_rejects_bad_tokens(token):
    text = UNKEYED_TEXT.replace("52", token) + ":" + "0" * 64
    with pytest.raises(InvalidDeckError):
        DeckSnapshot.loads(text)

# ── Replay ───────────────────────────────────────────────────────────────────
def test_restore_replays_keystream():
    engine = KeystreamEngine(unkeyed_deck())
    list(engine.generate_keystream(3))
    snap = DeckSnapshot.capture(engine)
    ahead = "".join(engine.generate_keystream(20))
    snap.restore(engine)
    assert "".join(engine.generate_keystream(20)) == ahead

def test_new_engine_from_snapshot():
    snap = DeckSnapshot(unkeyed_deck())
    engine = snap.new_engine()
    assert "".join(engine.generate_keystream(10)) == "DWJXHYRFDG"
    assert snap.cards == unkeyed_deck()
