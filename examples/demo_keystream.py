"""
solitaire_cipher — Live Demo
============================
Run:  python examples/demo_keystream.py

Walks the unkeyed deck through the message "Code in Ruby, live longer!":
chunking, keystream generation, numeric codes, and a snapshot replay.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from solitaire_cipher.cards     import unkeyed_deck
from solitaire_cipher.keystream import KeystreamEngine
from solitaire_cipher.text      import TextChunker, NumericCodec
from solitaire_cipher.snapshot  import DeckSnapshot

LINE = "═" * 70
MSG  = "Code in Ruby, live longer!"

def header(step, name):
    print(f"\n{LINE}")
    print(f"  Step {step} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

logging.basicConfig(level=logging.INFO, format=' %(message)s')

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  solitaire_cipher — Solitaire Keystream Demo")
print(LINE)
print(f"  Message: {MSG}\n")

# ── STEP 1 ───────────────────────────────────────────────────────────────────
header(1, "Chunk the message")
chunked = TextChunker.chunk(MSG)
ok("Groups", chunked)

# ── STEP 2 ───────────────────────────────────────────────────────────────────
header(2, "Generate the keystream (unkeyed deck)")
t0     = time.perf_counter()
engine = KeystreamEngine(unkeyed_deck())
start  = DeckSnapshot.capture(engine)
ks     = engine.keystream_for(chunked)
elapsed = time.perf_counter() - t0
ok("Keystream",  ks)
ok("Raw rounds", f"{engine.rounds} ({engine.rounds - len(ks.replace(' ', ''))} joker rounds skipped)")
ok("Elapsed",    f"{elapsed*1000:.2f} ms")

# ── STEP 3 ───────────────────────────────────────────────────────────────────
header(3, "Numeric codes (A=1 ... Z=26)")
ok("Message",   " ".join(str(n) for n in NumericCodec.encode_all(chunked)))
ok("Keystream", " ".join(str(n) for n in NumericCodec.encode_all(ks)))

# ── STEP 4 ───────────────────────────────────────────────────────────────────
header(4, "Snapshot and replay")
saved  = start.dumps()
replay = DeckSnapshot.loads(saved).new_engine()
ok("Fingerprint", start.fingerprint[:32] + "...")
ok("Replay matches", str(replay.keystream_for(chunked) == ks))

print(f"\n{LINE}\n")
