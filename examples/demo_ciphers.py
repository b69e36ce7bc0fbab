"""
rotcipher — Live Demo: Caesar + Vigenère
========================================
Run:  python examples/demo_ciphers.py

Encodes and decodes the classic "attack at dawn" messages with both
ciphers and shows what a key without letters does.
"""

import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rotcipher import CaesarCipher, VigenereCipher, InvalidKey, apply

LINE = "═" * 70

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ── CAESAR ───────────────────────────────────────────────────────────────────
header("Caesar — rotation 3")
c  = CaesarCipher(3)
ct = c.encrypt("Attack at Dawn")
ok("Encrypted", ct)
ok("Decrypted", c.decrypt(ct))
ok("Rotation 26 is the identity", CaesarCipher(26).encrypt("A"))
ok("Rotation -1 wraps backwards", CaesarCipher(-1).encrypt("A"))

# ── VIGENÈRE ─────────────────────────────────────────────────────────────────
header("Vigenère — key 'lemon'")
v  = VigenereCipher("lemon")
ct = v.encrypt("attack at dawn")
ok("Encrypted", ct)
ok("Decrypted", v.decrypt(ct))
try:
    VigenereCipher("123")
except InvalidKey as e:
    ok("Rejected key", str(e))

# ── ENGINE ───────────────────────────────────────────────────────────────────
header("Engine dispatch")
for line in apply("vigenere", "decode", "lxfopvefrnhr", key="LEMON").lines():
    print(f"  {line}")
print(LINE + "\n")
