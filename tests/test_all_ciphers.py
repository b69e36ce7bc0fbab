"""
rotcipher — Sequence + Cipher Test Suite
========================================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_all_ciphers.py
"""

import io
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from rotcipher.sequence          import CharClass, TextSequence, classify
from rotcipher.ciphers.caesar    import CaesarCipher, caesar_encode, caesar_decode
from rotcipher.ciphers.vigenere  import VigenereCipher, vigenere_encode, vigenere_decode
from rotcipher.engine            import Action, Cipher, apply
from rotcipher.errors            import InvalidKey, InvalidSelection

MSG = "The quick brown Fox, jumps over 13 lazy dogs!"


def seq(text):
    return TextSequence.from_text(text)


# ── Text Sequence ─────────────────────────────────────────────────────────────
def test_sequence_append_keeps_order():
    s = TextSequence()
    for ch in "abc":
        s.append(ch)
    assert s.render() == "abc"
    assert len(s) == 3

def test_sequence_append_rejects_multichar():
    with pytest.raises(ValueError):
        TextSequence().append("ab")

def test_sequence_read_stops_at_newline():
    stream = io.StringIO("hello world\nsecond line\n")
    s = TextSequence().read_from_input(stream)
    assert s.render() == "hello world"
    assert stream.readline() == "second line\n"

def test_sequence_read_eof_ends_like_newline():
    assert TextSequence().read_from_input(io.StringIO("no newline")).render() == "no newline"
    assert TextSequence().read_from_input(io.StringIO("")).render() == ""

def test_sequence_read_crlf():
    assert TextSequence().read_from_input(io.StringIO("dos\r\n")).render() == "dos"

def test_sequence_read_leading_whitespace():
    assert TextSequence().read_from_input(io.StringIO("  hi\n")).render() == "  hi"
    stripped = TextSequence().read_from_input(io.StringIO("  hi\n"), strip_leading=True)
    assert stripped.render() == "hi"

def test_sequence_for_each_visits_once_in_order():
    seen = []
    seq("xyz").for_each(seen.append)
    assert seen == ["x", "y", "z"]

@pytest.mark.parametrize("char,expected", [
    ("A", CharClass.UPPER), ("Z", CharClass.UPPER),
    ("a", CharClass.LOWER), ("z", CharClass.LOWER),
    ("0", CharClass.OTHER), (" ", CharClass.OTHER),
    ("[", CharClass.OTHER), ("é", CharClass.OTHER),
])
def test_classify(char, expected):
    assert classify(char) is expected

def test_sequence_to_lowercase_in_place():
    s = seq("LeMoN 42!")
    s.to_lowercase()
    assert s.render() == "lemon 42!"
    assert len(s) == 9

def test_sequence_has_letters():
    assert seq("12 !").has_letters() is False
    assert seq("").has_letters() is False
    assert seq("1a").has_letters() is True
    assert seq("Z").has_letters() is True

def test_sequence_destroy_empties():
    s = seq("abc")
    s.destroy()
    assert len(s) == 0


# ── Caesar ────────────────────────────────────────────────────────────────────
def test_caesar_encode_scenario():
    s = seq("Attack at Dawn")
    caesar_encode(s, 3)
    assert s.render() == "Dwwdfn dw Gdzq"

def test_caesar_decode_scenario():
    s = seq("Dwwdfn dw Gdzq")
    caesar_decode(s, 3)
    assert s.render() == "Attack at Dawn"

@pytest.mark.parametrize("rotation,expected", [(26, "A"), (-1, "Z"), (27, "B"), (-27, "Z"), (0, "A")])
def test_caesar_rotation_normalised(rotation, expected):
    assert CaesarCipher(rotation).encrypt("A") == expected

@pytest.mark.parametrize("rotation", [-53, -26, -3, 0, 1, 13, 25, 26, 100])
def test_caesar_roundtrip(rotation):
    c = CaesarCipher(rotation)
    ct = c.encrypt(MSG)
    assert c.decrypt(ct) == MSG

def test_caesar_preserves_case_and_punctuation():
    ct = CaesarCipher(5).encrypt(MSG)
    for a, b in zip(MSG, ct):
        assert classify(a) is classify(b)
        if classify(a) is CharClass.OTHER:
            assert a == b

def test_caesar_rejects_non_integer_rotation():
    with pytest.raises(TypeError):
        CaesarCipher("3")

def test_caesar_cipher_exposes_rotation():
    assert CaesarCipher(-4).rotation == -4

def test_caesar_empty_message():
    assert CaesarCipher(7).encrypt("") == ""


# ── Vigenère ──────────────────────────────────────────────────────────────────
def test_vigenere_encode_scenario():
    s = seq("attackatdawn")
    vigenere_encode(s, seq("lemon"))
    assert s.render() == "lxfopvefrnhr"

def test_vigenere_decode_scenario():
    s = seq("lxfopvefrnhr")
    vigenere_decode(s, seq("lemon"))
    assert s.render() == "attackatdawn"

def test_vigenere_non_letters_do_not_consume_key():
    assert VigenereCipher("lemon").encrypt("attack at dawn") == "lxfopv ef rnhr"

def test_vigenere_key_skips_non_letters_and_folds_case():
    assert VigenereCipher("LE-mo 9N").encrypt("attackatdawn") == "lxfopvefrnhr"

def test_vigenere_preserves_message_case():
    assert VigenereCipher("lemon").encrypt("ATTACKatdawn") == "LXFOPVefrnhr"

def test_vigenere_roundtrip():
    v = VigenereCipher("Christman")
    ct = v.encrypt(MSG)
    assert ct != MSG
    assert v.decrypt(ct) == MSG

def test_vigenere_key_without_letters_leaves_message():
    s = seq("attack")
    with pytest.raises(InvalidKey):
        vigenere_encode(s, seq("123"))
    assert s.render() == "attack"

def test_vigenere_decode_key_without_letters_leaves_message():
    s = seq("lxfopv")
    with pytest.raises(InvalidKey):
        vigenere_decode(s, seq("1 2-3"))
    assert s.render() == "lxfopv"

def test_vigenere_cipher_key_is_folded():
    assert VigenereCipher("LeMon!").key == "lemon!"

@pytest.mark.parametrize("key", ["", "123", "  ", "!?"])
def test_vigenere_cipher_rejects_bad_key(key):
    with pytest.raises(InvalidKey):
        VigenereCipher(key)

def test_vigenere_empty_message():
    assert VigenereCipher("lemon").decrypt("") == ""


# ── Engine dispatch ───────────────────────────────────────────────────────────
def test_apply_caesar():
    r = apply("caesar", "encode", "Attack at Dawn", rotation=3)
    assert r.original == "Attack at Dawn"
    assert r.transformed == "Dwwdfn dw Gdzq"
    assert r.lines() == [
        "Plaintext:  Attack at Dawn",
        "Ciphertext: Dwwdfn dw Gdzq",
        "Rotation:   3",
    ]

def test_apply_vigenere_decode_lines():
    r = apply(Cipher.VIGENERE, Action.DECODE, "lxfopvefrnhr", key="LEMON")
    assert r.lines() == [
        "Ciphertext: lxfopvefrnhr",
        "Plaintext:  attackatdawn",
        "Key:        lemon",
    ]

def test_apply_does_not_mutate_input_sequence():
    message = seq("attack")
    apply("v", "e", message, key="lemon")
    assert message.render() == "attack"

@pytest.mark.parametrize("cipher,action", [("x", "e"), ("c", "z"), ("", ""), (None, "e")])
def test_apply_invalid_selection(cipher, action):
    with pytest.raises(InvalidSelection):
        apply(cipher, action, "abc", rotation=1, key="a")

def test_apply_missing_parameters():
    with pytest.raises(InvalidSelection):
        apply("c", "e", "abc")
    with pytest.raises(InvalidSelection):
        apply("v", "e", "abc")

def test_apply_invalid_key():
    with pytest.raises(InvalidKey):
        apply("v", "e", "abc", key="123")

def test_apply_invalid_key_leaves_caller_sequence():
    message = seq("Attack at Dawn")
    with pytest.raises(InvalidKey):
        apply("v", "d", message, key="123")
    assert message.render() == "Attack at Dawn"

def test_apply_empty_message():
    assert apply("c", "d", "", rotation=4).transformed == ""
    assert apply("v", "e", "", key="key").transformed == ""


# ── run directly ─────────────────────────────────────────────────────────────
if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
