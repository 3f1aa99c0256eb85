"""
Cipher family tests: known vectors, pass-through policies and the
round-trip law for every family.

Run with:  python -m pytest tests/ -v
"""

import pytest

from chunkcipher.ciphers import CaesarCipher, PlayfairCipher, VigenereCipher
from chunkcipher.core.factory import build_cipher
from chunkcipher.core.models import CipherFamily, CipherMode

PANGRAM = "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG"

# ── Caesar ────────────────────────────────────────────────────────────────────
def test_caesar_shift_wraps_around():
    c = CaesarCipher("3")
    assert c.apply_cipher("ABCXYZ", CipherMode.ENCRYPT) == "DEFABC"
    assert c.apply_cipher("DEFABC", CipherMode.DECRYPT) == "ABCXYZ"

@pytest.mark.parametrize("key, shift", [("3", 3), ("29", 3), ("-3", 23), (" 7 ", 7), ("0", 0)])
def test_caesar_key_reduced_modulo_alphabet(key, shift):
    assert CaesarCipher(key).shift == shift

def test_caesar_passes_through_non_alphabet():
    c = CaesarCipher("1")
    assert c.encrypt("AB c-1Z") == "BC c-1A"

def test_caesar_accepts_mode_names():
    c = CaesarCipher("1")
    assert c.apply_cipher("A", "encrypt") == "B"

# ── Vigenère ──────────────────────────────────────────────────────────────────
def test_vigenere_known_vector():
    v = VigenereCipher("LEMON")
    assert v.encrypt("ATTACKATDAWN") == "LXFOPVEFRNHR"
    assert v.decrypt("LXFOPVEFRNHR") == "ATTACKATDAWN"

def test_vigenere_key_is_case_insensitive():
    assert VigenereCipher("lemon").encrypt(PANGRAM) == VigenereCipher("LEMON").encrypt(PANGRAM)
    assert VigenereCipher("lemon").normalized_key == "LEMON"

def test_vigenere_passthrough_consumes_key_position():
    v = VigenereCipher("BC")
    # position 2 uses key[0] again, not key[1]
    assert v.encrypt("A-A") == "B-B"

def test_vigenere_alignment_is_key_length():
    assert VigenereCipher("LEMON").chunk_alignment == 5

# ── Playfair ──────────────────────────────────────────────────────────────────
def test_playfair_key_square():
    p = PlayfairCipher("PLAYFAIREXAMPLE")
    assert p.square == ("PLAYF", "IREXM", "BCDGH", "KNOQS", "TUVWZ")

def test_playfair_known_vector():
    p = PlayfairCipher("PLAYFAIREXAMPLE")
    ct = p.encrypt("HIDETHEGOLDINTHETREESTUMP")
    assert ct == "BMODZBXDNABEKUDMUIXMMOUVIF"
    assert p.decrypt(ct) == "HIDETHEGOLDINTHETREXESTUMP"

@pytest.mark.parametrize("text, prepared", [
    ("BALLOON", "BALXLOON"),
    ("XX", "XQXZ"),
    ("Z", "ZX"),
    ("JAM", "IAMZ"),
    ("hi there!", "HITHEREZ"),
    ("straße", "STRAEZ"),
    ("ﬁne", "NEZ"),
    ("", ""),
])
def test_playfair_prepare_for_encryption(text, prepared):
    p = PlayfairCipher("KEYWORD")
    assert p.prepare(text, CipherMode.ENCRYPT) == prepared

def test_playfair_prepare_is_idempotent():
    p = PlayfairCipher("KEYWORD")
    once = p.prepare(PANGRAM + "BOOKKEEPER", CipherMode.ENCRYPT)
    assert p.prepare(once, CipherMode.ENCRYPT) == once

def test_playfair_lone_trailing_letter_on_decrypt():
    p = PlayfairCipher("PLAYFAIREXAMPLE")
    assert p.decrypt("BMO") == p.decrypt("BM") + "O"

# ── Contract properties ───────────────────────────────────────────────────────
VALID_KEYS = [
    (CipherFamily.CAESAR, "3"),
    (CipherFamily.CAESAR, "-12"),
    (CipherFamily.VIGENERE, "LEMON"),
    (CipherFamily.VIGENERE, "k"),
    (CipherFamily.PLAYFAIR, "PLAYFAIREXAMPLE"),
    (CipherFamily.PLAYFAIR, "jazz"),
]

@pytest.mark.parametrize("family, key", VALID_KEYS)
def test_round_trip_law(family, key):
    cipher = build_cipher(family, key)
    ct = cipher.apply_cipher(PANGRAM, CipherMode.ENCRYPT)
    expected = cipher.prepare(PANGRAM, CipherMode.ENCRYPT)
    assert cipher.apply_cipher(ct, CipherMode.DECRYPT) == expected

@pytest.mark.parametrize("family, key", VALID_KEYS)
def test_apply_is_deterministic(family, key):
    cipher = build_cipher(family, key)
    for mode in CipherMode:
        assert cipher.apply_cipher(PANGRAM, mode) == cipher.apply_cipher(PANGRAM, mode)

def test_identity_prepare_for_shift_ciphers():
    for cipher in (CaesarCipher("4"), VigenereCipher("KEY")):
        assert cipher.prepare(PANGRAM, CipherMode.ENCRYPT) == PANGRAM

def test_cipher_exposes_no_key_mutator():
    c = CaesarCipher("3")
    with pytest.raises(AttributeError):
        c.key = "4"
