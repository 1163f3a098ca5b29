"""Tests for fingerprint construction and the Fingerprint value type."""

import pytest

from phonohash import ZERO, Fingerprint, fingerprint


def test_empty_word_is_all_zero():
    assert fingerprint("") == ZERO
    assert fingerprint("").to_bytes() == bytes(8)
    assert int(fingerprint("")) == 0


def test_known_layout():
    fp = fingerprint("jumbo")
    # j, then u m b o right aligned against byte 7
    assert fp.to_bytes() == bytes([0x03, 0, 0, 0, 0x01, 0x02, 0x48, 0x00])
    assert fp.hex() == "0300000001024800"
    assert int(fp) == 0x0300000001024800
    assert fp.first_phone == 0x03
    assert fp.trailing_phones == (0, 0, 0, 0x01, 0x02, 0x48, 0x00)


def test_from_phones_right_aligns():
    fp = Fingerprint.from_phones(0x51, [0xA1, 0x00])
    assert fp.to_bytes() == bytes([0x51, 0, 0, 0, 0, 0, 0xA1, 0x00])
    assert Fingerprint.from_phones(0x51, []) == Fingerprint(0x51 << 56)


def test_deterministic():
    for word in ["horse", "computer", "", "x", "Müller"]:
        assert fingerprint(word) == fingerprint(word)


@pytest.mark.parametrize(
    "a, b",
    [
        ("Horse", "horse"),
        ("JAva", "jAva"),
        ("triggered", "TRIGGERED"),
        ("ÉCOLE", "école"),
    ],
)
def test_case_insensitive(a, b):
    assert fingerprint(a) == fingerprint(b)


@pytest.mark.parametrize("word", ["", "a", "ab", "supercalifragilisticexpialidocious", "z" * 10_000])
def test_always_eight_bytes(word):
    assert len(fingerprint(word).to_bytes()) == 8


def test_doubled_letters_collapse():
    assert fingerprint("jumbbo") == fingerprint("jumbo")
    assert fingerprint("hello") == fingerprint("helo")
    assert fingerprint("bannana") == fingerprint("banana")


def test_near_duplicates_collapse():
    # b and p differ only in the discriminant bit
    assert fingerprint("abbple") == fingerprint("abple")
    assert fingerprint("jumbpo") == fingerprint("jumbo")
    assert fingerprint("maier") == fingerprint("meyer")
    assert fingerprint("lal") == fingerprint("lel")


def test_first_letter_is_not_collapsed_with_the_next():
    # The first character has its own byte, so a following b and p still differ
    assert fingerprint("abple") != fingerprint("apple")


def test_first_trailing_code_is_always_kept():
    # i and a sit in the same collapse group, but there is no earlier
    # trailing code to collapse into
    assert fingerprint("jiva").trailing_phones[-3:] == (0x01, 0x45, 0x00)
    assert fingerprint("java").trailing_phones[-3:] == (0x00, 0x45, 0x00)
    assert fingerprint("jiva") != fingerprint("java")
    assert fingerprint("möier") != fingerprint("meyer")


def test_long_words_truncate_after_seven_trailing_phones():
    assert fingerprint("supercalifragilistic") == fingerprint("supercalifornia")
    assert fingerprint("xtakasamilo") == fingerprint("xtakasamerz")
    assert fingerprint("xtakasa") != fingerprint("xtakasam")


def test_unmapped_trailing_characters_are_skipped():
    assert fingerprint("comp-uter") == fingerprint("computer")
    assert fingerprint("comp@u#te?r") == fingerprint("computer")
    assert fingerprint("co!mputer") == fingerprint("computer")


def test_unmapped_first_character_is_neutral():
    fp = fingerprint("4chan")
    assert fp.first_phone == 0
    assert fp.trailing_phones[-4:] == (0x0C, 0x04, 0x00, 0x12)
    assert fingerprint("?") == ZERO


@pytest.mark.parametrize(
    "a, b",
    [
        ("JAva", "jAva"),
        ("co!mputer", "computer"),
        ("comp-uter", "computer"),
        ("comp@u#te?r", "computer"),
        ("lal", "lel"),
        ("rindom", "ryndom"),
        ("riiiindom", "ryyyyyndom"),
        ("riyiyiiindom", "ryyyyyndom"),
        ("triggered", "TRIGGERED"),
        ("repert", "ropert"),
    ],
)
def test_exact_matches(a, b):
    assert fingerprint(a) == fingerprint(b)


@pytest.mark.parametrize(
    "a, b",
    [
        ("reddit", "eddit"),
        ("lol", "lulz"),
        ("ijava", "java"),
        ("jiva", "java"),
        ("jesus", "iesus"),
        ("aesus", "iesus"),
        ("iesus", "yesus"),
        ("rupirt", "ropert"),
        ("ripert", "ropyrt"),
        ("rrr", "rraaaa"),
        ("randomal", "randomai"),
    ],
)
def test_mismatches(a, b):
    assert fingerprint(a) != fingerprint(b)


def test_round_trip_forms():
    fp = fingerprint("computer")
    assert Fingerprint.from_int(int(fp)) == fp
    assert Fingerprint.from_bytes(fp.to_bytes()) == fp
    assert Fingerprint.from_hex(fp.hex()) == fp
    assert Fingerprint.from_hex(fp.hex().upper()) == fp
    assert str(fp) == fp.hex()
    assert repr(fp) == f"Fingerprint(0x{fp.hex()})"


def test_usable_as_dict_key():
    index = {fingerprint("jumbo"): "jumbo"}
    assert index[fingerprint("JUMBO")] == "jumbo"


def test_invalid_raw_values():
    with pytest.raises(ValueError):
        Fingerprint(-1)
    with pytest.raises(ValueError):
        Fingerprint(1 << 64)
    with pytest.raises(ValueError):
        Fingerprint.from_bytes(b"\x00" * 7)
    with pytest.raises(ValueError):
        Fingerprint.from_phones(1, [1] * 8)
    with pytest.raises(TypeError):
        Fingerprint("0300000001024800")


@pytest.mark.parametrize(
    "text",
    [
        "abc",
        "+00000000000000f",
        "-00000000000000f",
        "0000_00000000000",
        "0x00000000000000",
        "000000000000000g",
    ],
)
def test_from_hex_rejects_non_hex_digits(text):
    with pytest.raises(ValueError):
        Fingerprint.from_hex(text)
