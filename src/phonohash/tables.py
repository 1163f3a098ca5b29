"""Phonetic classifier tables.

Every supported letter maps to an 8-bit phonetic code. There are four tables:
first-position vs. trailing-position, each split into a basic Latin part
(a-z) and a Latin-1 Supplement part (U+00DF ``ß`` through U+00FF ``ÿ``).

Trailing-position consonants, bits from most to least significant:

    +--------- Confident (hard to misspell: l r x z q)
    |+-------- Labial
    ||+------- Liquid
    |||+------ Dental
    ||||+----- Plosive
    |||||+---- Fricative
    ||||||+--- Nasal
    |||||||+-- Discriminant
    ||||||||

Trailing-position vowels only use the discriminant bit: 0 for open, 1 for close.

First-position consonants are the trailing code shifted right by one, with
the low bit reused as a discriminant where the shift created a collision.
First-position vowels always set the top bit and describe openness and
frontness:

    +--------- Vowel
    |+-------- Closer than mid-central
    ||+------- Close
    |||+------ Front
    ||||+----- Close-mid
    |||||+---- Central
    ||||||+--- Open-mid
    |||||||+-- Discriminant
    ||||||||

Changing any value here changes the fingerprints of existing words.
"""

from __future__ import annotations

# Trailing-position codes for a-z.
TRAILING_ASCII: tuple[int, ...] = (
    0b00000000,  # a
    0b01001000,  # b
    0b00001100,  # c
    0b00011000,  # d
    0b00000000,  # e
    0b01000100,  # f
    0b00001000,  # g
    0b00000100,  # h
    0b00000001,  # i
    0b00000101,  # j
    0b00001001,  # k
    0b10100000,  # l
    0b00000010,  # m
    0b00010010,  # n
    0b00000000,  # o
    0b01001001,  # p
    0b10101000,  # q
    0b10100001,  # r
    0b00010100,  # s
    0b00011101,  # t
    0b00000001,  # u
    0b01000101,  # v
    0b00000000,  # w
    0b10000100,  # x
    0b00000001,  # y
    0b10010100,  # z
)

# First-position codes for a-z. Vowels are marked with a star.
FIRST_ASCII: tuple[int, ...] = (
    0b10000100,  # a*
    0b00100100,  # b
    0b00000110,  # c
    0b00001100,  # d
    0b11011000,  # e*
    0b00100010,  # f
    0b00000100,  # g
    0b00000010,  # h
    0b11111000,  # i*
    0b00000011,  # j
    0b00000101,  # k
    0b01010000,  # l
    0b00000001,  # m
    0b00001001,  # n
    0b10010100,  # o*
    0b00100101,  # p
    0b01010100,  # q
    0b01010001,  # r
    0b00001010,  # s
    0b00001110,  # t
    0b11100000,  # u*
    0b00100011,  # v
    0b00000000,  # w
    0b01000010,  # x
    0b11100100,  # y*
    0b01001010,  # z
)


def _ascii(table: tuple[int, ...], letter: str) -> int:
    return table[ord(letter) - ord("a")]


# Latin-1 Supplement, starting at U+00DF. None marks U+00F7 (division sign),
# which is not a letter. These sounds vary a lot between languages, so the
# values are approximations.
TRAILING_LATIN1: tuple[int | None, ...] = (
    _ascii(TRAILING_ASCII, "s") ^ 1,  # ß
    0,  # à
    0,  # á
    0,  # â
    0,  # ã
    0,  # ä [æ]
    1,  # å [oː]
    0,  # æ [æ]
    _ascii(TRAILING_ASCII, "z") ^ 1,  # ç [t͡ʃ]
    1,  # è
    1,  # é
    1,  # ê
    1,  # ë
    1,  # ì
    1,  # í
    1,  # î
    1,  # ï
    0b00010101,  # ð [ð̠] non-plosive t
    0b00010111,  # ñ [nj] n combined with j
    0,  # ò
    0,  # ó
    0,  # ô
    0,  # õ
    1,  # ö [ø]
    None,  # ÷
    1,  # ø [ø]
    1,  # ù
    1,  # ú
    1,  # û
    1,  # ü
    1,  # ý
    0b00010101,  # þ [ð̠] non-plosive t
    1,  # ÿ
)

FIRST_LATIN1: tuple[int | None, ...] = (
    _ascii(FIRST_ASCII, "s") ^ 1,  # ß
    _ascii(FIRST_ASCII, "a") ^ 1,  # à
    _ascii(FIRST_ASCII, "a") ^ 1,  # á
    0b10000000,  # â
    0b10000110,  # ã
    0b10100110,  # ä [æ]
    0b11000010,  # å [oː]
    0b10100111,  # æ [æ]
    0b01010100,  # ç [t͡ʃ]
    _ascii(FIRST_ASCII, "e") ^ 1,  # è
    _ascii(FIRST_ASCII, "e") ^ 1,  # é
    _ascii(FIRST_ASCII, "e") ^ 1,  # ê
    0b11000110,  # ë [ə] or [œ]
    _ascii(FIRST_ASCII, "i") ^ 1,  # ì
    _ascii(FIRST_ASCII, "i") ^ 1,  # í
    _ascii(FIRST_ASCII, "i") ^ 1,  # î
    _ascii(FIRST_ASCII, "i") ^ 1,  # ï
    0b00001011,  # ð [ð̠] non-plosive t
    0b00001011,  # ñ [nj] n combined with j
    _ascii(FIRST_ASCII, "o") ^ 1,  # ò
    _ascii(FIRST_ASCII, "o") ^ 1,  # ó
    _ascii(FIRST_ASCII, "o") ^ 1,  # ô
    _ascii(FIRST_ASCII, "o") ^ 1,  # õ
    0b11011100,  # ö [œ] or [ø]
    None,  # ÷
    0b11011101,  # ø [œ] or [ø]
    _ascii(FIRST_ASCII, "u") ^ 1,  # ù
    _ascii(FIRST_ASCII, "u") ^ 1,  # ú
    _ascii(FIRST_ASCII, "u") ^ 1,  # û
    _ascii(FIRST_ASCII, "y") ^ 1,  # ü
    _ascii(FIRST_ASCII, "y") ^ 1,  # ý
    0b00001011,  # þ [ð̠] non-plosive t
    _ascii(FIRST_ASCII, "y") ^ 1,  # ÿ
)

LATIN1_START = 0xDF

# Code for an unmapped first character.
NEUTRAL_CODE = 0


def _lookup(
    ascii_table: tuple[int, ...],
    latin1_table: tuple[int | None, ...],
    char: str,
) -> int | None:
    point = ord(char)
    if ord("a") <= point <= ord("z"):
        return ascii_table[point - ord("a")]
    index = point - LATIN1_START
    if 0 <= index < len(latin1_table):
        return latin1_table[index]
    return None


def first_code(char: str) -> int:
    """Return the first-position code of a lowercase character.

    Unmapped characters get NEUTRAL_CODE, so the first character of a word
    always owns byte 0 of its fingerprint.
    """
    code = _lookup(FIRST_ASCII, FIRST_LATIN1, char)
    return NEUTRAL_CODE if code is None else code


def trailing_code(char: str) -> int | None:
    """Return the trailing-position code of a lowercase character.

    None means the character is unmapped and must be skipped.
    """
    return _lookup(TRAILING_ASCII, TRAILING_LATIN1, char)
