"""Fingerprint value type and builder.

A fingerprint packs a word into 8 bytes. Byte 0 (the most significant byte
of the integer form) is the first-position code of the word's first
character. The following characters give up to 7 trailing-position codes,
kept in order and right aligned: the last code sits in byte 7 and the zero
padding sits between byte 0 and the first trailing code.

Example usage:
    from phonohash import fingerprint

    fp = fingerprint("jumbo")
    fp.hex()        # "0300000001024800"
    int(fp)         # storable as an opaque 64-bit key
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from phonohash.tables import first_code, trailing_code

FINGERPRINT_BYTES = 8
TRAILING_PHONES = FINGERPRINT_BYTES - 1
MAX_VALUE = (1 << (8 * FINGERPRINT_BYTES)) - 1

_HEX_RE = re.compile(r"[0-9a-fA-F]{16}")


@dataclass(frozen=True, slots=True)
class Fingerprint:
    """An immutable 64-bit phonetic fingerprint."""

    value: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"Fingerprint value must be an int, got {type(self.value).__name__}")
        if not 0 <= self.value <= MAX_VALUE:
            raise ValueError(f"Fingerprint value out of 64-bit range: {self.value}")

    @classmethod
    def from_int(cls, value: int) -> Fingerprint:
        """Rebuild a fingerprint from its integer form."""
        return cls(value)

    @classmethod
    def from_bytes(cls, data: bytes) -> Fingerprint:
        """Rebuild a fingerprint from its 8-byte big-endian form.

        Raises:
            ValueError: If ``data`` is not exactly 8 bytes long.
        """
        if len(data) != FINGERPRINT_BYTES:
            raise ValueError(f"Fingerprint needs {FINGERPRINT_BYTES} bytes, got {len(data)}")
        return cls(int.from_bytes(data, "big"))

    @classmethod
    def from_hex(cls, text: str) -> Fingerprint:
        """Parse the 16-digit hexadecimal form produced by ``hex()``."""
        text = text.strip()
        if not _HEX_RE.fullmatch(text):
            raise ValueError(f"Fingerprint hex must be {2 * FINGERPRINT_BYTES} digits: {text!r}")
        return cls(int(text, 16))

    @classmethod
    def from_phones(cls, first: int, trailing: list[int] | tuple[int, ...]) -> Fingerprint:
        """Pack a first phone and up to 7 trailing phones, right aligned."""
        if len(trailing) > TRAILING_PHONES:
            raise ValueError(f"At most {TRAILING_PHONES} trailing phones, got {len(trailing)}")
        padded = [first] + [0] * (TRAILING_PHONES - len(trailing)) + list(trailing)
        return cls.from_bytes(bytes(padded))

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(FINGERPRINT_BYTES, "big")

    def hex(self) -> str:
        return f"{self.value:0{2 * FINGERPRINT_BYTES}x}"

    @property
    def first_phone(self) -> int:
        return self.value >> (8 * TRAILING_PHONES)

    @property
    def trailing_phones(self) -> tuple[int, ...]:
        return tuple(self.to_bytes()[1:])

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"Fingerprint(0x{self.hex()})"


ZERO = Fingerprint(0)


def fingerprint(word: str) -> Fingerprint:
    """Phonetically hash a word.

    The word is lowercased, then:
    1. Its first character becomes byte 0 via the first-position tables.
    2. Each following character is looked up in the trailing-position tables.
       Unmapped characters are skipped, and a code equal to the previously
       emitted trailing code apart from the discriminant bit is dropped.
       The first trailing code is always kept.
    3. Scanning stops after 7 trailing phones; the rest of the word is ignored.
    4. The trailing codes are shifted in from the low end, so the last one
       lands in byte 7.

    Args:
        word: Any string. Empty input gives the all-zero fingerprint.

    Returns:
        The word's Fingerprint.
    """
    if not word:
        return ZERO

    word = word.lower()
    first = first_code(word[0])
    phones: list[int] = []
    previous: int | None = None

    for char in word[1:]:
        if len(phones) == TRAILING_PHONES:
            break
        code = trailing_code(char)
        if code is None:
            continue
        if previous is not None and code >> 1 == previous >> 1:
            continue
        phones.append(code)
        previous = code

    return Fingerprint.from_phones(first, phones)
