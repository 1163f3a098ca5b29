"""Weighted distance and similarity between fingerprints.

The two fingerprints are XORed byte by byte. Each byte's population count is
multiplied by a weight that halves from byte 0 (first phone, weight 128) to
byte 7 (weight 1), and the products are summed. Misspellings near the start
of a word are rare, so a difference there counts for more.
"""

from __future__ import annotations

from dataclasses import dataclass

from phonohash.fingerprint import FINGERPRINT_BYTES, MAX_VALUE, Fingerprint, fingerprint

POSITION_WEIGHTS: tuple[int, ...] = (128, 64, 32, 16, 8, 4, 2, 1)

# Distances strictly below this are "similar". Any difference in the first
# phone alone reaches it.
SIMILARITY_THRESHOLD = 128

MAX_DISTANCE = 8 * sum(POSITION_WEIGHTS)

FingerprintLike = Fingerprint | str


def _coerce(value: FingerprintLike) -> Fingerprint:
    if isinstance(value, Fingerprint):
        return value
    if isinstance(value, str):
        return fingerprint(value)
    raise TypeError(f"Expected Fingerprint or str, got {type(value).__name__}")


@dataclass(frozen=True)
class Difference:
    """The XOR of two fingerprints and the metrics derived from it."""

    xor: int

    def __post_init__(self) -> None:
        if not 0 <= self.xor <= MAX_VALUE:
            raise ValueError(f"Difference out of 64-bit range: {self.xor}")

    @property
    def hamming(self) -> int:
        """Unweighted count of differing bits."""
        return self.xor.bit_count()

    @property
    def per_byte(self) -> tuple[int, ...]:
        """Differing bit count for each byte position, first phone first."""
        return tuple(byte.bit_count() for byte in self.xor.to_bytes(FINGERPRINT_BYTES, "big"))

    @property
    def distance(self) -> int:
        return sum(count * weight for count, weight in zip(self.per_byte, POSITION_WEIGHTS))

    @property
    def similar(self) -> bool:
        return self.distance < SIMILARITY_THRESHOLD


def difference(a: FingerprintLike, b: FingerprintLike) -> Difference:
    """Compare two fingerprints (words are fingerprinted first)."""
    return Difference(int(_coerce(a)) ^ int(_coerce(b)))


def distance(a: FingerprintLike, b: FingerprintLike) -> int:
    """Weighted bit distance; 0 for identical fingerprints, symmetric."""
    return difference(a, b).distance


def similar(a: FingerprintLike, b: FingerprintLike) -> bool:
    """Whether two fingerprints, or two words, sound alike.

    Example:
        similar("jumpo", "jumbo")  # True
        similar("horse", "norse")  # False
    """
    return difference(a, b).similar
