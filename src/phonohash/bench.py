"""Word-list benchmark.

Times fingerprinting of a whole word list and compares it with Double
Metaphone over the same words.
"""

import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from metaphone import doublemetaphone

from phonohash.config import SYSTEM_WORD_LISTS
from phonohash.fingerprint import fingerprint


def load_word_list(path: Path | None = None) -> list[str]:
    """Read one word per line, skipping blank lines.

    Without a path the usual system dictionaries are tried in order.

    Raises:
        FileNotFoundError: If no word list can be found.
    """
    candidates = [path] if path is not None else list(SYSTEM_WORD_LISTS)
    for candidate in candidates:
        if candidate.exists():
            text = candidate.read_text(encoding="utf-8", errors="replace")
            return [line.strip() for line in text.splitlines() if line.strip()]
    tried = ", ".join(str(c) for c in candidates)
    raise FileNotFoundError(f"No word list found (tried: {tried})")


@dataclass
class BenchmarkResult:
    """Result from a single benchmark run."""

    name: str
    word_count: int
    fingerprint_seconds: float
    metaphone_seconds: float

    @property
    def fingerprints_per_second(self) -> float:
        if self.fingerprint_seconds == 0:
            return 0.0
        return self.word_count / self.fingerprint_seconds

    @property
    def metaphones_per_second(self) -> float:
        if self.metaphone_seconds == 0:
            return 0.0
        return self.word_count / self.metaphone_seconds

    @property
    def speedup(self) -> float | None:
        """How many times faster fingerprinting is than Double Metaphone."""
        if self.fingerprint_seconds == 0:
            return None
        return self.metaphone_seconds / self.fingerprint_seconds

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "word_count": self.word_count,
            "fingerprint_seconds": self.fingerprint_seconds,
            "metaphone_seconds": self.metaphone_seconds,
            "fingerprints_per_second": self.fingerprints_per_second,
            "metaphones_per_second": self.metaphones_per_second,
            "speedup": self.speedup,
        }

    def to_json(self, path: Path) -> None:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    def summary(self) -> str:
        """Generate human-readable summary."""
        lines = [
            f"Benchmark: {self.name}",
            f"Words: {self.word_count}",
            f"Fingerprint: {self.fingerprint_seconds:.3f}s ({self.fingerprints_per_second:,.0f} words/s)",
            f"Double Metaphone: {self.metaphone_seconds:.3f}s ({self.metaphones_per_second:,.0f} words/s)",
        ]
        if self.speedup is not None:
            lines.append(f"Speedup: {self.speedup:.1f}x")
        return "\n".join(lines)


def run_benchmark(words: Sequence[str], name: str | None = None) -> BenchmarkResult:
    """Time fingerprinting and Double Metaphone over ``words``.

    Args:
        words: Words to encode.
        name: Optional name for this benchmark.

    Returns:
        BenchmarkResult with timings
    """
    start = time.perf_counter()
    for word in words:
        fingerprint(word)
    fingerprint_seconds = time.perf_counter() - start

    start = time.perf_counter()
    for word in words:
        doublemetaphone(word)
    metaphone_seconds = time.perf_counter() - start

    return BenchmarkResult(
        name=name or "words",
        word_count=len(words),
        fingerprint_seconds=fingerprint_seconds,
        metaphone_seconds=metaphone_seconds,
    )
