"""phonohash - locality-sensitive phonetic fingerprints for words."""

from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root (PHONOHASH_HOME and friends)
_env_file = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(_env_file if _env_file.exists() else None)

__version__ = "0.3.0"

from phonohash.distance import (  # noqa: E402
    SIMILARITY_THRESHOLD,
    Difference,
    difference,
    distance,
    similar,
)
from phonohash.fingerprint import ZERO, Fingerprint, fingerprint  # noqa: E402

__all__ = [
    "SIMILARITY_THRESHOLD",
    "ZERO",
    "Difference",
    "Fingerprint",
    "difference",
    "distance",
    "fingerprint",
    "similar",
    "__version__",
]
