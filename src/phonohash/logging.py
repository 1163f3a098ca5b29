"""Structured session logging for phonohash commands.

Logs CLI sessions to ~/.phonohash/logs/ in JSON-lines format so hashing,
comparison and suggestion runs can be reviewed later.

Example usage:
    from phonohash.logging import SessionLogger

    logger = SessionLogger("compare")
    logger.log_comparison("jumpo", "jumbo", distance=2, similar=True)
    logger.finalize()
"""

import atexit
import json
import sys
import threading
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from phonohash.config import CONFIG_DIR

LOGS_DIR = CONFIG_DIR / "logs"


@dataclass
class SessionMetrics:
    """Aggregated metrics for a session."""

    words_hashed: int = 0
    comparisons: int = 0
    similar_pairs: int = 0
    suggestion_queries: int = 0
    suggestions_returned: int = 0
    errors: int = 0


@dataclass
class SessionLogger:
    """Session-based logger for command events."""

    command: str
    session_id: str = field(default_factory=lambda: datetime.now().strftime("%Y%m%d_%H%M%S_%f"))
    logs_dir: Path | None = None
    log_file: Path = field(init=False)
    metrics: SessionMetrics = field(default_factory=SessionMetrics)
    _started: datetime = field(default_factory=datetime.now)
    _log_buffer: list[dict[str, Any]] = field(default_factory=list)
    _BUFFER_SIZE: int = field(default=10, repr=False)
    _buffer_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self):
        directory = self.logs_dir or LOGS_DIR
        directory.mkdir(parents=True, exist_ok=True)
        self.log_file = directory / f"session_{self.session_id}.jsonl"
        self._write_event("session_start", {
            "command": self.command,
            "timestamp": self._started.isoformat(),
        })

    def log_fingerprint(self, word: str, hex_value: str) -> None:
        self.metrics.words_hashed += 1
        self._write_event("fingerprint", {"word": word, "fingerprint": hex_value})

    def log_comparison(self, a: str, b: str, distance: int, similar: bool) -> None:
        """Log a pairwise comparison."""
        self.metrics.comparisons += 1
        if similar:
            self.metrics.similar_pairs += 1
        self._write_event("comparison", {
            "a": a,
            "b": b,
            "distance": distance,
            "similar": similar,
        })

    def log_suggestions(self, query: str, suggestions: list[str], scanned: int) -> None:
        """Log a suggestion query and the words it returned."""
        self.metrics.suggestion_queries += 1
        self.metrics.suggestions_returned += len(suggestions)
        self._write_event("suggestions", {
            "query": query,
            "scanned": scanned,
            "returned": suggestions[:20],
        })

    def log_benchmark(self, result: dict) -> None:
        self.metrics.words_hashed += int(result.get("word_count", 0))
        self._write_event("benchmark", result)

    def log_error(self, error_type: str, message: str, details: dict | None = None) -> None:
        """Log an error event."""
        self.metrics.errors += 1
        self._write_event("error", {
            "error_type": error_type,
            "message": message,
            "details": details or {},
        })

    def finalize(self) -> dict:
        """Finalize session and write summary.

        Returns:
            Summary metrics dict
        """
        elapsed = (datetime.now() - self._started).total_seconds()
        summary = {
            "command": self.command,
            "duration_seconds": round(elapsed, 3),
            "words_hashed": self.metrics.words_hashed,
            "comparisons": self.metrics.comparisons,
            "similar_pairs": self.metrics.similar_pairs,
            "suggestion_queries": self.metrics.suggestion_queries,
            "suggestions_returned": self.metrics.suggestions_returned,
            "errors": self.metrics.errors,
            "similar_rate": self._calc_similar_rate(),
        }
        self._write_event("session_complete", summary)
        self._flush_logs()
        return summary

    def _calc_similar_rate(self) -> float | None:
        if self.metrics.comparisons > 0:
            return round(self.metrics.similar_pairs / self.metrics.comparisons * 100, 1)
        return None

    def _write_event(self, event_type: str, data: dict) -> None:
        """Buffer a JSON event and flush when buffer is full.

        Thread-safe: Uses _buffer_lock to prevent concurrent buffer modifications.
        """
        event = {
            "event": event_type,
            "ts": datetime.now().isoformat(),
            **data,
        }

        with self._buffer_lock:
            self._log_buffer.append(event)
            critical_events = {"session_start", "session_complete", "error"}
            buffer_full = len(self._log_buffer) >= self._BUFFER_SIZE
            should_flush = buffer_full or event_type in critical_events

        # Flush outside the lock to avoid holding lock during I/O
        if should_flush:
            self._flush_logs()

    def _flush_logs(self) -> None:
        """Flush buffered log events to disk."""
        with self._buffer_lock:
            if not self._log_buffer:
                return
            events_to_write = self._log_buffer.copy()

        try:
            with open(self.log_file, "a", encoding="utf-8") as f:
                for event in events_to_write:
                    f.write(json.dumps(event, ensure_ascii=False, default=str) + "\n")

            # Only clear buffer after successful write
            with self._buffer_lock:
                written = len(events_to_write)
                self._log_buffer = self._log_buffer[written:]

        except OSError as e:
            # Keep buffer intact for retry
            print(f"Warning: Failed to flush logs to {self.log_file}: {e}", file=sys.stderr)


# Global logger instance for current session (thread-safe)
_current_logger: SessionLogger | None = None
_logger_lock = threading.Lock()


def get_logger() -> SessionLogger | None:
    """Get the current session logger (thread-safe)."""
    with _logger_lock:
        return _current_logger


def set_logger(logger: SessionLogger | None) -> None:
    """Set the current session logger (thread-safe)."""
    global _current_logger
    with _logger_lock:
        _current_logger = logger


def log_event(event_type: str, data: dict) -> None:
    """Log to the current session if one is active (thread-safe)."""
    with _logger_lock:
        if _current_logger:
            _current_logger._write_event(event_type, data)


def _flush_on_exit():
    """Flush any pending log events on process exit."""
    with _logger_lock:
        if _current_logger and _current_logger._log_buffer:
            _current_logger._flush_logs()


atexit.register(_flush_on_exit)


def analyze_logs(limit: int = 10, logs_dir: Path | None = None) -> dict[str, Any]:
    """Aggregate the most recent session logs.

    Returns:
        Totals across sessions plus the most frequently compared words.
    """
    directory = logs_dir or LOGS_DIR
    if not directory.exists():
        return {"error": "No logs directory found"}

    log_files = sorted(directory.glob("session_*.jsonl"), reverse=True)[:limit]
    if not log_files:
        return {"error": "No log files found"}

    summaries: list[dict] = []
    commands: dict[str, int] = {}
    word_counts: dict[str, int] = {}

    for log_file in log_files:
        try:
            content = log_file.read_text(encoding="utf-8")
        except OSError:
            continue

        for line in content.splitlines():
            if not line.strip():
                continue
            try:
                event = json.loads(line)
            except json.JSONDecodeError:
                continue

            kind = event.get("event")
            if kind == "session_start":
                command = event.get("command", "unknown")
                commands[command] = commands.get(command, 0) + 1
            elif kind == "comparison":
                for key in ("a", "b"):
                    word = str(event.get(key, "")).lower()
                    if word:
                        word_counts[word] = word_counts.get(word, 0) + 1
            elif kind == "session_complete":
                summaries.append(event)

    total_comparisons = sum(s.get("comparisons", 0) for s in summaries)
    total_similar = sum(s.get("similar_pairs", 0) for s in summaries)
    similar_rate = None
    if total_comparisons > 0:
        similar_rate = round(total_similar / total_comparisons * 100, 1)

    return {
        "sessions_analyzed": len(log_files),
        "commands": commands,
        "words_hashed": sum(s.get("words_hashed", 0) for s in summaries),
        "comparisons": total_comparisons,
        "similar_rate": similar_rate,
        "suggestion_queries": sum(s.get("suggestion_queries", 0) for s in summaries),
        "errors": sum(s.get("errors", 0) for s in summaries),
        "common_words": sorted(word_counts.items(), key=lambda x: -x[1])[:20],
    }
