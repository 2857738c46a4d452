from __future__ import annotations

import json
from pathlib import Path

from primality.domain.logging import LOG_LEVELS, LogMessage
from primality.ports.log_sink import LogSink


class StdoutLogSink(LogSink):
    # Minimal structured log sink writing one JSON object per line to stdout.
    def __init__(self, *, min_level: str = "INFO") -> None:
        self._threshold = _threshold(min_level)

    def emit(self, message: LogMessage) -> None:
        if LOG_LEVELS[message.level] < self._threshold:
            return
        print(json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False))

    def close(self) -> None:
        # Nothing to release; stdout is owned by the process.
        return None


class JsonlLogSink(LogSink):
    # File-backed structured log sink; appends to an existing file.
    def __init__(self, path: Path, *, min_level: str = "INFO") -> None:
        self._threshold = _threshold(min_level)
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        if LOG_LEVELS[message.level] < self._threshold:
            return
        payload = json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()


def _threshold(min_level: str) -> int:
    if min_level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {min_level!r}")
    return LOG_LEVELS[min_level]


def _log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
