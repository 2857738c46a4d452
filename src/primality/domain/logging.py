from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

# Ordering used by sinks to drop records below their minimum level.
LOG_LEVELS: dict[str, int] = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Structured log payload emitted by adapters; the pure domain functions never log.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.level or not self.message:
            raise ValueError("LogMessage requires non-empty level/message")
        if self.level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.level!r}")
