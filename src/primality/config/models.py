from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures.


class CheckerConfig(BaseModel):
    # Width of the unsigned candidate domain accepted by the checker adapter.
    model_config = ConfigDict(extra="forbid")
    bits: Literal[8, 16, 32, 64] = 64


class LogSinkConfig(BaseModel):
    # Log sink selector: only one sink is active at a time.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["stdout", "jsonl"] = "stdout"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LogSinkConfig:
        # For jsonl kind, a path is required to avoid silent defaults.
        if self.kind == "jsonl" and not self.path:
            raise ValueError("logging.sink.path is required when kind is 'jsonl'")
        return self


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    enabled: bool = False
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    sink: LogSinkConfig = Field(default_factory=LogSinkConfig)


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int
    checker: CheckerConfig = Field(default_factory=CheckerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
