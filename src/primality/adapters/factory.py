from __future__ import annotations

from pathlib import Path

from primality.adapters.log_sinks import JsonlLogSink, StdoutLogSink
from primality.adapters.prime_checker import TrialDivisionPrimeChecker
from primality.config.loader import load_config
from primality.config.models import AppConfig, LoggingConfig
from primality.ports.log_sink import LogSink


def log_sink(config: LoggingConfig) -> LogSink | None:
    # Factory for the configured log sink; None when logging is disabled.
    if not config.enabled:
        return None
    if config.sink.kind == "jsonl":
        assert config.sink.path is not None
        return JsonlLogSink(Path(config.sink.path), min_level=config.level)
    return StdoutLogSink(min_level=config.level)


def prime_checker(config: AppConfig) -> TrialDivisionPrimeChecker:
    # Factory for the trial-division checker wired with its optional sink.
    return TrialDivisionPrimeChecker(bits=config.checker.bits, log_sink=log_sink(config.logging))


def build_prime_checker(path: Path) -> TrialDivisionPrimeChecker:
    # Load YAML config and wire the checker in one step.
    return prime_checker(load_config(path))
