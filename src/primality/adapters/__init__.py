from .log_sinks import JsonlLogSink, StdoutLogSink
from .prime_checker import TrialDivisionPrimeChecker

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "JsonlLogSink",
    "StdoutLogSink",
    "TrialDivisionPrimeChecker",
]
