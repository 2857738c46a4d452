from __future__ import annotations

from dataclasses import dataclass

from primality.domain.candidate import DEFAULT_WIDTH, CandidateError, max_candidate, require_candidate
from primality.domain.logging import LogMessage
from primality.domain.primality import is_prime
from primality.ports.log_sink import LogSink
from primality.ports.prime_checker import PrimeChecker


@dataclass(frozen=True, slots=True)
class TrialDivisionPrimeChecker(PrimeChecker):
    # Port adapter over the pure trial-division check, narrowed to a configured width.
    bits: int = DEFAULT_WIDTH
    log_sink: LogSink | None = None

    def __post_init__(self) -> None:
        # Fail at construction rather than on the first check.
        max_candidate(self.bits)

    def is_prime(self, candidate: int) -> bool:
        try:
            n = require_candidate(candidate, bits=self.bits)
        except CandidateError as exc:
            self._emit(
                "WARNING",
                "candidate rejected",
                value=repr(exc.value),
                reason=exc.reason.value,
                bits=self.bits,
            )
            raise

        result = is_prime(n)
        self._emit("DEBUG", "primality check", candidate=n, prime=result, bits=self.bits)
        return result

    def _emit(self, level: str, message: str, **fields: object) -> None:
        if self.log_sink is None:
            return
        self.log_sink.emit(LogMessage(level=level, message=message, fields=fields))
