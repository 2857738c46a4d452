from __future__ import annotations

import pytest

from primality.adapters.prime_checker import TrialDivisionPrimeChecker
from primality.domain.candidate import U64_MAX, CandidateError
from primality.domain.logging import LogMessage
from primality.domain.reasons import ReasonCode


class _SpySink:
    def __init__(self) -> None:
        self.messages: list[LogMessage] = []
        self.closed = False

    def emit(self, message: LogMessage) -> None:
        self.messages.append(message)

    def close(self) -> None:
        self.closed = True


def test_prime_checker_basic_values() -> None:
    # Basic primality rules (n <= 1 not prime; 2 and 3 prime; even > 2 not prime).
    checker = TrialDivisionPrimeChecker()
    assert checker.is_prime(0) is False
    assert checker.is_prime(1) is False
    assert checker.is_prime(2) is True
    assert checker.is_prime(3) is True
    assert checker.is_prime(4) is False
    assert checker.is_prime(17) is True
    assert checker.is_prime(18) is False


def test_prime_checker_defaults_to_64_bits() -> None:
    checker = TrialDivisionPrimeChecker()
    assert checker.bits == 64
    assert checker.is_prime(U64_MAX) is False


def test_prime_checker_narrow_width_rejects_wider_values() -> None:
    checker = TrialDivisionPrimeChecker(bits=8)
    assert checker.is_prime(251) is True
    with pytest.raises(CandidateError) as excinfo:
        checker.is_prime(257)
    assert excinfo.value.reason is ReasonCode.CANDIDATE_TOO_WIDE


def test_prime_checker_rejects_negative_candidates() -> None:
    # Negative inputs are outside the unsigned domain rather than "not prime".
    with pytest.raises(CandidateError) as excinfo:
        TrialDivisionPrimeChecker().is_prime(-3)
    assert excinfo.value.reason is ReasonCode.NEGATIVE_CANDIDATE


def test_prime_checker_unsupported_width_fails_at_construction() -> None:
    with pytest.raises(ValueError):
        TrialDivisionPrimeChecker(bits=12)


def test_prime_checker_logs_each_check() -> None:
    sink = _SpySink()
    checker = TrialDivisionPrimeChecker(log_sink=sink)

    assert checker.is_prime(97) is True
    assert checker.is_prime(100) is False

    assert [m.level for m in sink.messages] == ["DEBUG", "DEBUG"]
    assert sink.messages[0].message == "primality check"
    assert sink.messages[0].fields == {"candidate": 97, "prime": True, "bits": 64}
    assert sink.messages[1].fields["prime"] is False


def test_prime_checker_logs_rejection_and_reraises() -> None:
    sink = _SpySink()
    checker = TrialDivisionPrimeChecker(bits=16, log_sink=sink)

    with pytest.raises(CandidateError):
        checker.is_prime(70_000)

    assert len(sink.messages) == 1
    rejected = sink.messages[0]
    assert rejected.level == "WARNING"
    assert rejected.message == "candidate rejected"
    assert rejected.fields == {"value": "70000", "reason": "CANDIDATE_TOO_WIDE", "bits": 16}


def test_prime_checker_is_immutable() -> None:
    checker = TrialDivisionPrimeChecker()
    with pytest.raises(AttributeError):
        checker.bits = 32  # type: ignore[misc]
