from __future__ import annotations

from .reasons import ReasonCode

SUPPORTED_WIDTHS: tuple[int, ...] = (8, 16, 32, 64)
DEFAULT_WIDTH = 64


class CandidateError(ValueError):
    def __init__(self, reason: ReasonCode, value: object) -> None:
        super().__init__(reason.value)
        self.reason = reason
        self.value = value


def max_candidate(bits: int = DEFAULT_WIDTH) -> int:
    # Largest value representable by an unsigned integer of the given width.
    if bits not in SUPPORTED_WIDTHS:
        raise ValueError(f"Unsupported candidate width: {bits!r} (expected one of {SUPPORTED_WIDTHS})")
    return (1 << bits) - 1


U64_MAX = max_candidate(64)


def require_candidate(value: object, *, bits: int = DEFAULT_WIDTH) -> int:
    # Python ints are signed and unbounded; enforce the fixed-width unsigned domain here.
    upper = max_candidate(bits)
    # bool is an int subclass but never a meaningful candidate.
    if isinstance(value, bool) or not isinstance(value, int):
        raise CandidateError(ReasonCode.NOT_AN_INTEGER, value)
    if value < 0:
        raise CandidateError(ReasonCode.NEGATIVE_CANDIDATE, value)
    if value > upper:
        raise CandidateError(ReasonCode.CANDIDATE_TOO_WIDE, value)
    return value
