from .domain import (
    U64_MAX,
    CandidateError,
    ReasonCode,
    is_prime,
    require_candidate,
    smallest_witness,
)

__all__ = [
    "CandidateError",
    "ReasonCode",
    "U64_MAX",
    "is_prime",
    "require_candidate",
    "smallest_witness",
]
