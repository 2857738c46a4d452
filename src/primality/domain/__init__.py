from .candidate import (
    DEFAULT_WIDTH,
    SUPPORTED_WIDTHS,
    U64_MAX,
    CandidateError,
    max_candidate,
    require_candidate,
)
from .logging import LOG_LEVELS, LogMessage
from .primality import is_prime, smallest_witness
from .reasons import ReasonCode

# Public domain exports keep imports explicit across layers.
__all__ = [
    "CandidateError",
    "DEFAULT_WIDTH",
    "LOG_LEVELS",
    "LogMessage",
    "ReasonCode",
    "SUPPORTED_WIDTHS",
    "U64_MAX",
    "is_prime",
    "max_candidate",
    "require_candidate",
    "smallest_witness",
]
