from __future__ import annotations

from enum import Enum


# Stable reason codes attached to candidate boundary errors.
class ReasonCode(str, Enum):
    NOT_AN_INTEGER = "NOT_AN_INTEGER"
    NEGATIVE_CANDIDATE = "NEGATIVE_CANDIDATE"
    CANDIDATE_TOO_WIDE = "CANDIDATE_TOO_WIDE"
