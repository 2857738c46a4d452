from __future__ import annotations

from typing import Protocol, runtime_checkable


# PrimeChecker port defines the boundary for primality checks.
@runtime_checkable
class PrimeChecker(Protocol):
    def is_prime(self, candidate: int) -> bool:
        """Return True if candidate is prime."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("PrimeChecker is a port; use a concrete adapter.")
