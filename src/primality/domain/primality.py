"""Trial-division primality check over fixed-width unsigned integers.

A candidate is prime when it is at least 2 and has no divisor other than 1
and itself. The check handles the edge cases first:

* 0 and 1 are not prime;
* 2 is prime (the only even prime);
* every other even number is composite.

Odd candidates are then divided by 3, 5, 7, ... while ``divisor`` does not
exceed ``candidate // divisor``. That bound is ``divisor * divisor <= candidate``
written with division, so it stays inside the 64-bit range even for
candidates close to ``2**64 - 1``. Any factor pair of a composite number has
one member at or below the square root, so no witness is missed.

Candidates are validated as 64-bit unsigned integers before the check;
values outside ``0 .. 2**64 - 1`` raise :class:`CandidateError`.
"""

from __future__ import annotations

from .candidate import require_candidate


def is_prime(candidate: int) -> bool:
    """Return True if ``candidate`` is prime.

    The function is pure and total over ``0 .. 2**64 - 1``; it never raises
    for a representable candidate. Cost is O(sqrt(candidate)).

    >>> is_prime(0), is_prime(1)
    (False, False)
    >>> is_prime(2), is_prime(3)
    (True, True)
    >>> is_prime(4), is_prime(100)
    (False, False)
    >>> is_prime(97)
    True
    >>> is_prime(104729)
    True
    """
    n = require_candidate(candidate)
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    divisor = 3
    while divisor <= n // divisor:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


def smallest_witness(candidate: int) -> int | None:
    """Return the smallest divisor proving ``candidate`` composite.

    Returns None for 0, 1 and for primes, which have no such divisor.

    >>> smallest_witness(91)
    7
    >>> smallest_witness(1024)
    2
    >>> smallest_witness(97) is None
    True
    >>> smallest_witness(1) is None
    True
    """
    n = require_candidate(candidate)
    if n < 4:
        return None
    if n % 2 == 0:
        return 2

    divisor = 3
    while divisor <= n // divisor:
        if n % divisor == 0:
            return divisor
        divisor += 2
    return None
