"""Levenshtein distance over Unicode code points.

The distance is the number of insertions, deletions and substitutions needed
to transform one sequence into another, with the substitution cost supplied by
a cost function. It is computed in terms of code points and does not perform
normalisation: if different normalised forms may occur, normalise beforehand.

With a maximum distance the computation is restricted to a diagonal band and
stops as soon as the result is known to reach the maximum. See:
Gusfield, Dan (1997). Algorithms on strings, trees, and sequences: computer
science and computational biology. Cambridge University Press. pp. 263-264.
"""

from typing import Iterable, Optional

from phonlev.errors import InvalidArgumentError, InvalidSequenceError
from .contracts import CostFunction
from .costs import identity_cost, phonetic_cost
from .types import DistanceResult, SymbolSequence, TextOrSymbols


_SYMMETRIC_COSTS = (identity_cost, phonetic_cost)
_MAX_CODE_POINT = 0x10FFFF


def to_symbols(value: TextOrSymbols) -> SymbolSequence:
    """Decode text into code points; decoded sequences pass through."""
    if isinstance(value, str):
        return tuple(ord(char) for char in value)
    if isinstance(value, tuple):
        symbols = value
    elif isinstance(value, (bytes, bytearray)):
        raise InvalidSequenceError(value, "bytes must be decoded to text first")
    else:
        try:
            symbols = tuple(value)
        except TypeError:
            raise InvalidSequenceError(value, "expected text or a sequence of code points")
    for symbol in symbols:
        if not isinstance(symbol, int) or isinstance(symbol, bool):
            raise InvalidSequenceError(value, f"non-integer symbol {symbol!r}")
        if not 0 <= symbol <= _MAX_CODE_POINT:
            raise InvalidSequenceError(value, f"{symbol} is not a code point")
    return symbols


def validate_max_distance(max_distance: int) -> None:
    """Reject caps that are not non-negative integers."""
    if not isinstance(max_distance, int) or isinstance(max_distance, bool):
        raise InvalidArgumentError("max_distance", max_distance, "must be an integer")
    if max_distance < 0:
        raise InvalidArgumentError("max_distance", max_distance, "must not be negative")


def _reversed(cost: CostFunction) -> CostFunction:
    """Cost with its arguments swapped back after the sequences were swapped."""
    # Identity only; cost callables need not be hashable or comparable
    if any(cost is symmetric for symmetric in _SYMMETRIC_COSTS):
        return cost

    def reversed_cost(a, b):
        return cost(b, a)

    return reversed_cost


def distance_without_maximum(
    str1: TextOrSymbols,
    str2: TextOrSymbols,
    cost: CostFunction = identity_cost
) -> int:
    """Full dynamic-programming distance using a single rolling row."""
    s = to_symbols(str1)
    t = to_symbols(str2)
    n = len(s)
    m = len(t)

    if n == 0:
        return m
    if m == 0:
        return n

    # The row spans the shorter sequence
    if m > n:
        s, t, n, m = t, s, m, n
        cost = _reversed(cost)

    d = list(range(m + 1))
    x = 0

    for i in range(n):
        e = i + 1
        symbol = s[i]
        for j in range(m):
            insertion = d[j + 1] + 1
            deletion = e + 1
            substitution = d[j] + cost(symbol, t[j])
            x = insertion if insertion < deletion else deletion
            if substitution < x:
                x = substitution

            d[j] = e
            e = x
        d[m] = x

    return x


def distance_with_maximum(
    str1: TextOrSymbols,
    str2: TextOrSymbols,
    max_distance: int,
    cost: CostFunction = identity_cost
) -> int:
    """Banded distance, capped at max_distance.

    Returns min(true distance, max_distance).
    """
    validate_max_distance(max_distance)

    s = to_symbols(str1)
    t = to_symbols(str2)
    n = len(s)
    m = len(t)

    # s is always the shorter of the two
    if m < n:
        s, t, n, m = t, s, m, n
        cost = _reversed(cost)

    # Insertions alone already reach the maximum
    if m - n >= max_distance:
        return max_distance

    if s == t:
        return 0
    if n == 0:
        return m

    # Larger than any distance reachable inside the band
    big_int = n * m + 1

    d = [k if k < m or k < max_distance + 1 else big_int for k in range(m + 1)]
    x = big_int

    for i in range(n):
        start = i - max_distance - 1
        if start < 0:
            start = 0
        stop = i + max_distance
        if stop > m - 1:
            stop = m - 1

        # Stale cells left of the band must not leak into this row; only a
        # band anchored at column 0 has a real boundary value
        if start == 0:
            e = i + 1
        else:
            e = big_int

        diag_index = m - n + i
        symbol = s[i]

        for j in range(start, stop + 1):
            # The alignment diagonal never decreases again
            if j == diag_index and d[j] >= max_distance:
                return max_distance

            insertion = d[j + 1] + 1
            deletion = e + 1
            substitution = d[j] + cost(symbol, t[j])
            x = insertion if insertion < deletion else deletion
            if substitution < x:
                x = substitution

            d[j] = e
            e = x
        d[stop + 1] = x

    if x > max_distance:
        return max_distance
    return x


def distance(
    str1: TextOrSymbols,
    str2: TextOrSymbols,
    max_distance: Optional[int] = None,
    cost: CostFunction = identity_cost
) -> int:
    """Levenshtein distance between str1 and str2.

    Args:
        str1: Text, or code points decoded with to_symbols()
        str2: Text, or code points decoded with to_symbols()
        max_distance: Stop once the distance reaches this value and return it
        cost: Substitution cost between two symbols

    Returns:
        The distance, or max_distance if the distance is at least that

    Raises:
        InvalidArgumentError: max_distance is negative
        InvalidSequenceError: an input is neither text nor code points
    """
    if max_distance is None:
        return distance_without_maximum(str1, str2, cost)
    return distance_with_maximum(str1, str2, max_distance, cost)


def _label(value: TextOrSymbols) -> str:
    if isinstance(value, str):
        return value
    return "".join(chr(symbol) for symbol in value)


def batch_distance(
    source: TextOrSymbols,
    candidates: Iterable[TextOrSymbols],
    max_distance: Optional[int] = None,
    cost: CostFunction = identity_cost
) -> list[DistanceResult]:
    """Compare one source against many candidates, decoding the source once."""
    if max_distance is not None:
        validate_max_distance(max_distance)

    symbols = to_symbols(source)
    label = _label(source)

    results = []
    for candidate in candidates:
        target = candidate if isinstance(candidate, str) else to_symbols(candidate)
        value = distance(symbols, target, max_distance, cost)
        results.append(DistanceResult(
            source=label,
            target=_label(target),
            distance=value,
            max_distance=max_distance,
            bounded=max_distance is not None and value >= max_distance
        ))
    return results
