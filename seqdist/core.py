"""
seqdist.core — Weighted Levenshtein Distance
=============================================

§1  THE RECURRENCE
──────────────────

For sequences a (length m) and b (length n) and a cost model with
del(x), ins(y), sub(x, y):

    D[0][0] = 0
    D[i][0] = D[i-1][0] + del(aᵢ)
    D[0][j] = D[0][j-1] + ins(bⱼ)
    D[i][j] = min(
        D[i-1][j]   + del(aᵢ),          # delete aᵢ
        D[i][j-1]   + ins(bⱼ),          # insert bⱼ
        D[i-1][j-1] + sub(aᵢ, bⱼ),      # substitute (or match)
    )

    distance(a, b) = D[m][n]

This is Wagner–Fischer (1974).  With unit costs it is exactly
Levenshtein (1965).


§2  SPACE
─────────

Row i only reads row i-1, so two flat lists are enough.  The lists are
sized by the SHORTER input: when a is shorter the table is stored
transposed (rows walk b, columns walk a).  The transposition only
changes storage; the engine still charges del() to elements of a,
ins() to elements of b and calls sub(aᵢ, bⱼ) with a's element first,
so asymmetric cost models give the same answer either way.

Memory per call: O(min(m, n)) for the rows plus O(m + n) for the
precomputed insertion/deletion costs.


§3  AFFIX TRIMMING
──────────────────

If a and b share a prefix or suffix, under a model where matching equal
elements is free and costs obey the triangle inequality, those positions
never change the result:

    D("kitchen", "kitten") == D("ch", "t")

so the engine strips them before the DP.  This is the main speed-up for
near-identical inputs.  It is only applied when the model declares
`allows_trimming`; see seqdist.costs.


§4  NUMBERS
───────────

Python ints never wrap, so every value in the table is exact.  To bound
the result to an N-bit unsigned range, pass width=N (or set
DEFAULT_WIDTH): a result above 2**N - 1 raises CostOverflowError instead
of being returned.  Only the result is checked; intermediate cells may
exceed the limit without error.  Float accumulation that ends at
infinity also raises CostOverflowError; a NaN result raises InvalidCostError.
"""

import logging
import math
from typing import Any, Optional, Sequence

from .costs import UNIT_COST, Cost, as_cost_model
from .errors import CostOverflowError, InvalidCostError

logger = logging.getLogger(__name__)

# Accumulator width in bits; None means unbounded Python ints.
# Read on every call, so callers may change it at runtime.
DEFAULT_WIDTH: Optional[int] = None

_UNSET = object()


# ═══════════════════════════════════════════════════════════════════
#  PUBLIC ENTRY POINTS
# ═══════════════════════════════════════════════════════════════════

def distance(seq1: Sequence[Any], seq2: Sequence[Any]) -> int:
    """
    Unit-cost Levenshtein distance between two sequences.

    Works on anything indexable whose elements support ==:

        distance("abc", "aaxcc")                                    → 3
        distance("The quick brown fox".split(),
                 "The very quick brown cat".split())                → 2
        distance([1, 2, 3], [0, 1, 3, 3, 4])                        → 3
    """
    return distance_with(seq1, seq2, UNIT_COST)


def distance_with(
    seq1: Sequence[Any],
    seq2: Sequence[Any],
    cost_model: Any = None,
    *,
    width: Any = _UNSET,
) -> Cost:
    """
    Weighted edit distance: minimum total cost of deletions, insertions
    and substitutions turning `seq1` into `seq2`.

    `cost_model` is any object with substitution_cost / insertion_cost /
    deletion_cost (None → unit costs).  `width` bounds the result to
    `width` bits; omitted means DEFAULT_WIDTH, None means unbounded.
    See §4.

    Raises:
        CostOverflowError  if the result cannot be represented.
        InvalidCostError   if the model produced NaN costs.
        TypeError          if `cost_model` is not a cost model.
        ValueError         if `width` is not a positive int.
    """
    model = as_cost_model(cost_model)
    if width is _UNSET:
        width = DEFAULT_WIDTH
    limit = _width_limit(width)

    m, n = len(seq1), len(seq2)
    head, tail = 0, 0
    if getattr(model, "allows_trimming", False):
        head, tail = _common_affixes(seq1, seq2)
        if head + tail == m and head + tail == n:
            return 0

    a = [seq1[i] for i in range(head, m - tail)]
    b = [seq2[j] for j in range(head, n - tail)]

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "edit distance: %d×%d reduced to %d×%d (prefix=%d, suffix=%d, transposed=%s)",
            m, n, len(a), len(b), head, tail, bool(a) and bool(b) and len(a) < len(b),
        )

    deletions = [model.deletion_cost(x) for x in a]
    insertions = [model.insertion_cost(y) for y in b]

    if not a:
        result = sum(insertions)
    elif not b:
        result = sum(deletions)
    elif len(a) < len(b):
        result = _transposed_rows(a, b, deletions, insertions, model.substitution_cost)
    else:
        result = _rows(a, b, deletions, insertions, model.substitution_cost)

    return _checked(result, limit)


def normalized_distance(
    seq1: Sequence[Any],
    seq2: Sequence[Any],
    cost_model: Any = None,
) -> float:
    """
    Edit distance scaled into [0, 1].

    0.0 = identical
    1.0 = as far apart as "delete everything" or "insert everything"

    The denominator is max(total deletion cost of seq1, total insertion
    cost of seq2), which is max(len(seq1), len(seq2)) for unit costs.
    """
    model = as_cost_model(cost_model)
    d = distance_with(seq1, seq2, model)
    if d == 0:
        return 0.0
    denom = max(
        sum(model.deletion_cost(x) for x in seq1),
        sum(model.insertion_cost(y) for y in seq2),
    )
    if denom == 0:
        return 0.0
    return min(1.0, d / denom)


# ═══════════════════════════════════════════════════════════════════
#  DP KERNELS
# ═══════════════════════════════════════════════════════════════════

def _rows(a: list, b: list, deletions: list, insertions: list, substitution_cost) -> Cost:
    """Two-row DP with rows over a and columns over b (b is the shorter)."""
    n = len(b)

    prev = [0] * (n + 1)
    for j in range(n):
        prev[j + 1] = prev[j] + insertions[j]
    curr = [0] * (n + 1)

    for i, x in enumerate(a):
        del_x = deletions[i]
        curr[0] = prev[0] + del_x

        for j, y in enumerate(b):
            curr[j + 1] = min(
                prev[j + 1] + del_x,                # delete x
                curr[j] + insertions[j],            # insert y
                prev[j] + substitution_cost(x, y),  # substitute x → y
            )

        prev, curr = curr, prev

    return prev[n]


def _transposed_rows(a: list, b: list, deletions: list, insertions: list, substitution_cost) -> Cost:
    """
    Same DP stored transposed: rows over b, columns over a (a is the
    shorter).  prev[i] holds D[i][j], curr[i] holds D[i][j+1].
    """
    m = len(a)

    prev = [0] * (m + 1)
    for i in range(m):
        prev[i + 1] = prev[i] + deletions[i]
    curr = [0] * (m + 1)

    for j, y in enumerate(b):
        ins_y = insertions[j]
        curr[0] = prev[0] + ins_y

        for i, x in enumerate(a):
            curr[i + 1] = min(
                curr[i] + deletions[i],             # delete x
                prev[i + 1] + ins_y,                # insert y
                prev[i] + substitution_cost(x, y),  # substitute x → y
            )

        prev, curr = curr, prev

    return prev[m]


# ═══════════════════════════════════════════════════════════════════
#  HELPERS
# ═══════════════════════════════════════════════════════════════════

def _common_affixes(seq1: Sequence[Any], seq2: Sequence[Any]) -> tuple[int, int]:
    """Lengths of the longest common prefix and (non-overlapping) suffix."""
    m, n = len(seq1), len(seq2)
    shortest = min(m, n)

    head = 0
    while head < shortest and seq1[head] == seq2[head]:
        head += 1

    tail = 0
    while tail < shortest - head and seq1[m - 1 - tail] == seq2[n - 1 - tail]:
        tail += 1

    return head, tail


def _width_limit(width: Optional[int]) -> Optional[int]:
    if width is None:
        return None
    if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
        raise ValueError(f"width must be a positive int, got {width!r}")
    return (1 << width) - 1


def _checked(value: Cost, limit: Optional[int]) -> Cost:
    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidCostError("cost model produced NaN costs")
        if math.isinf(value):
            logger.debug("edit distance overflowed to %r", value)
            raise CostOverflowError(value)
    if limit is not None and value > limit:
        logger.debug("edit distance %r exceeds %d-bit accumulator", value, limit.bit_length())
        raise CostOverflowError(value, limit)
    return value
