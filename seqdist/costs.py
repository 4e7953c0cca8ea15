"""
seqdist.costs — Cost models for weighted edit distance.

A cost model answers three questions about a pair of sequences being
aligned:

    substitution_cost(a, b)   replace a (from seq1) with b (from seq2)
    insertion_cost(b)         insert b (from seq2)
    deletion_cost(a)          delete a (from seq1)

Every answer is a non-negative int or float.  Models must be pure: the
engine is free to call each method any number of times, in any order,
and to cache insertion/deletion costs per element.

The engine does NOT require inheritance.  Any object exposing the three
methods is a cost model; `CostModel` is only a convenient base that
supplies unit costs for the methods a subclass does not override.

TRIMMING
────────

A model may declare `allows_trimming = True`.  This promises:

    • substitution_cost(x, x) == 0 for every x, and
    • stripping a common prefix/suffix never increases the optimal cost
      (true whenever the costs satisfy the triangle inequality, e.g.
      deletion_cost(a) ≤ substitution_cost(a, x) + deletion_cost(x)).

Only then does the engine strip equal affixes before running the DP.
Objects that do not declare the flag are treated as `False`.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Mapping, Optional, Union

from .errors import InvalidCostError

Cost = Union[int, float]


def _check_cost(value: Cost, what: str) -> Cost:
    if isinstance(value, float) and math.isnan(value):
        raise InvalidCostError(f"{what} is NaN")
    if value < 0:
        raise InvalidCostError(f"{what} must be non-negative, got {value!r}")
    return value


# ═══════════════════════════════════════════════════════════════════
#  BASE + UNIT COST
# ═══════════════════════════════════════════════════════════════════

class CostModel:
    """
    Base class for cost models.  Every method defaults to unit cost.

    Subclasses override whichever operations they weight.  The base does
    not know what a subclass changes, so `allows_trimming` is False here;
    subclasses that keep the trimming guarantees set it back to True.
    """
    __slots__ = ()

    allows_trimming = False

    def substitution_cost(self, a: Any, b: Any) -> Cost:
        return 0 if a == b else 1

    def insertion_cost(self, b: Any) -> Cost:
        return 1

    def deletion_cost(self, a: Any) -> Cost:
        return 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class UnitCost(CostModel):
    """Classic Levenshtein: 0 for a match, 1 for anything else."""
    __slots__ = ()

    allows_trimming = True


UNIT_COST = UnitCost()


# ═══════════════════════════════════════════════════════════════════
#  PER-ELEMENT WEIGHTS
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class ElementWeightCost(CostModel):
    """
    Each element carries its own weight w(x).

        insertion_cost(x)       = w(x)
        deletion_cost(x)        = w(x)
        substitution_cost(a, b) = 0 if a == b else max(w(a), w(b))

    Substituting is never cheaper than adding or removing the heavier of
    the two elements, so these costs satisfy the triangle inequality and
    affix trimming stays valid.

    Example:
        heavy = {"E": 3, "C": 2}
        model = ElementWeightCost(lambda x: heavy.get(x, 1))
    """
    weight: Callable[[Any], Cost]

    allows_trimming = True

    def substitution_cost(self, a: Any, b: Any) -> Cost:
        if a == b:
            return 0
        return max(self.weight(a), self.weight(b))

    def insertion_cost(self, b: Any) -> Cost:
        return self.weight(b)

    def deletion_cost(self, a: Any) -> Cost:
        return self.weight(a)


# ═══════════════════════════════════════════════════════════════════
#  CALLABLES
# ═══════════════════════════════════════════════════════════════════

def _unit_substitution(a: Any, b: Any) -> Cost:
    return 0 if a == b else 1


def _unit_indel(x: Any) -> Cost:
    return 1


@dataclass(frozen=True, slots=True)
class FunctionCost(CostModel):
    """
    Cost model assembled from plain callables (functions, lambdas,
    closures, bound methods).  Missing callables fall back to unit costs.

    The engine cannot inspect the callables, so trimming is off unless
    the caller vouches for it with `allows_trimming=True`.

    Example:
        vowels = set("aeiou")
        model = FunctionCost(
            substitution=lambda a, b: 0 if a == b else
                (0.5 if a in vowels and b in vowels else 1),
        )
    """
    substitution: Callable[[Any, Any], Cost] = _unit_substitution
    insertion: Callable[[Any], Cost] = _unit_indel
    deletion: Callable[[Any], Cost] = _unit_indel
    allows_trimming: bool = False

    def substitution_cost(self, a: Any, b: Any) -> Cost:
        return self.substitution(a, b)

    def insertion_cost(self, b: Any) -> Cost:
        return self.insertion(b)

    def deletion_cost(self, a: Any) -> Cost:
        return self.deletion(a)


# ═══════════════════════════════════════════════════════════════════
#  LOOKUP TABLES
# ═══════════════════════════════════════════════════════════════════

def _lookup(table: dict, key: Any) -> Optional[Cost]:
    try:
        return table.get(key)
    except TypeError:
        # unhashable key, so it cannot be in the table
        return None


class TableCost(CostModel):
    """
    Dictionary-driven weights.

        substitutions  {(a, b): cost}   directional: (a, b) ≠ (b, a)
        insertions     {b: cost}
        deletions      {a: cost}
        default        cost for anything not listed

    Equal elements cost 0 to substitute unless the table has an explicit
    (x, x) entry.  Tables can encode arbitrary (non-metric) weights, so
    trimming is off.  Unhashable elements never match a table entry and
    get the default (or 0 for equal elements).

    Example, with cheap OCR confusions:
        TableCost(substitutions={("0", "O"): 0.1, ("O", "0"): 0.1,
                                 ("1", "l"): 0.2, ("l", "1"): 0.2})
    """
    __slots__ = ("substitutions", "insertions", "deletions", "default")

    def __init__(
        self,
        substitutions: Optional[Mapping[tuple[Hashable, Hashable], Cost]] = None,
        insertions: Optional[Mapping[Hashable, Cost]] = None,
        deletions: Optional[Mapping[Hashable, Cost]] = None,
        default: Cost = 1,
    ):
        self.substitutions = dict(substitutions or {})
        self.insertions = dict(insertions or {})
        self.deletions = dict(deletions or {})
        self.default = _check_cost(default, "default cost")

        for key, value in self.substitutions.items():
            _check_cost(value, f"substitution cost for {key!r}")
        for key, value in self.insertions.items():
            _check_cost(value, f"insertion cost for {key!r}")
        for key, value in self.deletions.items():
            _check_cost(value, f"deletion cost for {key!r}")

    def substitution_cost(self, a: Any, b: Any) -> Cost:
        cost = _lookup(self.substitutions, (a, b))
        if cost is not None:
            return cost
        return 0 if a == b else self.default

    def insertion_cost(self, b: Any) -> Cost:
        cost = _lookup(self.insertions, b)
        return self.default if cost is None else cost

    def deletion_cost(self, a: Any) -> Cost:
        cost = _lookup(self.deletions, a)
        return self.default if cost is None else cost

    def __repr__(self) -> str:
        return (f"TableCost({len(self.substitutions)} substitutions, "
                f"{len(self.insertions)} insertions, "
                f"{len(self.deletions)} deletions, default={self.default!r})")


# ═══════════════════════════════════════════════════════════════════
#  SCALING
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class ScaledCost(CostModel):
    """
    Multiply every cost of `inner` by a non-negative `factor`.

    For any model M:  distance_with(a, b, ScaledCost(M, k)) == k × distance_with(a, b, M)
    """
    inner: Any
    factor: Cost

    def __post_init__(self):
        if not is_cost_model(self.inner):
            raise TypeError(f"not a cost model: {self.inner!r}")
        _check_cost(self.factor, "scale factor")

    @property
    def allows_trimming(self) -> bool:
        return getattr(self.inner, "allows_trimming", False)

    def substitution_cost(self, a: Any, b: Any) -> Cost:
        return self.factor * self.inner.substitution_cost(a, b)

    def insertion_cost(self, b: Any) -> Cost:
        return self.factor * self.inner.insertion_cost(b)

    def deletion_cost(self, a: Any) -> Cost:
        return self.factor * self.inner.deletion_cost(a)


# ═══════════════════════════════════════════════════════════════════
#  COERCION
# ═══════════════════════════════════════════════════════════════════

_COST_METHODS = ("substitution_cost", "insertion_cost", "deletion_cost")


def is_cost_model(obj: Any) -> bool:
    """True if `obj` exposes all three cost methods."""
    return all(callable(getattr(obj, name, None)) for name in _COST_METHODS)


def as_cost_model(obj: Any = None) -> Any:
    """
    Return `obj` as a usable cost model.

        None              → UNIT_COST
        has the methods   → obj itself (duck typing, no base class needed)
        anything else     → TypeError
    """
    if obj is None:
        return UNIT_COST
    if is_cost_model(obj):
        return obj
    missing = [name for name in _COST_METHODS if not callable(getattr(obj, name, None))]
    raise TypeError(
        f"{type(obj).__name__} is not a cost model (missing {', '.join(missing)})"
    )
