"""
seqdist — Generic Weighted Levenshtein Distance
===============================================

Edit distance between any two sequences, with pluggable costs.

    distance("abc", "aaxcc")                         → 3
    distance(["The", "quick"], ["The", "very", "quick"]) → 1
    distance([1, 2, 3], [0, 1, 3, 3, 4])             → 3

Weighted:

    model = TableCost(substitutions={("0", "O"): 0.1, ("O", "0"): 0.1})
    distance_with("N0RTH", "NORTH", model)           → 0.1

Any object with substitution_cost / insertion_cost / deletion_cost is a
cost model; no base class is required.
"""

from seqdist.core import (
    DEFAULT_WIDTH,
    distance,
    distance_with,
    normalized_distance,
)
from seqdist.costs import (
    CostModel,
    UnitCost,
    UNIT_COST,
    ElementWeightCost,
    FunctionCost,
    TableCost,
    ScaledCost,
    as_cost_model,
    is_cost_model,
)
from seqdist.errors import SeqDistError, CostOverflowError, InvalidCostError

__version__ = "0.1.0"
__all__ = [
    "distance", "distance_with", "normalized_distance", "DEFAULT_WIDTH",
    "CostModel", "UnitCost", "UNIT_COST",
    "ElementWeightCost", "FunctionCost", "TableCost", "ScaledCost",
    "as_cost_model", "is_cost_model",
    "SeqDistError", "CostOverflowError", "InvalidCostError",
]
