"""
Tests for seqdist.costs — the stock cost models.

    §1  Unit cost
    §2  Element weights
    §3  Callables
    §4  Lookup tables
    §5  Scaling
    §6  Coercion
"""

import enum
import math

import pytest

from seqdist import (
    UNIT_COST,
    CostModel,
    ElementWeightCost,
    FunctionCost,
    InvalidCostError,
    ScaledCost,
    TableCost,
    UnitCost,
    as_cost_model,
    distance_with,
    is_cost_model,
)

from naive_distance import naive_distance


# ═══════════════════════════════════════════════════════════════════
#  §1  UNIT COST
# ═══════════════════════════════════════════════════════════════════

class TestUnitCost:

    def test_costs(self):
        assert UNIT_COST.substitution_cost("a", "a") == 0
        assert UNIT_COST.substitution_cost("a", "b") == 1
        assert UNIT_COST.insertion_cost("a") == 1
        assert UNIT_COST.deletion_cost("a") == 1

    def test_allows_trimming(self):
        assert UNIT_COST.allows_trimming is True
        assert isinstance(UNIT_COST, UnitCost)

    def test_base_class_does_not_vouch_for_subclasses(self):
        class Vowelly(CostModel):
            def substitution_cost(self, a, b):
                return 0.5 if a in "aeiou" and b in "aeiou" else CostModel.substitution_cost(self, a, b)

        model = Vowelly()
        assert model.allows_trimming is False
        assert model.insertion_cost("x") == 1
        assert distance_with("cat", "cot", model) == pytest.approx(0.5)

    def test_repr(self):
        assert repr(UNIT_COST) == "UnitCost()"


# ═══════════════════════════════════════════════════════════════════
#  §2  ELEMENT WEIGHTS
# ═══════════════════════════════════════════════════════════════════

class P(enum.Enum):
    A = 1
    B = 2
    C = 3
    E = 4


WEIGHTS = {P.C: 2, P.E: 3}
PWEIGHT = ElementWeightCost(lambda p: WEIGHTS.get(p, 1))


class TestElementWeightCost:

    def test_costs(self):
        assert PWEIGHT.insertion_cost(P.E) == 3
        assert PWEIGHT.deletion_cost(P.C) == 2
        assert PWEIGHT.substitution_cost(P.A, P.A) == 0
        assert PWEIGHT.substitution_cost(P.A, P.E) == 3
        assert PWEIGHT.substitution_cost(P.C, P.B) == 2

    def test_expensive_substitution(self):
        assert distance_with([P.B, P.A, P.B], [P.B, P.A, P.E], PWEIGHT) == 3

    def test_complex(self):
        assert distance_with([P.B, P.E, P.C, P.E], [P.B, P.C, P.E], PWEIGHT) == 3

    def test_cheap_delete(self):
        assert distance_with([P.B, P.E], [P.B, P.A, P.E], PWEIGHT) == 1

    def test_matches_reference(self):
        a = [P.E, P.A, P.C, P.C, P.B, P.E]
        b = [P.A, P.E, P.C, P.B, P.B]
        assert distance_with(a, b, PWEIGHT) == naive_distance(a, b, PWEIGHT)

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            PWEIGHT.weight = len


# ═══════════════════════════════════════════════════════════════════
#  §3  CALLABLES
# ═══════════════════════════════════════════════════════════════════

class TestFunctionCost:

    def test_defaults_are_unit_costs(self):
        model = FunctionCost()
        assert model.substitution_cost("a", "a") == 0
        assert model.substitution_cost("a", "b") == 1
        assert model.insertion_cost("a") == 1
        assert model.deletion_cost("a") == 1
        assert model.allows_trimming is False

    def test_closures(self):
        vowels = set("aeiou")

        def sub(a, b):
            if a == b:
                return 0
            return 0.5 if a in vowels and b in vowels else 1

        model = FunctionCost(substitution=sub)
        assert distance_with("bat", "bet", model) == pytest.approx(0.5)
        assert distance_with("bat", "bit", model) == pytest.approx(0.5)
        assert distance_with("bat", "bbt", model) == 1

    def test_bound_methods(self):
        class Keyboard:
            def __init__(self, heavy):
                self.heavy = heavy

            def weight(self, key):
                return self.heavy.get(key, 1)

        keyboard = Keyboard({"x": 4})
        model = FunctionCost(insertion=keyboard.weight, deletion=keyboard.weight)
        assert distance_with("", "xa", model) == 5
        assert distance_with("xa", "", model) == 5

    def test_caller_can_vouch_for_trimming(self):
        model = FunctionCost(allows_trimming=True)
        assert model.allows_trimming is True
        assert distance_with("kitchen", "kitten", model) == 2


# ═══════════════════════════════════════════════════════════════════
#  §4  LOOKUP TABLES
# ═══════════════════════════════════════════════════════════════════

class TestTableCost:

    def test_lookups_and_default(self):
        model = TableCost(
            substitutions={("1", "l"): 0.2},
            insertions={" ": 0.1},
            deletions={"-": 0.3},
            default=2,
        )
        assert model.substitution_cost("1", "l") == pytest.approx(0.2)
        assert model.substitution_cost("l", "1") == 2
        assert model.substitution_cost("q", "q") == 0
        assert model.insertion_cost(" ") == pytest.approx(0.1)
        assert model.insertion_cost("z") == 2
        assert model.deletion_cost("-") == pytest.approx(0.3)
        assert model.deletion_cost("z") == 2

    def test_explicit_self_substitution(self):
        model = TableCost(substitutions={("a", "a"): 0.5})
        assert model.substitution_cost("a", "a") == pytest.approx(0.5)
        assert model.allows_trimming is False

    def test_cheap_whitespace(self):
        model = TableCost(insertions={" ": 0.25}, deletions={" ": 0.25})
        assert distance_with("helloworld", "hello world", model) == pytest.approx(0.25)

    def test_unhashable_elements_use_defaults(self):
        model = TableCost(insertions={"a": 0.5}, default=2)
        assert model.substitution_cost([1], [1]) == 0
        assert model.substitution_cost([1], [2]) == 2
        assert model.insertion_cost([1]) == 2
        assert model.deletion_cost({"k": 1}) == 2
        assert distance_with([[1], [2]], [[1], [3]], model) == 2

    def test_zero_entries_are_kept(self):
        model = TableCost(substitutions={("a", "b"): 0})
        assert distance_with("a", "b", model) == 0

    @pytest.mark.parametrize("kwargs", [
        {"substitutions": {("a", "b"): -1}},
        {"insertions": {"a": -0.5}},
        {"deletions": {"a": math.nan}},
        {"default": -1},
        {"default": math.nan},
    ])
    def test_rejects_invalid_costs(self, kwargs):
        with pytest.raises(InvalidCostError):
            TableCost(**kwargs)

    def test_invalid_cost_is_a_value_error(self):
        with pytest.raises(ValueError, match="non-negative"):
            TableCost(default=-3)

    def test_repr(self):
        model = TableCost(substitutions={("a", "b"): 1}, default=2)
        assert repr(model) == "TableCost(1 substitutions, 0 insertions, 0 deletions, default=2)"


# ═══════════════════════════════════════════════════════════════════
#  §5  SCALING
# ═══════════════════════════════════════════════════════════════════

class TestScaledCost:

    def test_scales_every_operation(self):
        model = ScaledCost(PWEIGHT, 10)
        assert model.insertion_cost(P.E) == 30
        assert model.deletion_cost(P.A) == 10
        assert model.substitution_cost(P.A, P.C) == 20
        assert model.substitution_cost(P.A, P.A) == 0

    def test_inherits_trimming_flag(self):
        assert ScaledCost(UNIT_COST, 2).allows_trimming is True
        assert ScaledCost(TableCost(), 2).allows_trimming is False

    def test_wraps_duck_typed_models(self):
        class Flat:
            def substitution_cost(self, a, b):
                return 0 if a == b else 1

            def insertion_cost(self, b):
                return 1

            def deletion_cost(self, a):
                return 1

        model = ScaledCost(Flat(), 3)
        assert model.allows_trimming is False
        assert distance_with("kitten", "sitting", model) == 9

    def test_rejects_negative_factor(self):
        with pytest.raises(InvalidCostError):
            ScaledCost(UNIT_COST, -1)

    def test_rejects_non_models(self):
        with pytest.raises(TypeError):
            ScaledCost("unit", 2)


# ═══════════════════════════════════════════════════════════════════
#  §6  COERCION
# ═══════════════════════════════════════════════════════════════════

class TestCoercion:

    def test_none_is_unit_cost(self):
        assert as_cost_model(None) is UNIT_COST
        assert as_cost_model() is UNIT_COST

    def test_models_pass_through(self):
        model = TableCost()
        assert as_cost_model(model) is model

    def test_missing_methods_are_named(self):
        class Half:
            def substitution_cost(self, a, b):
                return 1

        with pytest.raises(TypeError, match="insertion_cost, deletion_cost"):
            as_cost_model(Half())

    def test_is_cost_model(self):
        assert is_cost_model(UNIT_COST)
        assert is_cost_model(FunctionCost())
        assert not is_cost_model(42)
        assert not is_cost_model(lambda a, b: 1)
