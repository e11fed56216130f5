import math

import pytest

from eis import (
    CloneError,
    Kind,
    StateDict,
    StateList,
    config,
    deep_freeze,
    kind_of,
    structural_clone,
)


class TestKindOf:
    @pytest.mark.parametrize("value", [None, True, 0, 1.5, "text"])
    def test_primitives(self, value):
        assert kind_of(value) is Kind.PRIMITIVE

    @pytest.mark.parametrize("value", [[], (), [1, [2]]])
    def test_sequences(self, value):
        assert kind_of(value) is Kind.SEQUENCE

    def test_maps(self):
        assert kind_of({}) is Kind.MAP
        assert kind_of(StateDict(a=1)) is Kind.MAP

    @pytest.mark.parametrize("value", [lambda: None, {1, 2}, b"raw", object()])
    def test_non_data_is_rejected(self, value):
        with pytest.raises(CloneError):
            kind_of(value)


class TestStructuralClone:
    def test_primitives_pass_through(self):
        text = "hello"
        assert structural_clone(text) is text
        assert structural_clone(None) is None
        assert structural_clone(42) == 42

    def test_copy_is_independent(self):
        original = {"nested": {"x": 1}, "arr": [{"y": 2}]}
        copied = structural_clone(original)

        assert copied == original
        assert copied is not original
        assert copied["nested"] is not original["nested"]
        assert copied["arr"] is not original["arr"]
        assert copied["arr"][0] is not original["arr"][0]

        original["nested"]["x"] = 99
        original["arr"].append("extra")
        assert copied == {"nested": {"x": 1}, "arr": [{"y": 2}]}

    def test_copy_uses_state_containers(self):
        copied = structural_clone({"items": [1, 2]})
        assert isinstance(copied, StateDict)
        assert isinstance(copied["items"], StateList)
        assert not copied.frozen

    def test_tuple_becomes_list(self):
        copied = structural_clone({"point": (1, 2)})
        assert copied["point"] == [1, 2]
        assert isinstance(copied["point"], StateList)

    def test_shared_subtree_is_not_a_cycle(self):
        shared = {"v": 1}
        copied = structural_clone([shared, shared])
        assert copied == [{"v": 1}, {"v": 1}]
        assert copied[0] is not copied[1]

    def test_cycle_is_rejected(self):
        looped = {"a": 1}
        looped["self"] = looped
        with pytest.raises(CloneError, match="cyclic"):
            structural_clone(looped)

    def test_function_is_rejected(self):
        with pytest.raises(CloneError):
            structural_clone({"f": lambda: None})

    def test_non_str_key_is_rejected(self):
        with pytest.raises(CloneError, match="keys must be str"):
            structural_clone({1: "one"})

    @pytest.mark.parametrize("value", [2**53, -(2**53), 10**30])
    def test_unsafe_integer_is_rejected(self, value):
        with pytest.raises(CloneError):
            structural_clone({"big": value})

    def test_custom_integer_limit(self):
        assert structural_clone(100, max_safe_integer=100) == 100
        with pytest.raises(CloneError):
            structural_clone(101, max_safe_integer=100)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_float_is_rejected(self, value):
        with pytest.raises(CloneError):
            structural_clone([value])

    def test_frozen_input_gives_unfrozen_copy(self):
        frozen = deep_freeze(structural_clone({"a": [1]}))
        copied = structural_clone(frozen)
        assert copied == frozen
        assert not copied.frozen
        assert not copied["a"].frozen


def _nested_list(depth):
    value = []
    for _ in range(depth - 1):
        value = [value]
    return value


class TestNestingDepth:
    def test_depth_within_json_range(self):
        copied = structural_clone(_nested_list(800))

        depth = 1
        node = copied
        while node:
            assert isinstance(node, StateList)
            node = node[0]
            depth += 1
        assert depth == 800

    def test_default_limit(self):
        structural_clone(_nested_list(config.MAX_DEPTH))
        with pytest.raises(CloneError, match="nested deeper"):
            structural_clone(_nested_list(config.MAX_DEPTH + 1))

    def test_very_deep_value_is_rejected(self):
        with pytest.raises(CloneError, match="nested deeper"):
            structural_clone(_nested_list(5_000))

    def test_custom_limit(self):
        assert structural_clone({"a": {"b": 1}}, max_depth=2) == {"a": {"b": 1}}
        with pytest.raises(CloneError):
            structural_clone({"a": {"b": {}}}, max_depth=2)

    def test_deep_cycle_is_rejected(self):
        looped = _nested_list(50)
        node = looped
        while node:
            node = node[0]
        node.append(looped)
        with pytest.raises(CloneError, match="cyclic"):
            structural_clone(looped)
