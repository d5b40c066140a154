import pytest
from frozendict import frozendict

from objbind import Collection, Nested, Scalar, classify
from objbind.values import unwrap


class TestClassify:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param("John", Scalar("John"), id="string"),
            pytest.param(None, Scalar(None), id="none"),
            pytest.param([], Scalar([]), id="empty list"),
            pytest.param((), Scalar(()), id="empty tuple"),
            pytest.param({}, Nested({}), id="empty mapping"),
            pytest.param({"city": "Berlin"}, Nested({"city": "Berlin"}), id="mapping"),
            pytest.param(["a", ["b", "c"]], Collection(["a", ["b", "c"]]), id="list"),
            pytest.param({0: "a", 1: "b"}, Collection(["a", "b"]), id="mapping with index zero"),
        ],
    )
    def test_classify(self, value, expected):
        assert classify(value) == expected

    def test_explicit_variant_is_kept(self):
        variant = Scalar(["a"])
        assert classify(variant) is variant

    def test_nested_values_are_frozen(self):
        assert isinstance(Nested({"a": 1}).values, frozendict)

    def test_collection_arguments(self):
        assert list(Collection(["a", ["b", "c"], ("d",)]).arguments()) == [("a",), ("b", "c"), ("d",)]

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(Scalar([]), [], id="scalar"),
            pytest.param(Collection(("a",)), ["a"], id="collection"),
            pytest.param(Nested({"a": 1}), {"a": 1}, id="nested"),
            pytest.param("raw", "raw", id="raw"),
        ],
    )
    def test_unwrap(self, value, expected):
        assert unwrap(value) == expected
