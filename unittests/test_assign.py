import logging

import pytest
from example_entities import Company, Person

from objbind import Collection, MethodDoesNotExistError, Nested, ObjectBinder, Scalar, apply
from objbind.assign import apply as apply_with_report


class TestApply:
    def test_empty_value_tree_is_a_no_op(self):
        person = Person()
        apply(person, {})
        assert person.firstname is None
        assert person.email is None
        assert person.address.city is None
        assert person.phone_calls == []
        assert person.tags == []

    def test_setter_round_trip(self):
        person = Person()
        apply(person, {"firstname": "John", "email": "john@example.com"})
        assert person.getFirstname() == "John"
        assert person.getEmail() == "john@example.com"

    def test_missing_setter_is_skipped_silently(self):
        person = Person()
        assert apply(person, {"lastname": "Doe"}) is None
        assert not hasattr(person, "lastname")

    def test_adder_is_called_per_item_with_spread_arguments(self):
        person = Person()
        apply(person, {"phone": [["0123", "work"], ["0456"]]})
        assert person.phone_calls == [("add", ("0123", "work")), ("add", ("0456", "home"))]

    def test_scalar_items_are_passed_as_single_argument(self):
        person = Person()
        apply(person, {"tag": ["vip", "newsletter"]})
        assert person.tags == ["vip", "newsletter"]

    def test_tuple_is_a_collection(self):
        person = Person()
        apply(person, {"tag": ("vip",)})
        assert person.tags == ["vip"]

    def test_mapping_with_index_zero_is_a_collection(self):
        person = Person()
        apply(person, {"tag": {0: "first", 1: "second"}})
        assert person.tags == ["first", "second"]

    def test_empty_list_is_passed_to_the_setter(self):
        person = Person()
        apply(person, {"phone": []})
        assert person.phone_calls == [("set", [])]

    def test_missing_adder_skips_the_whole_collection(self):
        company = Company()
        report = apply_with_report(company, {"employee": ["a", "b"]})
        assert report.skipped == ["employee"]
        assert report.applied == []

    def test_nested_mapping_is_applied_to_sub_object(self):
        person = Person()
        address = person.address
        apply(person, {"address": {"city": "Berlin", "street": "Main Street"}})
        assert person.address is address
        assert address.city == "Berlin"
        assert address.street == "Main Street"

    def test_missing_getter_skips_nested_subtree(self):
        company = Company()
        report = apply_with_report(company, {"name": "ACME", "address": {"city": "Berlin"}})
        assert company.name == "ACME"
        assert report.applied == ["name"]
        assert report.skipped == ["address"]
        assert not report.complete

    def test_report_uses_dotted_paths(self):
        person = Person()
        report = apply_with_report(person, {"address": {"city": "Berlin", "zip": "10115"}, "tag": ["x"]})
        assert report.applied == ["address", "address.city", "tag"]
        assert report.skipped == ["address.zip"]

    def test_skipped_property_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="objbind.assign")
        apply(Person(), {"lastname": "Doe"})
        assert "lastname" in caplog.text
        assert "setLastname" in caplog.text

    def test_strict_mode_raises_on_missing_method(self):
        binder = ObjectBinder(strict=True)
        with pytest.raises(MethodDoesNotExistError) as error_info:
            binder.apply(Person(), {"address": {"zip": "10115"}})
        assert error_info.value.path == "address.zip"
        assert error_info.value.method_name == "setZip"
        assert isinstance(error_info.value, AttributeError)

    def test_strict_mode_applies_known_properties(self):
        person = Person()
        report = ObjectBinder(strict=True).apply(person, {"firstname": "Jane", "address": {"city": "Hamburg"}})
        assert report.complete
        assert person.address.city == "Hamburg"

    def test_apply_twice_yields_same_state(self):
        values = {"firstname": "John", "address": {"city": "Berlin"}}
        once = Person()
        twice = Person()
        apply(once, values)
        apply(twice, values)
        apply(twice, values)
        assert twice.firstname == once.firstname
        assert twice.address.city == once.address.city

    def test_value_tree_is_not_modified(self):
        values = {"phone": [["0123", "work"]], "address": {"city": "Berlin"}}
        apply(Person(), values)
        assert values == {"phone": [["0123", "work"]], "address": {"city": "Berlin"}}

    @pytest.mark.parametrize(
        "value, expected_calls",
        [
            pytest.param(Scalar(["0123", "0456"]), [("set", ["0123", "0456"])], id="explicit scalar list"),
            pytest.param(Scalar([]), [("set", [])], id="explicit scalar empty list"),
            pytest.param(Collection(["0123"]), [("add", ("0123", "home"))], id="explicit collection"),
            pytest.param(Collection([]), [], id="explicit empty collection"),
        ],
    )
    def test_explicit_variants(self, value, expected_calls):
        person = Person()
        apply(person, {"phone": value})
        assert person.phone_calls == expected_calls

    def test_explicit_nested(self):
        person = Person()
        apply(person, {"address": Nested({"city": "Cologne"})})
        assert person.address.city == "Cologne"
