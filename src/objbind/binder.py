"""
Contains the ObjectBinder which bundles the configuration for applying and validating value trees.
"""
from typing import Any, Optional

from . import assign, validation
from .analysis import ValidationResult
from .checker import DefaultConstraintChecker
from .types import ConstraintChecker, ConstraintTree, ErrorTree, ValueTree


class ObjectBinder:
    """
    Applies value trees to objects and validates them against constraint trees.

    The `checker` does the actual constraint checking of simple values, by default the `DefaultConstraintChecker`
    is used. If `strict` is set, a missing getter, setter or adder raises a `MethodDoesNotExistError` instead of
    skipping the property.
    """

    def __init__(self, checker: Optional[ConstraintChecker] = None, strict: bool = False):
        self.checker: ConstraintChecker = checker if checker is not None else DefaultConstraintChecker()
        self.strict = strict

    def apply(self, obj: Any, values: ValueTree) -> assign.ApplyReport:
        """
        Applies `values` to `obj`. See `objbind.assign.apply` for details.
        """
        return assign.apply(obj, values, strict=self.strict)

    def validate(self, obj: Any, values: ValueTree, constraints: ConstraintTree) -> ErrorTree:
        """
        Validates `values` against `constraints` and returns the error tree. See `objbind.validation.validate`.
        """
        return validation.validate(obj, values, constraints, self.checker, strict=self.strict)

    def validate_result(self, obj: Any, values: ValueTree, constraints: ConstraintTree) -> ValidationResult:
        """Same as `validate` but wraps the error tree into a `ValidationResult`"""
        return ValidationResult(self.validate(obj, values, constraints))

    def __repr__(self):
        return f"ObjectBinder(checker={self.checker!r}, strict={self.strict})"


_default_binder = ObjectBinder()


def apply(obj: Any, values: ValueTree) -> None:
    """
    Applies `values` to `obj` using setter, adder and getter methods. Properties without a matching method are
    skipped silently. Use an `ObjectBinder` if you are interested in which properties got skipped.
    """
    _default_binder.apply(obj, values)


def validate(obj: Any, values: ValueTree, constraints: ConstraintTree) -> ErrorTree:
    """
    Validates `values` against `constraints` using the default constraint checker and returns the error tree.
    """
    return _default_binder.validate(obj, values, constraints)
