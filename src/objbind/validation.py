"""
Contains the validator which checks a value tree against a constraint tree.
"""
import logging
from typing import Any, Mapping, Optional

from .accessors import accessor_name, find_accessor, join_path
from .errors import MethodDoesNotExistError
from .types import ConstraintChecker, ConstraintTree, ErrorTree, ValueTree
from .values import Nested, classify, unwrap

_logger = logging.getLogger(__name__)

NOT_AN_OBJECT_MESSAGE = "This value should be an object."


def validate(
    obj: Any,
    values: ValueTree,
    constraints: ConstraintTree,
    checker: ConstraintChecker,
    *,
    strict: bool = False,
    base_path: Optional[str] = None,
) -> ErrorTree:
    """
    Validates the `values` which are about to be applied to `obj` against `constraints`.

    Properties without an entry in `constraints` are not validated. A nested mapping is validated against the nested
    constraints using the sub-object returned by the getter of the property. Every other value (including
    collections) is handed to the `checker` as a whole together with the constraint specification of the property.

    Returns the error tree: for each failed property either the list of error messages or, for sub-objects, a
    nested error tree. An empty dict means that no validated property failed. If the getter of a nested property
    doesn't exist the property is skipped unless `strict` is set, in which case a `MethodDoesNotExistError` is
    raised. A value which is not a mapping but has nested constraints fails with `NOT_AN_OBJECT_MESSAGE`.
    `obj` itself is not modified.
    """
    errors: ErrorTree = {}
    for property_name, value in values.items():
        if property_name not in constraints:
            continue
        path = join_path(base_path, property_name)
        spec = constraints[property_name]
        variant = classify(value)
        if isinstance(variant, Nested) and isinstance(spec, Mapping):
            getter = find_accessor(obj, "get", property_name)
            if getter is None:
                method_name = accessor_name("get", property_name)
                if strict:
                    raise MethodDoesNotExistError(obj, method_name, path)
                _logger.debug("Not validated %s: %s has no method '%s'", path, type(obj).__name__, method_name)
                continue
            sub_errors = validate(getter(), variant.values, spec, checker, strict=strict, base_path=path)
            if sub_errors:
                errors[property_name] = sub_errors
            continue
        if isinstance(spec, Mapping):
            _logger.debug("%s failed: nested constraints but value %r is no mapping", path, value)
            errors[property_name] = [NOT_AN_OBJECT_MESSAGE]
            continue
        violations = checker.check(unwrap(value), spec)
        if violations:
            _logger.debug("%s failed with %d violation(s)", path, len(violations))
            errors[property_name] = [violation.message for violation in violations]
    return errors
