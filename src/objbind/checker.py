"""
Contains the default implementation of the validation capability.
"""
import logging
from typing import Any

from typeguard import TypeCheckError

from .constraints import Constraint
from .errors import Violation

_logger = logging.getLogger(__name__)


class DefaultConstraintChecker:
    """
    Checks a value against a constraint specification. A specification is one of:
     - a `Constraint` instance,
     - a list or tuple of specifications which are checked in order,
     - a validator function taking the value as only argument. It signals an invalid value by raising a ValueError,
       TypeError or TypeCheckError, the error text is used as message,
     - None, which means there is nothing to check.
    """

    def check(self, value: Any, spec: Any) -> list[Violation]:
        """Returns all violations of `value` against `spec` in the order they were found"""
        if spec is None:
            return []
        if isinstance(spec, Constraint):
            return spec.validate(value)
        if isinstance(spec, (list, tuple)):
            violations: list[Violation] = []
            for sub_spec in spec:
                violations.extend(self.check(value, sub_spec))
            return violations
        if callable(spec):
            return self._check_function(value, spec)
        raise TypeError(f"Unsupported constraint specification: {spec!r}")

    @staticmethod
    def _check_function(value: Any, validator_function: Any) -> list[Violation]:
        try:
            validator_function(value)
        except (ValueError, TypeError, TypeCheckError) as error:
            _logger.debug(
                "Validator function %s rejected %r: %s",
                getattr(validator_function, "__name__", validator_function),
                value,
                error,
            )
            return [Violation(message=str(error), value=value, constraint=validator_function)]
        return []
