"""
Contains the built-in constraints of the default constraint checker. Every constraint returns a list of violations
for a single value. Apart from `NotNull` and `NotBlank` all constraints treat `None` as valid - combine them with
`NotNull` if a value is required.
"""
import re
from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, Iterable, Optional, Sized

from typeguard import TypeCheckError, check_type

from .errors import Violation


class Constraint(ABC):
    """
    Base class of all constraints. Subclasses implement `validate`. The message templates are rendered with
    `str.format` and can be overridden per instance.
    """

    message: str = "This value is not valid."

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message

    @abstractmethod
    def validate(self, value: Any) -> list[Violation]:
        """Returns the violations of `value`. An empty list means the value is valid."""

    def _violation(self, value: Any, template: Optional[str] = None, **params: Any) -> Violation:
        template = self.message if template is None else template
        return Violation(message=template.format(value=value, **params), value=value, constraint=self)

    def __repr__(self):
        return f"{type(self).__name__}()"


class NotNull(Constraint):
    """The value must not be None"""

    message = "This value should not be null."

    def validate(self, value: Any) -> list[Violation]:
        if value is None:
            return [self._violation(value)]
        return []


class NotBlank(Constraint):
    """
    The value must not be None, False, an empty or whitespace-only string or an empty container.
    """

    message = "This value should not be blank."

    def validate(self, value: Any) -> list[Violation]:
        if value is None or value is False:
            return [self._violation(value)]
        if isinstance(value, str):
            if value.strip() == "":
                return [self._violation(value)]
            return []
        if isinstance(value, Sized) and len(value) == 0:
            return [self._violation(value)]
        return []


class Length(Constraint):
    """
    The length of the value must lie between `min` and `max` (both inclusive, both optional).
    Values without a length, like numbers, are measured by their string representation.
    """

    min_message = "This value is too short. It should have {limit} characters or more."
    max_message = "This value is too long. It should have {limit} characters or less."

    def __init__(
        self,
        min: Optional[int] = None,  # pylint: disable=redefined-builtin
        max: Optional[int] = None,  # pylint: disable=redefined-builtin
        min_message: Optional[str] = None,
        max_message: Optional[str] = None,
    ):
        super().__init__()
        if min is None and max is None:
            raise ValueError("Length needs at least one of min or max")
        self.min = min
        self.max = max
        if min_message is not None:
            self.min_message = min_message
        if max_message is not None:
            self.max_message = max_message

    def validate(self, value: Any) -> list[Violation]:
        if value is None:
            return []
        length = len(value) if isinstance(value, Sized) else len(str(value))
        if self.min is not None and length < self.min:
            return [self._violation(value, self.min_message, limit=self.min)]
        if self.max is not None and length > self.max:
            return [self._violation(value, self.max_message, limit=self.max)]
        return []

    def __repr__(self):
        return f"Length(min={self.min}, max={self.max})"


class Range(Constraint):
    """The value must be a number between `min` and `max` (both inclusive, both optional)"""

    min_message = "This value should be {limit} or more."
    max_message = "This value should be {limit} or less."
    invalid_message = "This value should be a valid number."

    def __init__(
        self,
        min: Optional[Real] = None,  # pylint: disable=redefined-builtin
        max: Optional[Real] = None,  # pylint: disable=redefined-builtin
        min_message: Optional[str] = None,
        max_message: Optional[str] = None,
    ):
        super().__init__()
        if min is None and max is None:
            raise ValueError("Range needs at least one of min or max")
        self.min = min
        self.max = max
        if min_message is not None:
            self.min_message = min_message
        if max_message is not None:
            self.max_message = max_message

    def validate(self, value: Any) -> list[Violation]:
        if value is None:
            return []
        if isinstance(value, bool) or not isinstance(value, Real):
            return [self._violation(value, self.invalid_message)]
        if self.min is not None and value < self.min:
            return [self._violation(value, self.min_message, limit=self.min)]
        if self.max is not None and value > self.max:
            return [self._violation(value, self.max_message, limit=self.max)]
        return []

    def __repr__(self):
        return f"Range(min={self.min}, max={self.max})"


class Regex(Constraint):
    """The string value must contain a match of `pattern`"""

    def __init__(self, pattern: str | re.Pattern[str], message: Optional[str] = None):
        super().__init__(message)
        self.pattern: re.Pattern[str] = re.compile(pattern) if isinstance(pattern, str) else pattern

    def validate(self, value: Any) -> list[Violation]:
        if value is None:
            return []
        if not isinstance(value, str) or self.pattern.search(value) is None:
            return [self._violation(value)]
        return []

    def __repr__(self):
        return f"Regex({self.pattern.pattern!r})"


class Email(Regex):
    """The value must look like an e-mail address. Empty strings are considered valid, use `NotBlank` for that."""

    message = "This value is not a valid email address."

    def __init__(self, message: Optional[str] = None):
        super().__init__(r"^[^@\s]+@\S+\.\S+$", message)

    def validate(self, value: Any) -> list[Violation]:
        if value == "":
            return []
        return super().validate(value)

    def __repr__(self):
        return "Email()"


class Choice(Constraint):
    """The value must be one of `choices`"""

    message = "The value you selected is not a valid choice."

    def __init__(self, choices: Iterable[Any], message: Optional[str] = None):
        super().__init__(message)
        self.choices = tuple(choices)

    def validate(self, value: Any) -> list[Violation]:
        if value is None or value in self.choices:
            return []
        return [self._violation(value, choices=", ".join(map(repr, self.choices)))]

    def __repr__(self):
        return f"Choice({self.choices!r})"


class InstanceOf(Constraint):
    """
    The value must match the type hint `expected_type`. The check is done by typeguard, hence generic types like
    `list[int]` are supported as well.
    """

    message = "This value should be of type {type}."

    def __init__(self, expected_type: Any, message: Optional[str] = None):
        super().__init__(message)
        self.expected_type = expected_type

    def validate(self, value: Any) -> list[Violation]:
        if value is None:
            return []
        try:
            check_type(value, self.expected_type)
        except TypeCheckError:
            return [self._violation(value, type=getattr(self.expected_type, "__name__", str(self.expected_type)))]
        return []

    def __repr__(self):
        return f"InstanceOf({self.expected_type!r})"
