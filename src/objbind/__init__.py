"""
This package applies nested maps of property values onto arbitrary object graphs by calling their setter, adder and
getter methods and validates such value maps against declarative constraint trees.
"""

from .analysis import ValidationResult
from .assign import ApplyReport
from .binder import ObjectBinder, apply, validate
from .checker import DefaultConstraintChecker
from .constraints import Choice, Constraint, Email, InstanceOf, Length, NotBlank, NotNull, Range, Regex
from .errors import MethodDoesNotExistError, ObjbindError, Violation
from .types import ConstraintChecker, ConstraintTree, ErrorTree, ValueTree
from .values import Collection, Nested, Scalar, classify
