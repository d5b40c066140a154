"""
Contains the types used in the binding and validation framework
"""
from typing import TYPE_CHECKING, Any, Mapping, Protocol, TypeAlias

if TYPE_CHECKING:
    from .errors import Violation


class ConstraintChecker(Protocol):
    """
    The validation capability. It receives a single value and a constraint specification and returns every
    violation found. The tree walking in `validate` does not care how the checking is done.
    """

    def check(self, value: Any, spec: Any) -> list["Violation"]:
        ...


ValueTree: TypeAlias = Mapping[str, Any]
ConstraintTree: TypeAlias = Mapping[str, Any]
ErrorTree: TypeAlias = dict[str, "list[str] | ErrorTree"]
