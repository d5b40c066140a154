"""
Contains the exceptions and the violation record used throughout the package.
"""
from dataclasses import dataclass, field
from typing import Any, Optional


class ObjbindError(Exception):
    """
    Base class of all exceptions raised by this package.
    """


class MethodDoesNotExistError(ObjbindError, AttributeError):
    """
    Raised in strict mode if a getter, setter or adder which the value tree requires is not defined on the object.
    """

    def __init__(self, obj: Any, method_name: str, path: str):
        self.obj = obj
        self.method_name = method_name
        self.path = path
        super().__init__(f"{path}: {type(obj).__name__} has no method '{method_name}'")


@dataclass(frozen=True)
class Violation:
    """
    A single failed constraint. The `message` is what ends up in the error tree.
    """

    message: str
    value: Any = None
    constraint: Optional[Any] = field(default=None, compare=False)

    def __str__(self):
        return self.message
