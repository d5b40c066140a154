"""
Contains the naming convention which maps a property name onto the methods of an object.
"""
from typing import Any, Callable, Literal, Optional, TypeAlias

AccessorPrefix: TypeAlias = Literal["get", "set", "add"]


def accessor_name(prefix: AccessorPrefix, property_name: str) -> str:
    """
    Builds the method name for a property. Only the first letter is upper-cased, the rest stays unchanged.
    E.g. `accessor_name("set", "firstName") == "setFirstName"`.
    """
    return f"{prefix}{property_name[:1].upper()}{property_name[1:]}"


def find_accessor(obj: Any, prefix: AccessorPrefix, property_name: str) -> Optional[Callable[..., Any]]:
    """
    Returns the bound method `<prefix><PropertyName>` of `obj` or None if there is no such callable.
    """
    method = getattr(obj, accessor_name(prefix, property_name), None)
    if method is None or not callable(method):
        return None
    return method


def join_path(base_path: Optional[str], property_name: str) -> str:
    """Appends a property name to a dotted path"""
    if not base_path:
        return property_name
    return f"{base_path}.{property_name}"
