"""
Contains functions to read property values back from an object using the getter naming convention.
"""
from typing import Any, Optional, TypeVar, overload

from typeguard import TypeCheckError, check_type

from objbind.accessors import accessor_name, find_accessor

AttrT = TypeVar("AttrT")


def optional_property(obj: Any, property_path: str, property_type: type[AttrT]) -> Optional[AttrT]:
    """
    Tries to read the property at `property_path` of `obj` by calling the getters. If a getter doesn't exist or the
    type doesn't match, `None` will be returned.
    """
    try:
        return required_property(obj, property_path, property_type)
    except (AttributeError, TypeCheckError):
        return None


@overload
def required_property(
    obj: Any, property_path: str, property_type: type[AttrT], param_base_path: Optional[str] = None
) -> AttrT:
    ...


@overload
def required_property(
    obj: Any, property_path: str, property_type: Any, param_base_path: Optional[str] = None
) -> Any:
    ...


def required_property(
    obj: Any, property_path: str, property_type: Any, param_base_path: Optional[str] = None
) -> Any:
    """
    Reads the property at the dotted `property_path` of `obj`. For `"address.city"` this calls
    `obj.getAddress().getCity()`. If a getter doesn't exist an AttributeError will be raised.
    If the value is found, the type will be checked and TypeCheckError will be raised if the type doesn't match.
    """
    current_obj: Any = obj
    splitted_path = property_path.split(".")
    for index, property_name in enumerate(splitted_path):
        getter = find_accessor(current_obj, "get", property_name)
        if getter is None:
            current_path = ".".join(splitted_path[0 : index + 1])
            if param_base_path is not None:
                current_path = f"{param_base_path}.{current_path}"
            raise AttributeError(f"{current_path}: Not found ({accessor_name('get', property_name)})")
        current_obj = getter()
    try:
        check_type(current_obj, property_type)
    except TypeCheckError as error:
        current_path = property_path
        if param_base_path is not None:
            current_path = f"{param_base_path}.{property_path}"
        raise TypeCheckError(f"{current_path}: {error}") from error
    return current_obj
