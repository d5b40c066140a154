"""
Contains the assigner which applies a value tree to an object graph.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from .accessors import AccessorPrefix, accessor_name, find_accessor, join_path
from .errors import MethodDoesNotExistError
from .types import ValueTree
from .values import Collection, Nested, classify

_logger = logging.getLogger(__name__)


@dataclass
class ApplyReport:
    """
    Lists the dotted paths of all properties which got applied and of all which got skipped because the object
    doesn't provide the required method. A nested property counts as applied if its getter exists; its children
    are listed separately.
    """

    applied: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        """True if no property got skipped"""
        return len(self.skipped) == 0


def _skip(obj: Any, prefix: AccessorPrefix, property_name: str, path: str, report: ApplyReport, strict: bool):
    method_name = accessor_name(prefix, property_name)
    if strict:
        raise MethodDoesNotExistError(obj, method_name, path)
    _logger.debug("Skipped %s: %s has no method '%s'", path, type(obj).__name__, method_name)
    report.skipped.append(path)


def apply(
    obj: Any,
    values: ValueTree,
    *,
    strict: bool = False,
    report: Optional[ApplyReport] = None,
    base_path: Optional[str] = None,
) -> ApplyReport:
    """
    Applies the `values` to `obj` by calling its setter, adder and getter methods.

    For a property `firstname` the object needs a method `setFirstname` to receive a simple value. A non-empty list
    is passed item by item to `addFirstname` and a nested mapping is applied to the object returned by
    `getFirstname`. If the required method doesn't exist the property (including all nested values) is skipped
    silently unless `strict` is set, in which case a `MethodDoesNotExistError` is raised.

    The returned report lists which properties got applied and which got skipped. You can ignore it.
    """
    if report is None:
        report = ApplyReport()
    for property_name, value in values.items():
        path = join_path(base_path, property_name)
        variant = classify(value)
        if isinstance(variant, Nested):
            getter = find_accessor(obj, "get", property_name)
            if getter is None:
                _skip(obj, "get", property_name, path, report, strict)
                continue
            report.applied.append(path)
            apply(getter(), variant.values, strict=strict, report=report, base_path=path)
        elif isinstance(variant, Collection):
            adder = find_accessor(obj, "add", property_name)
            if adder is None:
                _skip(obj, "add", property_name, path, report, strict)
                continue
            for arguments in variant.arguments():
                adder(*arguments)
            report.applied.append(path)
        else:
            setter = find_accessor(obj, "set", property_name)
            if setter is None:
                _skip(obj, "set", property_name, path, report, strict)
                continue
            setter(variant.value)
            report.applied.append(path)
    return report
