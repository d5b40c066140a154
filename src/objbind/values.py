"""
Contains the three variants a value of a value tree can take and the function which classifies raw values.

A raw value tree uses plain python structures and the variant is derived from its shape:
 - a mapping without key `0` is a nested object,
 - a non-empty list or tuple (or a mapping with key `0`) is a collection,
 - everything else, including the empty list, is a scalar.
If you don't want to rely on these rules you can state the variant explicitly by wrapping the value in `Scalar`,
`Collection` or `Nested`.
"""
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, TypeAlias

from frozendict import frozendict


@dataclass(frozen=True)
class Scalar:
    """A simple property value. It is handed to the setter as is."""

    value: Any


@dataclass(frozen=True)
class Collection:
    """
    A repeatable property. Each item results in one call of the adder. An item which is a list or tuple is spread as
    positional arguments, every other item is passed as single argument.
    """

    items: tuple[Any, ...]

    def __init__(self, items):
        object.__setattr__(self, "items", tuple(items))

    def arguments(self) -> Iterator[tuple[Any, ...]]:
        """Yields the positional arguments for every adder call in order"""
        for item in self.items:
            if isinstance(item, (list, tuple)):
                yield tuple(item)
            else:
                yield (item,)


@dataclass(frozen=True)
class Nested:
    """A sub-object. Its values are applied to (or validated against) the object returned by the getter."""

    values: Mapping[str, Any]

    def __init__(self, values: Mapping[str, Any]):
        object.__setattr__(self, "values", values if isinstance(values, frozendict) else frozendict(values))


Variant: TypeAlias = Scalar | Collection | Nested


def classify(value: Any) -> Variant:
    """
    Determines the variant of a raw value. Values which already are a variant are returned unchanged.
    """
    if isinstance(value, (Scalar, Collection, Nested)):
        return value
    if isinstance(value, Mapping):
        if 0 not in value:
            return Nested(value)
        return Collection(value.values())
    if isinstance(value, (list, tuple)) and len(value) > 0:
        return Collection(value)
    return Scalar(value)


def unwrap(value: Any) -> Any:
    """
    Returns the plain python value. Raw values are returned unchanged, explicit variants are converted back.
    """
    if isinstance(value, Scalar):
        return value.value
    if isinstance(value, Collection):
        return list(value.items)
    if isinstance(value, Nested):
        return dict(value.values)
    return value
