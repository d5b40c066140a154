"""
Contains functionality to analyze the error tree of a validation process
"""
import itertools
from typing import Iterator, Optional

from .accessors import join_path
from .types import ErrorTree


def _iter_errors(error_tree: ErrorTree, base_path: Optional[str] = None) -> Iterator[tuple[str, str]]:
    for property_name, entry in error_tree.items():
        path = join_path(base_path, property_name)
        if isinstance(entry, dict):
            yield from _iter_errors(entry, path)
        else:
            for message in entry:
                yield path, message


def _extract_path(error: tuple[str, str]) -> str:
    return error[0]


class ValidationResult:
    """
    `ObjectBinder.validate_result` returns an instance of this class. It wraps the error tree and provides
    properties for further analysis. Note that the values are calculated only if you use them.
    """

    def __init__(self, error_tree: ErrorTree):
        self.error_tree = error_tree
        self._errors: Optional[list[tuple[str, str]]] = None
        self._num_errors_per_path: Optional[dict[str, int]] = None

    @property
    def is_valid(self) -> bool:
        """True if no validated property failed"""
        return len(self.error_tree) == 0

    @property
    def all_errors(self) -> list[tuple[str, str]]:
        """
        A flat list of all errors as tuples of the dotted property path and the error message.
        It is sorted by path to enable grouping by it using itertools. Messages of the same path keep their order.
        """
        if self._errors is None:
            self._errors = sorted(_iter_errors(self.error_tree), key=_extract_path)
        return self._errors

    @property
    def num_errors_total(self) -> int:
        """Number of error messages in total"""
        return len(self.all_errors)

    @property
    def num_errors_per_path(self) -> dict[str, int]:
        """Maps the dotted property path onto the number of error messages for this property"""
        if self._num_errors_per_path is None:
            self._num_errors_per_path = {
                key: sum(1 for _ in values_iter)
                for key, values_iter in itertools.groupby(self.all_errors, key=_extract_path)
            }
        return self._num_errors_per_path

    @property
    def failed_paths(self) -> list[str]:
        """Dotted paths of all failed properties, sorted"""
        return list(self.num_errors_per_path.keys())

    def messages(self, path: str) -> list[str]:
        """Returns the error messages of the property at the dotted `path` (empty if it didn't fail)"""
        return [message for error_path, message in self.all_errors if error_path == path]

    def __str__(self):
        if self.is_valid:
            return "ValidationResult(valid)"
        return "ValidationResult(" + "; ".join(f"{path}: {message}" for path, message in self.all_errors) + ")"
