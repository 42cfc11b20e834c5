"""
range-bounded linear search.

the window is anchored at `start_index` and runs toward `end_index` in either
direction, visiting abs(end_index - start_index) elements. the element at
`end_index` itself is never visited.
"""

from __future__ import annotations
from .matching import Matcher
from .positional import as_positional
from .safe_range import safe_range
from .types import *


def normalize_window(length: int, start_index: Optional[int] = None,
                     end_index: Optional[int] = None) -> SearchWindow:
    """
    apply the default bounds for a sequence of `length` elements.
    the end default is chosen from the sign of the raw start index, and only
    afterwards is a literal start of -1 moved to the last element.
    """
    if start_index is None: start_index = 0
    if end_index is None: end_index = length - 1 if start_index >= 0 else 0
    if start_index == -1: start_index = length - 1
    return SearchWindow(start_index, end_index)


def get_first(sequence: Sequence[T], property_name: Optional[str] = None,
              property_value: Any = UNSET, start_index: Optional[int] = None,
              end_index: Optional[int] = None) -> Union[T, Any]:
    """
    return the first element, in scan order, matching the optional property test.

    with only `property_name`, an element matches when it defines that attribute
    itself (falsy values included). with `property_value` as well, the attribute
    must be strictly equal to it. an empty sequence, a bad range or no match
    gives NOT_FOUND. a non-indexable `sequence` raises TypeError.
    """
    items = as_positional(sequence)
    window = normalize_window(len(items), start_index, end_index)

    if not safe_range(items, window.low, window.high):
        return NOT_FOUND

    matcher = Matcher(property_name, property_value)
    for index in window.indices():
        child = items[index]
        if matcher.matches(child):
            return child
    return NOT_FOUND


def get_first_or_default(sequence: Sequence[T], property_name: Optional[str] = None,
                         property_value: Any = UNSET, start_index: Optional[int] = None,
                         end_index: Optional[int] = None, default: Optional[T] = None) -> Optional[T]:
    """same as get_first, but gives `default` when nothing is found"""
    result = get_first(sequence, property_name, property_value, start_index, end_index)
    return default if result is NOT_FOUND else result
