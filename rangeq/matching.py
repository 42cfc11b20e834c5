from __future__ import annotations
from collections.abc import Mapping
import numpy as np
import pandas as pd
from .types import *


def _slot_names(cls: type) -> Iterator[str]:
    for klass in cls.__mro__:
        slots = klass.__dict__.get('__slots__', ())
        if isinstance(slots, str): slots = (slots,)
        yield from slots


def has_own_attribute(element: Any, name: str) -> bool:
    """
    true when `name` is defined on the element itself.
    class attributes, properties and methods are inherited and never count.
    """
    if isinstance(element, Mapping):
        return name in element
    if isinstance(element, pd.Series):
        return name in element.index
    if isinstance(element, np.void):
        return element.dtype.names is not None and name in element.dtype.names

    fields = getattr(type(element), '_fields', None)
    if isinstance(element, tuple) and fields is not None:
        # namedtuple fields live on the instance, the accessors on the class
        return name in fields

    instance_dict = getattr(element, '__dict__', None)
    if isinstance(instance_dict, dict) and name in instance_dict:
        return True

    if name in _slot_names(type(element)):
        # a declared but unassigned slot raises AttributeError on access
        try:
            getattr(element, name)
        except AttributeError:
            return False
        return True
    return False


def read_attribute(element: Any, name: str) -> Any:
    """read `name` from the element the normal way, or UNSET when it is missing"""
    if isinstance(element, (Mapping, pd.Series)):
        return element[name] if name in element else UNSET
    if isinstance(element, np.void):
        names = element.dtype.names or ()
        return element[name] if name in names else UNSET
    return getattr(element, name, UNSET)


def _native(value: Any) -> Any:
    # numpy scalars compare like the python values they wrap
    return value.item() if isinstance(value, np.generic) else value


def strict_equals(left: Any, right: Any) -> bool:
    """
    equal value of the exact same type. no coercion, and nan never equals itself.
    arrays, and values whose == is not a plain bool (pd.NA), match only by identity.
    """
    left, right = _native(left), _native(right)
    if type(left) is not type(right):
        return False
    if isinstance(left, np.ndarray):
        return left is right
    result = left == right
    if isinstance(result, (bool, np.bool_)):
        return bool(result)
    return left is right


class Matcher(Generic[V]):
    """per-element test built from an optional property name and value"""

    def __init__(self, property_name: Optional[str] = None, property_value: Union[V, Any] = UNSET):
        self.property_name = property_name
        self.property_value = property_value

    @property
    def matches_everything(self) -> bool: return not self.property_name

    def matches(self, element: Any) -> bool:
        if not self.property_name:
            return True
        if self.property_value is UNSET:
            return has_own_attribute(element, self.property_name)
        value = read_attribute(element, self.property_name)
        return value is not UNSET and strict_equals(value, self.property_value)

    def __call__(self, element: Any) -> bool:
        return self.matches(element)

    def __repr__(self) -> str:
        if self.matches_everything:
            return "Matcher(*)"
        if self.property_value is UNSET:
            return f"Matcher(has {self.property_name!r})"
        return f"Matcher({self.property_name!r} == {self.property_value!r})"
