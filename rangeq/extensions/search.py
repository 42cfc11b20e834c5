from __future__ import annotations
import typing
from ..matching import Matcher
from ..search import get_first, get_first_or_default
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class SearchAccessor(Generic[T]):
    """
    range-bounded property searches over the wrapped sequence.
    every method is a single read-only pass; nothing here raises for an
    empty sequence or an out-of-range window.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def first(self, property_name: Optional[str] = None, property_value: Any = UNSET,
              start_index: Optional[int] = None, end_index: Optional[int] = None) -> Union[T, Any]:
        """first match in the window, or NOT_FOUND"""
        return get_first(self._enumerable._get_data(), property_name, property_value, start_index, end_index)

    def first_or_default(self, property_name: Optional[str] = None, property_value: Any = UNSET,
                         start_index: Optional[int] = None, end_index: Optional[int] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """first match in the window, or default"""
        return get_first_or_default(self._enumerable._get_data(), property_name, property_value,
                                    start_index, end_index, default)

    def last(self, property_name: Optional[str] = None, property_value: Any = UNSET) -> Union[T, Any]:
        """
        scan backward from the last element. the window ends at index 0,
        which is never visited.
        """
        return self.first(property_name, property_value, start_index=-1)

    def exists(self, property_name: Optional[str] = None, property_value: Any = UNSET,
               start_index: Optional[int] = None, end_index: Optional[int] = None) -> bool:
        """check if any element in the window matches"""
        return self.first(property_name, property_value, start_index, end_index) is not NOT_FOUND

    def matching(self, property_name: Optional[str] = None, property_value: Any = UNSET) -> 'Enumerable[T]':
        """every matching element across the whole sequence, in order"""
        from ..enumerable import Enumerable
        matcher = Matcher(property_name, property_value)
        def matching_data():
            return [item for item in self._enumerable._get_data() if matcher(item)]
        return Enumerable(matching_data)
