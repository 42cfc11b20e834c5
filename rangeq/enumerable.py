from __future__ import annotations

from abc import ABC, abstractmethod
from .positional import as_positional
from .types import *

# --- accessors ---
from .extensions.search import SearchAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> Sequence[T]:
        """get the underlying positional data"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: Callable[[], Sequence[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[Sequence[T]] = None
        self._is_cached = False

    def _get_data(self) -> Sequence[T]:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._cached_result = as_positional(self._data_func())
            self._is_cached = True
        return self._cached_result

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return len(self._get_data())

    def __getitem__(self, index: int) -> T:
        return self._get_data()[index]

# --- main enumerable class ---

class Enumerable(_BaseEnumerable[T]):
    """a lazy, searchable wrapper over an ordered sequence."""
    def __init__(self, data_func: Callable[[], Sequence[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.search = SearchAccessor(self)

    def __repr__(self) -> str:
        state = f"length={len(self._cached_result)}" if self._is_cached else "pending"
        return f"Enumerable({state})"
