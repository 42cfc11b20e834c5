from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Sequence
)

T = TypeVar('T')
V = TypeVar('V')


class _Sentinel:
    """named singleton marker that can never be confused with a real element"""

    def __init__(self, name: str):
        self._name = name

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return self._name

    def __reduce__(self):
        # keep identity across pickling
        return self._name


# returned by searches that found nothing in the requested range
NOT_FOUND = _Sentinel('NOT_FOUND')

# stands in for "no value given", so None can still be searched for
UNSET = _Sentinel('UNSET')


class SearchWindow:
    """the normalized bounds of a single range search"""

    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end

    @property
    def low(self) -> int: return min(self.start, self.end)

    @property
    def high(self) -> int: return max(self.start, self.end)

    @property
    def step(self) -> int: return 1 if self.start < self.end else -1

    @property
    def count(self) -> int: return abs(self.end - self.start)

    def indices(self) -> Iterator[int]:
        """yield the visited positions, `count` of them, starting at `start`"""
        index = self.start
        for _ in range(self.count):
            yield index
            index += self.step

    def __repr__(self) -> str:
        return f"SearchWindow(start={self.start}, end={self.end}, count={self.count})"
