import typing
from collections.abc import Sequence as _AbcSequence
import numpy as np
import pandas as pd
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable. sequences are wrapped, not copied"""
    from .enumerable import Enumerable
    if isinstance(data, (_AbcSequence, np.ndarray, pd.Series, pd.DataFrame)):
        return Enumerable(lambda: data)
    return Enumerable(lambda: list(data))

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    return Enumerable(lambda: range(start, start + count))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: [])

# --- aliases ---
rangeq = from_iterable
R = from_iterable
