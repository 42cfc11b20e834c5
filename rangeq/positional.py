from __future__ import annotations
from collections.abc import Sequence as _AbcSequence
import numpy as np
import pandas as pd
from .types import *


class _PositionalView(_AbcSequence, Generic[T]):
    """position-based view over a pandas object, so `view[0]` never means label 0"""

    def __init__(self, source: Union[pd.Series, pd.DataFrame]):
        self._source = source
        self._iloc = source.iloc
        self._length = len(source)

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> T:
        if isinstance(self._source, pd.DataFrame):
            return self._row(index)
        return self._iloc[index]

    def __iter__(self) -> Iterator[T]:
        for index in range(self._length):
            yield self[index]

    def _row(self, index: int) -> pd.Series:
        # iloc[i] upcasts an all-numeric row to one dtype, so read each cell from its own column
        frame = self._source
        cells = [self._iloc[index, col] for col in range(frame.shape[1])]
        return pd.Series(cells, index=frame.columns, dtype=object, name=frame.index[index])

    def __repr__(self) -> str:
        return f"_PositionalView({type(self._source).__name__}, length={self._length})"


def as_positional(sequence: Any) -> Sequence:
    """
    return an object supporting len() and integer positional indexing.
    pandas objects are read through .iloc, numpy arrays along their first axis.
    anything that is not an ordered, indexable collection is a TypeError.
    """
    if isinstance(sequence, (pd.Series, pd.DataFrame)):
        return _PositionalView(sequence)
    if isinstance(sequence, np.ndarray):
        if sequence.ndim == 0:
            raise TypeError("cannot search a 0-dimensional array")
        return sequence
    if isinstance(sequence, _AbcSequence):
        return sequence
    raise TypeError(f"expected an ordered, indexable sequence, got {type(sequence).__name__}")
