from __future__ import annotations
import logging
from .positional import as_positional
from .types import *

logger = logging.getLogger(__name__)


class RangeError(ValueError):
    """raised by safe_range(..., throw_error=True) for a bad index range"""
    pass


def safe_range(sequence: Sequence, start_index: int, end_index: int, throw_error: bool = False) -> bool:
    """
    check that [start_index, end_index] is a usable range of a non-empty sequence:
    0 <= start_index <= end_index < len(sequence).
    returns false for a bad range, or raises RangeError when throw_error is set.
    """
    length = len(as_positional(sequence))
    if length > 0 and 0 <= start_index <= end_index < length:
        return True

    logger.debug(f"rejected range [{start_index}, {end_index}] for sequence of length {length}")
    if throw_error:
        raise RangeError("range error: values outside acceptable range")
    return False
