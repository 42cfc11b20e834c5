r"""
'    ____  ___    _   __________________
'   / __ \/   |  / | / / ____/ ____/ __ \
'  / /_/ / /| | /  |/ / / __/ __/ / / / /
' / _, _/ ___ |/ /|  / /_/ / /___/ /_/ /
'/_/ |_/_/  |_/_/ |_/\____/_____/\___\_\
"""

import logging

# the library never configures logging itself
logging.getLogger(__name__).addHandler(logging.NullHandler())

# expose the search functions
from .search import get_first, get_first_or_default, normalize_window
from .safe_range import safe_range, RangeError
from .matching import Matcher, has_own_attribute, read_attribute, strict_equals
from .positional import as_positional

# expose the main class and factory functions
from .enumerable import Enumerable
from .factories import (
    from_iterable,
    from_range,
    empty,
    rangeq,
    R
)

# expose sentinels and supporting data classes
from .types import NOT_FOUND, UNSET, SearchWindow

# define what `import *` does
__all__ = [
    "get_first",
    "get_first_or_default",
    "normalize_window",
    "safe_range",
    "RangeError",
    "Matcher",
    "has_own_attribute",
    "read_attribute",
    "strict_equals",
    "as_positional",
    "Enumerable",
    "from_iterable",
    "from_range",
    "empty",
    "rangeq",
    "R",
    "NOT_FOUND",
    "UNSET",
    "SearchWindow"
]
