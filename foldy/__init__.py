r"""
'     ___     _    _
'    | __|__ | | _| |_  _
'    | _/ _ \| |/ _` | || |
'    |_|\___/|_|\__,_|\_, |
'                     |__/
"""

import logging

# expose the aggregation functions
from .aggregation import (
    sum,
    pluck,
    each_with_object,
    index_by,
    many,
    exclude,
    DEFAULT_IDENTITY
)

# expose the main classes
from .enumerable import Enumerable, RangeEnumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    count_from,
    P
)

# expose supporting data classes
from .types import (
    IntegerRange,
    LazyTraversal
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "sum",
    "pluck",
    "each_with_object",
    "index_by",
    "many",
    "exclude",
    "DEFAULT_IDENTITY",
    "Enumerable",
    "RangeEnumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "count_from",
    "P",
    "IntegerRange",
    "LazyTraversal"
]
