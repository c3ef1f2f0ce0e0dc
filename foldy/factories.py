import typing
from itertools import count, repeat as _repeat
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable, RangeEnumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """
    wrap an iterable. re-iterable sources (lists, tuples, ranges) can be
    walked any number of times; a generator or other one-shot iterator is
    consumed by the first traversal.
    """
    from .enumerable import Enumerable
    return Enumerable(lambda: data)

def from_range(first: int, last: int, exclude_end: bool = False) -> 'RangeEnumerable':
    """create enumerable over first..last (or first...last with exclude_end)"""
    from .enumerable import RangeEnumerable
    return RangeEnumerable(IntegerRange(first, last, exclude_end))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    return Enumerable(lambda: _repeat(item, count))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: ())

def count_from(start: int = 0, step: int = 1) -> 'Enumerable[int]':
    """infinite sequence start, start + step, ... - only use with short-circuiting operations"""
    from .enumerable import Enumerable
    return Enumerable(lambda: count(start, step))

# --- aliases ---
P = from_iterable
