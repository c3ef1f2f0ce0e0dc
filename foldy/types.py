from dataclasses import dataclass
from itertools import count as _count, takewhile as _takewhile
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
M = TypeVar('M')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]
Visitor = Callable[[T, M], Any]
Accessor = Union[str, Callable[[T], Any]]


@dataclass(frozen=True)
class IntegerRange:
    """
    an immutable run of consecutive values from first to last.
    last is included unless exclude_end is set, mirroring a..b / a...b.
    """
    first: Any
    last: Any
    exclude_end: bool = False

    @classmethod
    def from_range(cls, r: range) -> 'IntegerRange':
        """build from a builtin range with a step of 1"""
        if r.step != 1:
            raise ValueError(f"only step-1 ranges map to an IntegerRange, got step {r.step}")
        return cls(r.start, r.stop, exclude_end=True)

    @property
    def has_integer_bounds(self) -> bool:
        # bool is an int subclass but not a usable bound here
        return type(self.first) is int and type(self.last) is int

    @property
    def effective_last(self) -> Any:
        return self.last - 1 if self.exclude_end else self.last

    def to_range(self) -> range:
        if not self.has_integer_bounds:
            raise TypeError(f"cannot convert {self!r} to range: bounds are not integers")
        return range(self.first, self.effective_last + 1)

    def _in_bounds(self, value: Any) -> bool:
        return value < self.last if self.exclude_end else value <= self.last

    def __iter__(self) -> Iterator[Any]:
        if self.has_integer_bounds:
            return iter(self.to_range())
        return _takewhile(self._in_bounds, _count(self.first))

    def __contains__(self, item: Any) -> bool:
        if not self.has_integer_bounds:
            return any(value == item for value in self)
        # compare by bounds so non-int items never fall into range's linear scan
        try:
            return self.first <= item <= self.effective_last and item == int(item)
        except (TypeError, ValueError, OverflowError):
            return False

    def __len__(self) -> int:
        if self.has_integer_bounds:
            return len(self.to_range())
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"IntegerRange({self.first}{'...' if self.exclude_end else '..'}{self.last})"


class LazyTraversal(Generic[T, U]):
    """
    a deferred traversal waiting for its function argument.

    iterating yields whatever the function would be called with. calling
    drive(fn) runs the bound operation over the source and returns its
    result. every drive walks the source again, so a one-shot iterator
    source is exhausted after the first drive and later drives see no
    elements.
    """

    def __init__(self, source: Iterable[T],
                 operation: Callable[..., U],
                 args: Tuple = (),
                 yields: Optional[Callable[[T], Any]] = None):
        self._source = source
        self._operation = operation
        self._args = args
        self._yields = yields

    def drive(self, fn: Callable[..., Any]) -> U:
        return self._operation(self._source, *self._args, fn)

    def __iter__(self) -> Iterator[Any]:
        if self._yields is None:
            return iter(self._source)
        return (self._yields(item) for item in self._source)

    def __repr__(self) -> str:
        return f"LazyTraversal({self._operation.__name__})"
