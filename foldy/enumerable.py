from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .aggregation import DEFAULT_IDENTITY, sum as _sum

# --- accessors ---
from .extensions.aggregate import AggregateAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: Callable[[], Iterable[T]]):
        """init with a function that returns a fresh iterable when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """materialize the data, caching the result"""
        if not self._is_cached:
            self._cached_result = list(self._data_func())
            self._is_cached = True
        return self._cached_result

    def __iter__(self) -> Iterator[T]:
        # stream from the source until something forces materialization,
        # so short-circuiting consumers never pull more than they need
        if self._is_cached:
            return iter(self._cached_result)
        return iter(self._data_func())

    def __len__(self) -> int:
        return len(self._get_data())

# --- main enumerable class ---

class Enumerable(_BaseEnumerable[T]):
    """a lazy wrapper giving any iterable source the .agg and .to accessors."""
    def __init__(self, data_func: Callable[[], Iterable[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.agg = AggregateAccessor(self)
        self.to = TerminalAccessor(self)

# --- range enumerable class ---

class RangeEnumerable(Enumerable[int]):
    """an enumerable over an IntegerRange that keeps the range for closed-form sums."""

    def __init__(self, integer_range: IntegerRange):
        super().__init__(lambda: integer_range)
        self.range = integer_range

    def __contains__(self, item: Any) -> bool:
        return item in self.range

    def __len__(self) -> int:
        return len(self.range)

    def __repr__(self) -> str:
        return f"RangeEnumerable({self.range!r})"


@_sum.register(RangeEnumerable)
def _sum_range_enumerable(sequence: RangeEnumerable, identity: Any = DEFAULT_IDENTITY,
                          transform: Optional[Selector[int, Any]] = None) -> Any:
    return _sum(sequence.range, identity, transform)
