from __future__ import annotations
import typing
from .. import aggregation
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class AggregateAccessor(Generic[T]):
    """fluent access to the aggregation functions: `enumerable.agg.sum()`"""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def sum(self, identity: Any = aggregation.DEFAULT_IDENTITY,
            transform: Optional[Selector[T, Any]] = None) -> Any:
        # pass the enumerable itself so range-backed ones keep the closed form
        return aggregation.sum(self._enumerable, identity, transform)

    def pluck(self, *accessors: Accessor[T]) -> 'Enumerable[Any]':
        """streaming pluck; materialize with .to.list()"""
        from ..enumerable import Enumerable
        selector = aggregation.plucker(*accessors)
        return Enumerable(lambda: (selector(element) for element in self._enumerable))

    def each_with_object(self, memo: M,
                         visit: Optional[Visitor[T, M]] = None) -> Union[M, LazyTraversal[T, M]]:
        return aggregation.each_with_object(self._enumerable, memo, visit)

    def index_by(self, key_selector: Optional[Accessor[T]] = None) -> Union[Dict[Any, T], LazyTraversal[T, Dict[Any, T]]]:
        return aggregation.index_by(self._enumerable, key_selector)

    def many(self, predicate: Optional[Predicate[T]] = None) -> bool:
        return aggregation.many(self._enumerable, predicate)

    def exclude(self, item: Any) -> bool:
        return aggregation.exclude(self._enumerable, item)
