"""
aggregation primitives over any iterable.

these are plain functions rather than methods so that lists, generators,
numpy arrays, ranges and foldy enumerables all get them the same way.
"""
from __future__ import annotations

import inspect
import logging
import operator
from collections.abc import Mapping
from functools import reduce, singledispatch
from .types import *

logger = logging.getLogger(__name__)

DEFAULT_IDENTITY = 0


def _resolve_accessor(accessor: Accessor[T]) -> Selector[T, Any]:
    """turn a name or callable into a one-argument selector"""
    if callable(accessor):
        return accessor

    def by_name(element):
        if isinstance(element, Mapping):
            return element[accessor]
        value = getattr(element, accessor)
        # a method name means "call it", like sending a message
        if inspect.ismethod(value) or inspect.isbuiltin(value):
            return value()
        return value

    return by_name


def _fold(sequence: Iterable[T], identity: Any) -> Any:
    iterator = iter(sequence)
    try:
        first = next(iterator)
    except StopIteration:
        return identity
    return reduce(operator.add, iterator, first)


@singledispatch
def sum(sequence: Iterable[T], identity: Any = DEFAULT_IDENTITY,
        transform: Optional[Selector[T, Any]] = None) -> Any:
    """
    add up the elements of a sequence with `+`.

    with a transform, the transformed values are summed instead. an empty
    sequence gives back identity; a single element is returned as is.

        sum([5, 15, 10])          # => 30
        sum(["foo", "bar"])       # => "foobar"
        sum([[1, 2], [3, 1, 5]])  # => [1, 2, 3, 1, 5]
        sum([], Money(0), lambda p: p.amount)  # => Money(0)
    """
    if transform is not None:
        logger.debug(f"summing {type(sequence).__name__} through a transform")
        return sum([transform(element) for element in sequence], identity)
    logger.debug(f"summing {type(sequence).__name__} by folding")
    return _fold(sequence, identity)


@sum.register(IntegerRange)
def _sum_integer_range(sequence: IntegerRange, identity: Any = DEFAULT_IDENTITY,
                       transform: Optional[Selector[int, Any]] = None) -> Any:
    if transform is not None or not sequence.has_integer_bounds:
        logger.debug(f"{sequence!r} falls back to the generic sum")
        return sum.dispatch(object)(sequence, identity, transform)

    first, last = sequence.first, sequence.effective_last
    if last < first:
        # an empty range sums to 0 whatever the identity
        return 0
    logger.debug(f"summing {sequence!r} in closed form")
    return (last - first + 1) * (last + first) // 2


@sum.register(range)
def _sum_range(sequence: range, identity: Any = DEFAULT_IDENTITY,
               transform: Optional[Selector[int, Any]] = None) -> Any:
    if transform is not None:
        logger.debug(f"{sequence!r} falls back to the generic sum")
        return sum.dispatch(object)(sequence, identity, transform)

    n = len(sequence)
    if n == 0:
        return 0
    logger.debug(f"summing {sequence!r} in closed form")
    # any range is an arithmetic progression, whatever its step
    return n * (sequence[0] + sequence[-1]) // 2


def plucker(*accessors: Accessor[T]) -> Selector[T, Any]:
    """one selector for the given accessors; several accessors give tuples"""
    if not accessors:
        raise TypeError("pluck requires at least one accessor")
    selectors = [_resolve_accessor(accessor) for accessor in accessors]
    if len(selectors) == 1:
        return selectors[0]
    return lambda element: tuple(selector(element) for selector in selectors)


def pluck(sequence: Iterable[T], *accessors: Accessor[T]) -> List[Any]:
    """
    project every element through an accessor, keeping order and duplicates.

    an accessor is a callable or a name: names index mappings and read
    attributes of everything else, calling the attribute if it is a method.
    with several accessors each result is a tuple.

        pluck(people, 'name')           # => ['david', 'jamie']
        pluck(people, 'name', 'age')    # => [('david', 40), ('jamie', 38)]
    """
    selector = plucker(*accessors)
    return [selector(element) for element in sequence]


def each_with_object(sequence: Iterable[T], memo: M,
                     visit: Optional[Visitor[T, M]] = None) -> Union[M, LazyTraversal[T, M]]:
    """
    call visit(element, memo) for each element and return the same memo.

    visit must mutate memo in place: rebinding an immutable memo such as an
    int inside visit has no effect on what is returned.

        each_with_object(['foo', 'bar'], {}, lambda s, h: h.update({s: s.upper()}))
        # => {'foo': 'FOO', 'bar': 'BAR'}

    without visit, a LazyTraversal yielding (element, memo) pairs is returned.
    """
    if visit is None:
        return LazyTraversal(sequence, each_with_object, (memo,),
                             yields=lambda element: (element, memo))
    for element in sequence:
        visit(element, memo)
    return memo


def index_by(sequence: Iterable[T],
             key_selector: Optional[Accessor[T]] = None) -> Union[Dict[Any, T], LazyTraversal[T, Dict[Any, T]]]:
    """
    map key_selector(element) -> element. on a key collision the later
    element wins. key_selector takes the same forms as a pluck accessor.
    without one, a LazyTraversal over the elements is returned.
    """
    if key_selector is None:
        return LazyTraversal(sequence, index_by)
    selector = _resolve_accessor(key_selector)
    return {selector(element): element for element in sequence}


def many(sequence: Iterable[T], predicate: Optional[Predicate[T]] = None) -> bool:
    """true if more than one element (matching predicate, if given) exists. stops at the second."""
    found = 0
    for element in sequence:
        if predicate is None or predicate(element):
            found += 1
            if found > 1:
                return True
    return False


def exclude(sequence: Iterable[T], item: Any) -> bool:
    """the negation of `item in sequence`"""
    return item not in sequence
