from __future__ import annotations
import typing
from functools import reduce
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    """materializing endpoints: `enumerable.to.list()`"""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """every element, cached after the first call"""
        return self._enumerable._get_data()

    def aggregate(self, accumulator: Accumulator[U, T], seed: Optional[U] = None) -> U:
        """
        pure left fold. unlike agg.each_with_object, the accumulator returns the
        next state, so immutable seeds such as numbers work.
        """
        data = self._enumerable._get_data()
        if not data and seed is None: raise ValueError("cannot aggregate empty sequence without seed")
        return reduce(accumulator, data, seed) if seed is not None else reduce(accumulator, data)
