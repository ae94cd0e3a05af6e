from __future__ import annotations
import typing
from ..types import *
from ..comparers import natural_order

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence, MaterializedSequence


class _SequenceOperations(Generic[T]):
    """fluent forms of the free operators; self is passed as the source"""

    # --- lazy ---

    def filter(self, predicate: Predicate[T]) -> 'LazySequence[T]':
        """keep elements matching predicate"""
        from .lazy import filter
        return filter(self, predicate)

    def transform(self, mapper: Selector[T, U]) -> 'LazySequence[U]':
        """project each element to a new form"""
        from .lazy import transform
        return transform(self, mapper)

    def cast_to(self, target_type: CastTarget[U]) -> 'LazySequence[U]':
        """type-check each element on the way out"""
        from .lazy import cast_to
        return cast_to(self, target_type)

    # --- eager ---

    def sort_by(self, key_selector: KeySelector[T, K],
                comparer: Comparer[K] = natural_order) -> 'MaterializedSequence[T]':
        """stable ascending sort by a key"""
        from .sort import sort_by
        return sort_by(self, key_selector, comparer)

    def sort_by_keys(self, first_key_selector: KeySelector[T, K],
                     second_key_selector: KeySelector[T, U]) -> 'MaterializedSequence[T]':
        """sort by first key, then stably by second key (second key dominates)"""
        from .sort import sort_by_keys
        return sort_by_keys(self, first_key_selector, second_key_selector)

    def sort_by_descending(self, key_selector: KeySelector[T, K],
                           comparer: Comparer[K] = natural_order) -> 'MaterializedSequence[T]':
        """ascending sort, reversed"""
        from .sort import sort_by_descending
        return sort_by_descending(self, key_selector, comparer)

    def for_all(self, predicate: Predicate[T]) -> bool:
        """check that every element satisfies predicate"""
        from .quantifier import for_all
        return for_all(self, predicate)
