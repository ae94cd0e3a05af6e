from __future__ import annotations
import logging
from functools import cmp_to_key
from operator import itemgetter
from ..types import *
from ..comparers import natural_order
from ..errors import check_arguments
from ..sequence import MaterializedSequence

logger = logging.getLogger(__name__)


def _sort_pairs(source: Iterable[T], key_selector: KeySelector[T, K],
                comparer: Comparer[K]) -> List[T]:
    # one pass over the source, keys stay paired with their elements
    pairs = [(key_selector(item), item) for item in source]

    # list.sort is stable, equal keys keep their source order
    if comparer is natural_order:
        pairs.sort(key=itemgetter(0))
    else:
        key_order = cmp_to_key(comparer)
        pairs.sort(key=lambda pair: key_order(pair[0]))

    logger.debug(f"sorted {len(pairs)} elements")
    return [item for _, item in pairs]


def sort_by(source: Iterable[T], key_selector: KeySelector[T, K],
            comparer: Comparer[K] = natural_order) -> MaterializedSequence[T]:
    """
    stable ascending sort by key. consumes the whole source right away.
    without a comparer the keys' natural ordering is used; passing None
    as the comparer is an error.
    """
    check_arguments(source=source, key_selector=key_selector, comparer=comparer)
    return MaterializedSequence(_sort_pairs(source, key_selector, comparer))


def sort_by_keys(source: Iterable[T], first_key_selector: KeySelector[T, K],
                 second_key_selector: KeySelector[T, U]) -> MaterializedSequence[T]:
    """
    sort by the first key, then re-sort that result by the second key.
    the second sort is stable, so the second key decides the order and the
    first key only orders elements whose second keys are equal.
    """
    check_arguments(source=source, first_key_selector=first_key_selector,
                    second_key_selector=second_key_selector)
    by_first = _sort_pairs(source, first_key_selector, natural_order)
    return MaterializedSequence(_sort_pairs(by_first, second_key_selector, natural_order))


def sort_by_descending(source: Iterable[T], key_selector: KeySelector[T, K],
                       comparer: Comparer[K] = natural_order) -> MaterializedSequence[T]:
    """
    ascending sort_by, then the whole result reversed.
    elements with equal keys therefore come out in reverse source order.
    """
    check_arguments(source=source, key_selector=key_selector, comparer=comparer)
    ascending = _sort_pairs(source, key_selector, comparer)
    return MaterializedSequence(reversed(ascending))
