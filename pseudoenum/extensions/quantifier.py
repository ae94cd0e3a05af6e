from __future__ import annotations
from ..types import *
from ..errors import check_arguments


def for_all(source: Iterable[T], predicate: Predicate[T]) -> bool:
    """
    true when every element passes predicate, and for an empty source.
    stops at the first failing element without testing the rest.
    """
    check_arguments(source=source, predicate=predicate)

    for item in source:
        if not predicate(item):
            return False
    return True
