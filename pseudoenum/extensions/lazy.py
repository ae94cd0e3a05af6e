from __future__ import annotations
import logging
from ..types import *
from ..errors import TypeMismatchError, check_arguments
from ..sequence import LazySequence

logger = logging.getLogger(__name__)


def filter(source: Iterable[T], predicate: Predicate[T]) -> LazySequence[T]:
    """
    keep the elements for which predicate returns true, in their original order.
    a missing source or predicate is only reported once iteration starts.
    """
    def validate():
        check_arguments(source=source, predicate=predicate)

    def produce():
        for item in source:
            if predicate(item):
                yield item

    return LazySequence(produce, validate)


def transform(source: Iterable[T], mapper: Selector[T, U]) -> LazySequence[U]:
    """map each element to a new form, one element per pull"""
    def validate():
        check_arguments(source=source, mapper=mapper)

    def produce():
        for item in source:
            yield mapper(item)

    return LazySequence(produce, validate)


def _resolve_type_check(target: CastTarget[U]) -> TypeCheck[U]:
    if isinstance(target, TypeCheck):
        return target
    members = target if isinstance(target, tuple) else (target,)
    if not members or not all(isinstance(member, type) for member in members):
        raise TypeError(f"cast_to target must be a type, a tuple of types or a TypeCheck, got {target!r}")
    return TypeCheck.of(target)


def cast_to(source: Iterable[Any], target_type: CastTarget[U]) -> LazySequence[U]:
    """
    check every element against target_type as it is pulled.
    elements before an incompatible one are still yielded; the incompatible
    one raises TypeMismatchError at its own position.
    """
    def validate():
        check_arguments(source=source, target_type=target_type)

    def produce():
        check = _resolve_type_check(target_type)
        for index, item in enumerate(source):
            if not check.accepts(item):
                logger.debug(f"cast_to rejected {item!r} at index {index} (expected {check.name})")
                raise TypeMismatchError(item, check.name, index)
            yield check.convert(item)

    return LazySequence(produce, validate)
