from numbers import Integral
from .types import *
from .errors import InvalidArgumentError, check_arguments
from .sequence import LazySequence


def _check_integer(name: str, value: Any) -> None:
    # None is left for the cursor to report as missing
    if value is not None and (isinstance(value, bool) or not isinstance(value, Integral)):
        raise InvalidArgumentError(name, value, "must be an integer")


def _check_count(count: Optional[int]) -> None:
    _check_integer("count", count)
    if count is not None and count < 0:
        raise InvalidArgumentError("count", count, "must be non-negative")


def from_iterable(data: Iterable[T]) -> LazySequence[T]:
    """lazy view over an existing iterable (a one-shot iterator stays one-shot)"""
    return LazySequence(lambda: data, lambda: check_arguments(source=data))


def from_range(start: int, count: int) -> LazySequence[int]:
    """
    count consecutive integers beginning at start.
    a non-integer start or count, or a negative count, fails immediately;
    nothing is generated until iteration.
    """
    _check_integer("start", start)
    _check_count(count)

    def produce():
        for offset in range(count):
            yield start + offset

    return LazySequence(produce, lambda: check_arguments(start=start, count=count))


def repeat(item: T, count: int) -> LazySequence[T]:
    """the same item, count times"""
    _check_count(count)

    def produce():
        for _ in range(count):
            yield item

    return LazySequence(produce, lambda: check_arguments(count=count))


def empty() -> LazySequence[Any]:
    """create empty sequence"""
    return LazySequence(lambda: ())


# --- aliases ---
S = from_iterable
