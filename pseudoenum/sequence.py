from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum, auto
from .types import *

# --- chainable operators ---
from .extensions.core import _SequenceOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)


# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """start a new pass over the elements"""
        pass


# --- pull cursor ---

class CursorState(Enum):
    CREATED = auto()
    VALIDATING = auto()
    PRODUCING = auto()
    EXHAUSTED = auto()
    FAILED = auto()


class PullCursor(Iterator[T]):
    """
    single pass over a lazy sequence.
    nothing runs until the first next(): argument validation happens there,
    then the producer is opened and pulled one element per call.
    once exhausted or failed, the cursor only raises StopIteration.
    """

    def __init__(self, validate: Validator, produce: Producer[T]):
        self._validate = validate
        self._produce = produce
        self._items: Optional[Iterator[T]] = None
        self.state = CursorState.CREATED

    def __iter__(self) -> 'PullCursor[T]':
        return self

    def __next__(self) -> T:
        if self.state is CursorState.CREATED:
            self._open()
        if self.state is not CursorState.PRODUCING:
            raise StopIteration

        try:
            return next(self._items)
        except StopIteration:
            self._close(CursorState.EXHAUSTED)
            raise
        except Exception as e:
            logger.debug(f"cursor failed while producing: {type(e).__name__}: {e}")
            self._close(CursorState.FAILED)
            raise

    def _open(self) -> None:
        self.state = CursorState.VALIDATING
        try:
            self._validate()
            self._items = iter(self._produce())
        except Exception as e:
            logger.debug(f"cursor failed validation: {type(e).__name__}: {e}")
            self._close(CursorState.FAILED)
            raise
        self.state = CursorState.PRODUCING

    def _close(self, state: CursorState) -> None:
        self._items = None
        self.state = state


def _no_validation() -> None:
    return None


# --- lazy sequence ---

class LazySequence(ISequence[T], _SequenceOperations[T]):
    """
    deferred sequence: every iteration re-runs the producer through a fresh cursor.
    may be infinite, so it has no len().
    """

    def __init__(self, produce: Producer[T], validate: Validator = _no_validation):
        self._produce = produce
        self._validate = validate
        self.to = TerminalAccessor(self)

    def __iter__(self) -> PullCursor[T]:
        return PullCursor(self._validate, self._produce)

    def __repr__(self) -> str:
        return f"LazySequence(produce={getattr(self._produce, '__qualname__', self._produce)!r})"


# --- materialized sequence ---

class MaterializedSequence(ISequence[T], _SequenceOperations[T]):
    """finite, already computed sequence; iterates the same elements every time"""

    def __init__(self, items: Iterable[T] = ()):
        self._items: Tuple[T, ...] = tuple(items)
        self.to = TerminalAccessor(self)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return MaterializedSequence(self._items[index])
        return self._items[index]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, MaterializedSequence):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"MaterializedSequence({list(self._items)!r})"
