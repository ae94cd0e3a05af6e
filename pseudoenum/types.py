from dataclasses import dataclass
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    List, Tuple, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[K, K], int]
Validator = Callable[[], None]
Producer = Callable[[], Iterable[T]]


def _identity(element: Any) -> Any:
    return element


@dataclass(frozen=True)
class TypeCheck(Generic[U]):
    """
    capability pair used by cast_to: a membership test plus a converter.
    build one by hand for custom compatibility rules, or use of()/exact().
    """
    name: str
    accepts: Callable[[Any], bool]
    convert: Callable[[Any], U] = _identity

    @classmethod
    def of(cls, target: Union[Type[U], Tuple[Type, ...]]) -> 'TypeCheck[U]':
        """isinstance-based check, subclasses included"""
        if isinstance(target, tuple):
            name = " | ".join(t.__name__ for t in target)
        else:
            name = target.__name__
        return cls(name, lambda element: isinstance(element, target))

    @classmethod
    def exact(cls, target: Type[U]) -> 'TypeCheck[U]':
        """accepts only elements whose type is exactly target (bool is not an int here)"""
        return cls(target.__name__, lambda element: type(element) is target)

    def __repr__(self) -> str:
        return f"TypeCheck({self.name})"


CastTarget = Union[Type[U], Tuple[Type, ...], TypeCheck[U]]
