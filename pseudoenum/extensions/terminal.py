from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import ISequence


class TerminalAccessor(Generic[T]):
    """
    exits from a sequence into ordinary containers.
    every call runs a full pass, so on a lazy sequence the producer runs again.
    """

    def __init__(self, sequence_instance: 'ISequence[T]'):
        self._sequence = sequence_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._sequence)

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._sequence)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements, or only those matching predicate"""
        if predicate is None: return sum(1 for _ in self._sequence)
        return sum(1 for x in self._sequence if predicate(x))
