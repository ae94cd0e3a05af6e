from .types import *


def natural_order(left: Any, right: Any) -> int:
    """compare two keys using their own < and > operators"""
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def reverse_order(comparer: Comparer[K] = natural_order) -> Comparer[K]:
    """the given comparer with its arguments swapped, i.e. descending"""
    def reversed_comparer(left: K, right: K) -> int:
        return comparer(right, left)
    return reversed_comparer


def true_first(left: Any, right: Any) -> int:
    """truthy keys before falsy ones; keys of equal truthiness compare equal"""
    return natural_order(bool(right), bool(left))
