from typing import Any, Optional


class SequenceError(Exception):
    """base class for every error raised by the operators themselves"""
    pass


class MissingArgumentError(SequenceError, ValueError):
    """a source, callback or comparer was None"""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} can't be None")


class InvalidArgumentError(SequenceError, ValueError):
    """an argument was present but out of its allowed range"""

    def __init__(self, argument: str, value: Any, reason: str):
        self.argument = argument
        self.value = value
        super().__init__(f"{argument} {reason}, got {value!r}")


class TypeMismatchError(SequenceError, TypeError):
    """an element reached during cast_to is not compatible with the target type"""

    def __init__(self, element: Any, target: str, index: Optional[int] = None):
        self.element = element
        self.target = target
        self.index = index
        position = f" at index {index}" if index is not None else ""
        super().__init__(
            f"invalid cast{position}: {type(element).__name__} is not {target}")


def check_arguments(**arguments: Any) -> None:
    """raise MissingArgumentError for the first argument that is None, in keyword order"""
    for name, value in arguments.items():
        if value is None:
            raise MissingArgumentError(name)
