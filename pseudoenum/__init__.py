"""
 .-----------------------------------.
 |  p s e u d o e n u m              |
 |  generic sequence operators       |
 '-----------------------------------'
"""

import logging

# expose the sequence classes
from .sequence import (
    ISequence,
    LazySequence,
    MaterializedSequence,
    PullCursor,
    CursorState
)

# expose the operators (filter stays out of __all__ so `import *` keeps the builtin)
from .extensions.lazy import filter, transform, cast_to
from .extensions.sort import sort_by, sort_by_keys, sort_by_descending
from .extensions.quantifier import for_all

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    S
)

# expose comparers, cast capabilities and errors
from .comparers import natural_order, reverse_order, true_first
from .types import TypeCheck
from .errors import (
    SequenceError,
    MissingArgumentError,
    InvalidArgumentError,
    TypeMismatchError
)

# the host application decides where log records go
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "ISequence",
    "LazySequence",
    "MaterializedSequence",
    "PullCursor",
    "CursorState",
    "transform",
    "cast_to",
    "sort_by",
    "sort_by_keys",
    "sort_by_descending",
    "for_all",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "S",
    "natural_order",
    "reverse_order",
    "true_first",
    "TypeCheck",
    "SequenceError",
    "MissingArgumentError",
    "InvalidArgumentError",
    "TypeMismatchError"
]
