from .extract import first, last
from .index import index_of
from .partition import partition
from .quantifiers import all_of, any_of
from .sets import sets_are_equal

__all__ = (
    "all_of",
    "any_of",
    "first",
    "index_of",
    "last",
    "partition",
    "sets_are_equal",
)
