"""
Writer
======

Run traces as values: `Log` accumulates entries, `WriterResult` pairs a
kungfu `Result` with its log, `LazyCoroResultWriter` defers producing one.
"""

from .log import Log
from .monad import LazyCoroResultWriter
from .result import WriterResult

__all__ = (
    "LazyCoroResultWriter",
    "Log",
    "WriterResult",
)
