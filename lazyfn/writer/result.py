from __future__ import annotations

from kungfu import Error, Ok, Result


class WriterResult[T, E, W]:
    """
    Outcome of a logged computation: its kungfu `Result` and the log it wrote.

    Matches positionally as `WriterResult(result, log)`.
    """

    __slots__ = ("_result", "_log")
    __match_args__ = ("result", "log")

    def __init__(self, result: Result[T, E], log: W) -> None:
        self._result = result
        self._log = log

    @property
    def result(self) -> Result[T, E]:
        return self._result

    @property
    def log(self) -> W:
        return self._log

    @property
    def is_ok(self) -> bool:
        return isinstance(self._result, Ok)

    @property
    def is_error(self) -> bool:
        return isinstance(self._result, Error)

    def __repr__(self) -> str:
        outcome = "ok" if self.is_ok else "error"
        return f"<WriterResult {outcome}: {self._result!r} with log {self._log!r}>"


__all__ = ("WriterResult",)
