from .lift import async_exec_result, async_exec_w
from .timers import fail_later, later
from .trampoline import EventHook, RunEvent, RunState, async_exec, is_pending

__all__ = (
    "EventHook",
    "RunEvent",
    "RunState",
    "async_exec",
    "async_exec_result",
    "async_exec_w",
    "fail_later",
    "is_pending",
    "later",
)
