from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from lazyfn import fail_later, later  # noqa: E402


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    is_active: bool = True


def _empty_users() -> dict[int, User]:
    return {}


@dataclass(slots=True)
class FakeBackend:
    """Hands out futures that settle after `delay_seconds`."""

    name: str
    delay_seconds: float = 0.0
    users: dict[int, User] = field(default_factory=_empty_users)

    def fetch_user(self, user_id: int) -> asyncio.Future[User]:
        user = self.users.get(user_id)
        if user is None:
            return fail_later(self.delay_seconds, Failure(f"{self.name}: no user {user_id}"))
        return later(self.delay_seconds, user)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
