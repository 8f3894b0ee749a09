from __future__ import annotations

from _infra import Failure, FakeBackend, User, banner, run

from kungfu import Error, Ok

from lazyfn import async_exec, async_exec_result, async_exec_w


def greet(api: FakeBackend, user_id: int):
    # Each yield waits for one future; failures are raised right here.
    try:
        user = yield api.fetch_user(user_id)
    except Failure:
        return f"hello, stranger #{user_id}"
    return f"hello, {user.name}"


async def main() -> None:
    banner("02_trampoline: async_exec + lifted variants")

    api = FakeBackend(
        name="api",
        delay_seconds=0.01,
        users={42: User(id=42, name="Ada")},
    )

    print(await async_exec(lambda: greet(api, 42)))
    print(await async_exec(lambda: greet(api, 7)))

    def strict():
        user = yield api.fetch_user(7)
        return user.name

    match await async_exec_result(strict):
        case Ok(name):
            print(name)
        case Error(err):
            print(f"error: {err!r}")

    traced = await async_exec_w(lambda: greet(api, 42))
    print(traced)
    print("states:", traced.log.field("state"))


if __name__ == "__main__":
    run(main)
