from __future__ import annotations

from _infra import User, banner

from kungfu import Some

import lazyfn as lz


def main() -> None:
    banner("01_sequences: lazy combinators + search")

    users = lz.arange(1, 7, fn=lambda v, i: User(id=v, name=f"user:{v}", is_active=v % 3 != 0))

    active = lz.ifilter(users, lambda user, i: user.is_active)
    names = lz.imap(active, lambda user, i, src: f"{i}:{user.name}")
    print(list(names))

    for pair in lz.izip(lz.irange(3), "abcdef"):
        print(pair)

    by_state = lz.partition(users, lambda user: user.is_active)
    print({state: [u.id for u in group] for state, group in by_state.items()})

    match lz.index_of(users, 4, lambda user, wanted: user.id == wanted):
        case Some(index):
            print(f"user 4 at {index}")
        case _:
            print("user 4 missing")

    print("all named:", lz.all_of(users, lambda user: bool(user.name)))
    print("last:", lz.last(lz.concat(users, [User(id=99, name="guest")])).unwrap())


if __name__ == "__main__":
    main()
