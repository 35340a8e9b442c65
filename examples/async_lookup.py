"""
Async combinators: each step awaits the callback once and absorbs failures.

Run: python examples/async_lookup.py
"""
import asyncio

from optionpy import some, from_throwing_async


PROFILES = {1: "ada", 2: "bob"}


async def fetch_profile(user_id):
    await asyncio.sleep(0.01)
    if user_id not in PROFILES:
        raise LookupError(f"user {user_id} not found")
    return PROFILES[user_id]


async def is_active(name):
    await asyncio.sleep(0.01)
    return name != "bob"


async def main():
    for user_id in (1, 2, 3):
        opt = await from_throwing_async(lambda: fetch_profile(user_id))
        active = await opt.filter_async(is_active)
        greeting = await active.fold_async(
            lambda name: asyncio.sleep(0, result=f"hello {name}"),
            lambda: asyncio.sleep(0, result="nobody active"),
        )
        print(user_id, "=>", greeting)

    total = await some(20).reduce_async(22, lambda acc, v: asyncio.sleep(0, result=acc + v))
    print("total =>", total)                                # 42


if __name__ == "__main__":
    asyncio.run(main())
