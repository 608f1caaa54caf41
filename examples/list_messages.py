#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
from datetime import date, timedelta

from laakhay.telephony import ClientConfig, MessageIterator, TelephonyClient, sent_after


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List recent messages using several concurrent workers")
    p.add_argument("days", nargs="?", type=int, default=7)
    p.add_argument("workers", nargs="?", type=int, default=4)
    return p.parse_args()


async def worker(name: int, iterator: MessageIterator) -> int:
    handled = 0
    # Every worker pulls from the same iterator; each message is seen once
    while (msg := await iterator.try_next()) is not None:
        print(f"[worker {name}] {msg.sid} {msg.status or '':>11} {(msg.body or '')[:40]!r}")
        handled += 1
    return handled


async def main() -> None:
    args = parse_args()
    since = date.today() - timedelta(days=args.days)

    async with TelephonyClient(config=ClientConfig.from_env()) as client:
        iterator = client.messages(sent_after(since)).iter()
        counts = await asyncio.gather(*(worker(i, iterator) for i in range(args.workers)))
        if iterator.last_error is not None:
            print(f"Stopped early: {iterator.last_error}")
        print(f"{sum(counts)} message(s) since {since}, split {counts}")


if __name__ == "__main__":
    asyncio.run(main())
