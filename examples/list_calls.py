#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.telephony import ClientConfig, TelephonyClient, from_number, started_after, to_number


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List calls for the account in TWILIO_* env vars")
    p.add_argument("--from", dest="from_", default=None, help="Only calls from this number")
    p.add_argument("--to", default=None, help="Only calls to this number")
    p.add_argument("--since", default=None, help="Only calls started after YYYY-MM-DD")
    p.add_argument("--limit", type=int, default=50)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    confs = []
    if args.from_:
        confs.append(from_number(args.from_))
    if args.to:
        confs.append(to_number(args.to))
    if args.since:
        confs.append(started_after(args.since))

    async with TelephonyClient(config=ClientConfig.from_env()) as client:
        iterator = client.calls(*confs).iter()
        print(f"{'Sid':34} | {'From':>15} | {'To':>15} | {'Status':>11} | {'Duration':>8}")
        print("-" * 94)
        count = 0
        async for call in iterator:
            print(
                f"{call.sid:34} | {call.from_ or '':>15} | {call.to or '':>15} | "
                f"{call.status or '':>11} | {call.duration or '':>8}"
            )
            count += 1
            if count >= args.limit:
                break
        if iterator.last_error is not None:
            print(f"Stopped early: {iterator.last_error}")
        print(f"{count} call(s) over {iterator.pages_fetched} page(s)")


if __name__ == "__main__":
    asyncio.run(main())
