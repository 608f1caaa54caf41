#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.telephony import APIError, ClientConfig, TelephonyClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Send an SMS (or MMS with --media)")
    p.add_argument("from_number")
    p.add_argument("to_number")
    p.add_argument("body")
    p.add_argument("--media", default="", help="Public media URL to attach")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with TelephonyClient(config=ClientConfig.from_env()) as client:
        try:
            msg = await client.send_mms(args.from_number, args.to_number, args.body, args.media)
        except APIError as e:
            print(f"Send failed: {e} ({e.more_info or 'no details'})")
            return
        print(f"Queued {msg.sid}: status={msg.status} segments={msg.num_segments}")


if __name__ == "__main__":
    asyncio.run(main())
