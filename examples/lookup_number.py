#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.telephony import ClientConfig, TelephonyClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Look up a phone number")
    p.add_argument("phone_number")
    p.add_argument("--no-carrier", action="store_true", help="Skip the carrier lookup")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with TelephonyClient(config=ClientConfig.from_env()) as client:
        if args.no_carrier:
            result = await client.lookup_no_carrier(args.phone_number)
        else:
            result = await client.lookup(args.phone_number)

    print(f"Number:   {result.phone_number}")
    print(f"National: {result.national_format}")
    print(f"Country:  {result.country_code}")
    if result.carrier is not None:
        print(f"Carrier:  {result.carrier.name} ({result.carrier.type})")


if __name__ == "__main__":
    asyncio.run(main())
