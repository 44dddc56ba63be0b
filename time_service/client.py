#!/usr/bin/env python3

import argparse
import asyncio
import logging

import httpx

from time_service.config import DEFAULT_PORT

DEFAULT_URL = f"http://localhost:{DEFAULT_PORT}"


async def fetch_time(base_url=DEFAULT_URL, transport=None):
    """
    Fetch the server time from <base_url>/time and return the currentTime value.
    """
    async with httpx.AsyncClient(base_url=base_url, transport=transport) as client:
        response = await client.get("/time")

        # Raise an error if the request was unsuccessful (e.g., 404, 500)
        response.raise_for_status()

    return response.json()["currentTime"]


def main(argv=None):
    parser = argparse.ArgumentParser(description="HTTP time client")
    parser.add_argument("--url", default=DEFAULT_URL)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    print(f"Sending request to {args.url}/time...")
    try:
        current_time = asyncio.run(fetch_time(args.url))
    except (httpx.ConnectError, httpx.HTTPStatusError) as e:
        print(f"Failed to fetch resource: {e}")
        return 1

    print("Response received successfully!")
    print(f"  Payload (Server Time): {current_time}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
