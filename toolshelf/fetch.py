"""Fetch the body of a web page over HTTP."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Optional, Sequence

import httpx


async def perform_get_request(url: str) -> str:
    """Return the body of a GET request as text, whatever the status.

    Raises httpx.HTTPError when the request cannot be made.
    """
    async with httpx.AsyncClient(follow_redirects=True) as client:
        response = await client.get(url)
        return response.text


async def get_request(url: str) -> str:
    """Return the body of a GET request, or a description of the failure."""
    try:
        return await perform_get_request(url)
    except httpx.HTTPError as error:
        return f"Error: {error!r}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Fetch a URL and print its body; return the process exit status."""
    parser = argparse.ArgumentParser(description="Fetch data from a URL.")
    parser.add_argument("url", help="the address to fetch")
    args = parser.parse_args(argv)
    try:
        data = asyncio.run(perform_get_request(args.url))
    except httpx.HTTPError as error:
        print(f"Error fetching data: {error}", file=sys.stderr)
        return 1
    print(f"Fetched data: {data}")
    return 0


if __name__ == "__main__":
    sys.exit(main())