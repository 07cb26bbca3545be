#!/usr/bin/env python3
"""Send one message through the AI relay and print the reply."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from airelay.config import settings
from airelay.services.relay import RelayError, relay


def _load_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("message", help="Message text to send")
    parser.add_argument(
        "--url",
        default=settings.default_api_url,
        help="AI endpoint URL (or set AIRELAY_DEFAULT_API_URL)",
    )
    return parser.parse_args()


async def _run(args: argparse.Namespace) -> int:
    if not args.url:
        raise ValueError("Missing --url (or AIRELAY_DEFAULT_API_URL)")

    try:
        response = await relay(args.message, args.url)
    except RelayError as exc:
        print(json.dumps({"kind": exc.kind.value, "error": str(exc)}), file=sys.stderr)
        return 1

    print(response.model_dump_json())
    return 0


def main() -> None:
    args = _load_args()
    sys.exit(asyncio.run(_run(args)))


if __name__ == "__main__":
    main()
