"""Convenience script for summarising an article from the terminal."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Ensure the src directory is on the Python path so the newsbrief package can be imported
SRC_PATH = Path(__file__).resolve().parent / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from newsbrief.client import SummaryConsumer, format_bullets  # noqa: E402  (import after path setup)
from newsbrief.client.consumer import DEFAULT_SERVER  # noqa: E402

CLEAR_SCREEN = "\x1b[H\x1b[J"


def _redraw(bullets: list[str]) -> None:
    sys.stdout.write(CLEAR_SCREEN + format_bullets(bullets) + "\n")
    sys.stdout.flush()


async def _summarise(url: str, server: str) -> bool:
    async with SummaryConsumer(
        base_url=server,
        on_update=_redraw,
        on_notice=lambda message: logging.error("%s", message),
    ) as consumer:
        return await consumer.submit(url)


def main() -> None:
    """Stream the summary of a single article and redraw it as bullets."""

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("url", help="CNBC Indonesia article URL")
    parser.add_argument("--server", default=DEFAULT_SERVER, help="newsbrief server base URL")
    args = parser.parse_args()

    if not asyncio.run(_summarise(args.url, args.server)):
        logging.error("No summary could be generated for %s", args.url)
        sys.exit(1)


if __name__ == "__main__":
    main()
