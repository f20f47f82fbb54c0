from __future__ import annotations

from typing import Any, List

from .errors import TimestampParseError
from .log import log, warn


def parse_timestamp(title: str) -> int:
    """
    Pull the epoch seconds out of an age title:
      "2024-05-01T12:34:56 1714566896" -> 1714566896
    """
    parts = title.split()
    if len(parts) < 2:
        raise TimestampParseError(title)
    try:
        return int(parts[1])
    except ValueError:
        raise TimestampParseError(title) from None


async def collect_timestamps(page: Any, target: int = 100) -> List[int]:
    """
    Read age timestamps page by page until `target` are collected or
    there is no "More" link left. Returns at most `target` items, in
    display order.
    """
    if target < 1:
        raise ValueError(f"target must be positive, got {target}")

    timestamps: List[int] = []
    page_no = 0

    while len(timestamps) < target:
        page_no += 1
        elements = await page.age_elements()
        log("[list] page", page_no, "has", len(elements), "age elements")

        for el in elements:
            title = await page.title_of(el)
            if title:
                timestamps.append(parse_timestamp(title))
            else:
                warn("Found an age element with no title attribute.")

            if len(timestamps) == target:
                break

        if len(timestamps) < target:
            if await page.has_more():
                await page.load_more()
            else:
                warn(
                    f"Could not find the 'More' link. "
                    f"Validating with the {len(timestamps)} articles found (wanted {target})."
                )
                break

    return timestamps
