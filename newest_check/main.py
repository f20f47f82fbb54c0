# newest_check/main.py
from __future__ import annotations

import asyncio
import sys
import traceback
from typing import List

from dotenv import load_dotenv

from .core.browser import close_tab, open_tab, start_browser, stop_browser
from .core.collect import collect_timestamps
from .core.config import article_count
from .core.errors import CheckError
from .core.log import err, log, warn
from .core.newest_page import NewestPage
from .core.validate import validate_timestamps


async def scrape_newest(count: int) -> List[int]:
    browser = await start_browser()
    tab = None
    try:
        tab = await open_tab(browser, "about:blank")
        page = NewestPage(tab)
        await page.goto()
        return await collect_timestamps(page, count)
    finally:
        try:
            await close_tab(tab)
        except Exception as e:
            warn("[boot] closing tab failed", repr(e))
        try:
            await stop_browser(browser)
        except Exception as e:
            warn("[boot] stopping browser failed", repr(e))


async def main():
    load_dotenv()
    count = article_count()
    log("[run] checking the first", count, "articles on the newest page")

    timestamps = await scrape_newest(count)

    log(f"[check] Retrieved {len(timestamps)} articles. Now validating...")
    validate_timestamps(timestamps, count)


def run() -> int:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        err("Interrupted")
        return 1
    except CheckError as e:
        err("[FATAL]", e)
        return 1
    except Exception as e:
        err("[FATAL]", repr(e))
        traceback.print_exc()
        return 1
    return 0


def cli() -> None:
    sys.exit(run())


if __name__ == "__main__":
    cli()
