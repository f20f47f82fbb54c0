from __future__ import annotations

import inspect
from typing import Any
import nodriver as nd

from .config import headless
from .log import log


async def start_browser() -> Any:
    """Start nodriver browser with basic options."""
    is_headless = headless()
    log("[boot] starting browser headless=", is_headless)
    browser = await nd.start(headless=is_headless)
    return browser


async def open_tab(browser: Any, url: str) -> Any:
    """Open a tab on url."""
    tab = await browser.get(url)
    return tab


async def close_tab(tab: Any) -> None:
    if tab is None:
        return
    await tab.close()


async def stop_browser(browser: Any) -> None:
    # stop() is a plain method on some nodriver releases and a coroutine on others.
    res = browser.stop()
    if inspect.isawaitable(res):
        await res
    log("[boot] browser stopped")
