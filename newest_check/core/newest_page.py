from __future__ import annotations

import asyncio
import json
import time
from typing import Any, List, Optional

from .errors import NavigationFailure
from .log import log
from .selectors import AGE_ATTR, AGE_SEL, MORE_LINK_SEL, NEWEST_URL


def unwrap_js_value(x):
    """
    nodriver sometimes returns RemoteObject-like dicts:
    {"type":"string","value":"..."} instead of plain values.
    """
    if isinstance(x, dict):
        if "value" in x:
            return x["value"]
        if "result" in x and isinstance(x["result"], dict) and "value" in x["result"]:
            return x["result"]["value"]
    return x


_AGES_PRESENT_JS = f"(() => document.querySelectorAll({json.dumps(AGE_SEL)}).length > 0)()"

_SETTLED_JS = """(() => {{
  if (document.readyState !== 'complete') return false;
  if (location.href === {previous}) return false;
  return document.querySelectorAll({sel}).length > 0;
}})()"""

_MORE_VISIBLE_JS = f"""(() => {{
  const a = document.querySelector({json.dumps(MORE_LINK_SEL)});
  if (!a) return false;
  const r = a.getBoundingClientRect();
  const st = window.getComputedStyle(a);
  return r.width > 0 && r.height > 0 && st.visibility !== 'hidden' && st.display !== 'none';
}})()"""

_CLICK_MORE_JS = f"""(() => {{
  const a = document.querySelector({json.dumps(MORE_LINK_SEL)});
  if (!a) return false;
  a.scrollIntoView({{block:'center', inline:'center'}});
  a.click();
  return true;
}})()"""


class NewestPage:
    """
    Page object for the "newest" listing, driven through a nodriver tab.

    One instance owns one tab for the whole run. Every call is awaited
    before the next one is issued.
    """

    def __init__(self, tab: Any, settle_timeout: float = 30.0) -> None:
        self.tab = tab
        self.settle_timeout = settle_timeout

    async def goto(self, url: str = NEWEST_URL) -> None:
        log("[list] open", url)
        await self.tab.get(url)
        if not await self._poll(_AGES_PRESENT_JS, self.settle_timeout):
            raise NavigationFailure(f"No {AGE_SEL} elements on {url} (layout changed?)")

    async def age_elements(self) -> List[Any]:
        items = await self.tab.query_selector_all(AGE_SEL)
        return list(items or [])

    async def title_of(self, element: Any) -> Optional[str]:
        attrs = getattr(element, "attrs", None) or {}
        value = unwrap_js_value(attrs.get(AGE_ATTR))
        if not value:
            return None
        return str(value)

    async def has_more(self) -> bool:
        visible = await self.tab.evaluate(_MORE_VISIBLE_JS)
        return unwrap_js_value(visible) is True

    async def load_more(self) -> None:
        previous = unwrap_js_value(await self.tab.evaluate("location.href"))
        if not isinstance(previous, str):
            raise NavigationFailure(f"Could not read the current page URL: {previous!r}")
        clicked = unwrap_js_value(await self.tab.evaluate(_CLICK_MORE_JS))
        if clicked is not True:
            raise NavigationFailure("'More' link disappeared before it could be clicked")

        settled_js = _SETTLED_JS.format(
            previous=json.dumps(previous), sel=json.dumps(AGE_SEL)
        )
        if not await self._poll(settled_js, self.settle_timeout):
            raise NavigationFailure(
                f"Next page did not settle within {self.settle_timeout:.0f}s after clicking 'More'"
            )
        log("[list] moved past", previous)

    async def _poll(self, js: str, timeout: float) -> bool:
        end = time.time() + timeout
        while time.time() < end:
            try:
                ok = await self.tab.evaluate(js)
                if unwrap_js_value(ok) is True:
                    return True
            except Exception:
                # the execution context is torn down while the tab navigates
                pass
            await asyncio.sleep(0.4)
        return False
