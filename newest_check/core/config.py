from __future__ import annotations

import os

DEFAULT_ARTICLE_COUNT = 100


def article_count() -> int:
    raw = os.getenv("ARTICLE_COUNT", "").strip()
    if not raw:
        return DEFAULT_ARTICLE_COUNT
    try:
        count = int(raw)
    except ValueError:
        raise RuntimeError(f"ARTICLE_COUNT must be an integer, got {raw!r}") from None
    if count < 1:
        raise RuntimeError(f"ARTICLE_COUNT must be positive, got {count}")
    return count


def headless() -> bool:
    return os.getenv("HEADLESS", "1").strip() not in ("0", "false", "False")
