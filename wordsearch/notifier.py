import logging
from collections import defaultdict
from typing import Optional

import httpx

logger = logging.getLogger("wordsearch")

WORDS_PER_GROUP = 10


def format_notification(words: list[str], board_rows: list[str], timings: dict) -> tuple[str, str]:
    """Build (title, body) for a solve summary, grouped by word length."""
    distinct = list(dict.fromkeys(words))
    by_length: dict[int, list[str]] = defaultdict(list)
    for w in distinct:
        by_length[len(w)].append(w)

    width = len(board_rows[0]) if board_rows else 0
    title = f"Word search {width}x{len(board_rows)} - {len(distinct)} words"

    selected = []
    for length in sorted(by_length, reverse=True):
        selected.extend(by_length[length][:WORDS_PER_GROUP])

    counts = " | ".join(f"{l}L:{len(g)}" for l, g in sorted(by_length.items()))
    body = " ".join(board_rows) + "\n" + ",".join(selected) + "\n\n" + counts
    if "total" in timings:
        body += f"\n{timings['total']}ms"
    return title, body


async def send_notification(
    words: list[str],
    board_rows: list[str],
    timings: dict,
    topic: str,
    ntfy_url: str = "https://ntfy.sh",
    client: Optional[httpx.AsyncClient] = None,
) -> bool:
    """Post solve results to an ntfy server. Best-effort: failures are logged, not raised."""
    title, body = format_notification(words, board_rows, timings)
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=10.0) as owned:
                resp = await _post(owned, ntfy_url, topic, title, body)
        else:
            resp = await _post(client, ntfy_url, topic, title, body)
        resp.raise_for_status()
        logger.info("Notification sent to %s/%s (status %d)", ntfy_url, topic, resp.status_code)
        return True

    except Exception as e:
        logger.error("Failed to send notification: %s", e)
        return False


async def _post(client: httpx.AsyncClient, ntfy_url: str, topic: str, title: str, body: str) -> httpx.Response:
    return await client.post(
        f"{ntfy_url}/{topic}",
        content=body.encode("utf-8"),
        headers={
            "Title": title,
            "Tags": "mag",
        },
    )
