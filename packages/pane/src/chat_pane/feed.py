"""Async ingestion — pump messages from a network source into a pane."""
from __future__ import annotations

import logging
from typing import AsyncIterable, Callable

from .pane import ChatPane

logger = logging.getLogger(__name__)


async def feed_messages(
    pane: ChatPane,
    source: AsyncIterable[str],
    on_update: Callable[[], None] | None = None,
) -> int:
    """
    Append every message ``source`` yields, calling ``on_update`` after each
    one (typically the host's request_render). Returns the number appended.
    """
    count = 0
    async for raw in source:
        pane.append_message(raw)
        count += 1
        if on_update is not None:
            on_update()
    logger.debug("Message source exhausted after %d messages", count)
    return count
