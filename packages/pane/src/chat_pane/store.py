"""
Message store — ordered, append-only list of decoded message strings.

Ingestion may run on a network thread while the UI thread renders, so every
mutation and every snapshot happens under one lock.
"""
from __future__ import annotations

import logging
import threading
from typing import Iterable

from .utils import decode_entities

logger = logging.getLogger(__name__)


class MessageStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._messages: list[str] = []
        self._version = 0

    @property
    def version(self) -> int:
        """Bumped on every mutation; wrap caches key on it."""
        with self._lock:
            return self._version

    @property
    def messages(self) -> tuple[str, ...]:
        return self.snapshot()[1]

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    def snapshot(self) -> tuple[int, tuple[str, ...]]:
        """Return (version, messages) as one consistent copy."""
        with self._lock:
            return self._version, tuple(self._messages)

    def load(self, initial: Iterable[str] | None) -> None:
        """Replace the contents. ``None`` (a failed fetch) loads nothing."""
        decoded = [decode_entities(raw) for raw in (initial or ())]
        with self._lock:
            self._messages = decoded
            self._version += 1
        logger.debug("Loaded %d messages", len(decoded))

    def append(self, raw: str) -> None:
        message = decode_entities(raw)
        with self._lock:
            self._messages.append(message)
            self._version += 1

    def clear(self) -> None:
        with self._lock:
            self._messages = []
            self._version += 1
        logger.debug("Cleared message store")
