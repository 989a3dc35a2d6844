"""Bounded undo/redo log of committed buffer snapshots."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from .constants import HISTORY_LIMIT
from .pixel_buffer import PixelBuffer


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    label: str
    state: bytes

    def restore(self) -> PixelBuffer:
        return PixelBuffer.from_bytes(self.state)


class HistoryManager:
    """Snapshots plus a cursor.

    Starts empty; the first ``init`` (or ``commit``) makes it ready with the
    cursor at 0. Committing after an undo drops the redo tail, and the oldest
    entry is evicted once ``limit`` is exceeded.
    """

    def __init__(self, limit: int = HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError("History limit must be at least 1")
        self._limit = limit
        self._history: List[HistoryEntry] = []
        self._index = -1
        self._last_undo_label: str | None = None
        self._last_redo_label: str | None = None

    @property
    def is_ready(self) -> bool:
        return self._index >= 0

    @property
    def cursor(self) -> int:
        return self._index

    @property
    def limit(self) -> int:
        return self._limit

    def __len__(self) -> int:
        return len(self._history)

    @property
    def labels(self) -> List[str]:
        return [entry.label for entry in self._history]

    def current(self) -> PixelBuffer | None:
        if not self.is_ready:
            return None
        return self._history[self._index].restore()

    def init(self, buffer: PixelBuffer, label: str = "init") -> None:
        self._history = [HistoryEntry(label=label, state=buffer.to_bytes())]
        self._index = 0
        self._last_undo_label = None
        self._last_redo_label = None
        logger.debug("History init label=%s entries=%s index=%s", label, len(self._history), self._index)

    def commit(self, buffer: PixelBuffer, label: str = "edit") -> None:
        if not self.is_ready:
            self.init(buffer, label)
            return
        if self._index < len(self._history) - 1:
            self._history = self._history[: self._index + 1]
            logger.debug("History commit truncated future branch label=%s new_len=%s", label, len(self._history))
        self._history.append(HistoryEntry(label=label, state=buffer.to_bytes()))
        self._index += 1
        if len(self._history) > self._limit:
            evicted = self._history.pop(0)
            self._index -= 1
            logger.debug("History evicted oldest label=%s", evicted.label)
        logger.debug(
            "History commit added label=%s index=%s entries=%s",
            label,
            self._index,
            len(self._history),
        )

    def undo(self) -> PixelBuffer | None:
        if not self.can_undo:
            logger.debug("History undo skipped index=%s entries=%s", self._index, len(self._history))
            return None
        undone_label = self._history[self._index].label
        self._index -= 1
        self._last_undo_label = undone_label
        logger.debug(
            "History undo undo_label=%s apply_label=%s index=%s entries=%s",
            undone_label,
            self._history[self._index].label,
            self._index,
            len(self._history),
        )
        return self._history[self._index].restore()

    def redo(self) -> PixelBuffer | None:
        if not self.can_redo:
            logger.debug("History redo skipped index=%s entries=%s", self._index, len(self._history))
            return None
        self._index += 1
        applied_label = self._history[self._index].label
        self._last_redo_label = applied_label
        logger.debug("History redo apply label=%s index=%s entries=%s", applied_label, self._index, len(self._history))
        return self._history[self._index].restore()

    @property
    def last_undo_label(self) -> str | None:
        return self._last_undo_label

    @property
    def last_redo_label(self) -> str | None:
        return self._last_redo_label

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index >= 0 and self._index < len(self._history) - 1
