"""
History Manager
===============

Linear undo/redo over full editor snapshots.

A new capture after undo discards the redo branch. At most `limit`
states are kept; the oldest is evicted first and the index follows the
current state.
"""

import logging
from typing import List, Optional

from ..models.banner_models import BannerConfig, HistoryState, TextElement

logger = logging.getLogger(__name__)

MAX_HISTORY = 20


class HistoryManager:
    """Bounded undo/redo stack of HistoryState snapshots."""

    def __init__(self, limit: int = MAX_HISTORY):
        if limit < 1:
            raise ValueError("History limit must be at least 1")
        self.limit = limit
        self._states: List[HistoryState] = []
        self._index = -1

    def __len__(self) -> int:
        return len(self._states)

    @property
    def index(self) -> int:
        """Position of the visible state, -1 when empty."""
        return self._index

    @property
    def current(self) -> Optional[HistoryState]:
        """Copy of the visible state. Stored states are never handed out."""
        if self._index < 0:
            return None
        return self._states[self._index].model_copy(deep=True)

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return 0 <= self._index < len(self._states) - 1

    def reset(self, elements: List[TextElement], config: BannerConfig) -> HistoryState:
        """Drop all history and seed it with a single state."""
        self._states = []
        self._index = -1
        return self.capture(elements, config)

    def capture(self, elements: List[TextElement], config: BannerConfig) -> HistoryState:
        """Append a deep copy of the given state and make it current.

        Returns a copy of the new state.
        """
        state = HistoryState.capture(elements, config)

        # Discard the redo branch
        del self._states[self._index + 1:]
        self._states.append(state)

        overflow = len(self._states) - self.limit
        if overflow > 0:
            del self._states[:overflow]

        self._index = len(self._states) - 1
        logger.debug(f"[HISTORY] Captured state {self._index + 1}/{len(self._states)}")
        return state.model_copy(deep=True)

    def undo(self) -> Optional[HistoryState]:
        """Step back one state. No-op at the oldest state."""
        if self.can_undo:
            self._index -= 1
            logger.debug(f"[HISTORY] Undo -> {self._index}")
        return self.current

    def redo(self) -> Optional[HistoryState]:
        """Step forward one state. No-op at the newest state."""
        if self.can_redo:
            self._index += 1
            logger.debug(f"[HISTORY] Redo -> {self._index}")
        return self.current

    def states(self) -> List[HistoryState]:
        """All retained states, oldest first."""
        return [state.model_copy(deep=True) for state in self._states]
