"""Process-wide read model of the ranked leaderboard."""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional

from flask import current_app

from referral_leaderboard.services.ranking import assign_ranks
from referral_leaderboard.services.store import LeaderboardStore
from referral_leaderboard.utils.exceptions import FetchError

logger = logging.getLogger(__name__)

EXTENSION_KEY = "leaderboard_snapshot"


class LeaderboardSnapshot:
    """Ranked copy of the whole collection, replaced wholesale on every reload.

    A failed reload leaves the last good snapshot in place and re-raises the
    ``FetchError``; callers decide whether to show it and keep rendering
    ``last_known_good()``.
    """

    def __init__(self, store: Optional[LeaderboardStore] = None) -> None:
        self.store = store or LeaderboardStore()
        self._lock = threading.Lock()
        self._current: Optional[List[Dict[str, Any]]] = None
        self._previous: Optional[List[Dict[str, Any]]] = None
        self.last_error: Optional[FetchError] = None

    def get(self) -> List[Dict[str, Any]]:
        """Current ranked entries, loading them on first use."""
        if self._current is None:
            return self.invalidate_and_reload()
        return list(self._current)

    def invalidate_and_reload(self) -> List[Dict[str, Any]]:
        with self._lock:
            try:
                ranked = assign_ranks(self.store.fetch_ordered())
            except FetchError as e:
                self.last_error = e
                logger.warning("Keeping last known leaderboard after failed reload: %s", e.message)
                raise
            # previous only moves when the data changed, so a plain refresh
            # after a mutation still compares against the pre-mutation ranks
            if ranked != self._current:
                self._previous = self._current
            self._current = ranked
            self.last_error = None
            logger.debug("Leaderboard reloaded with %d entries", len(ranked))
            return list(ranked)

    def last_known_good(self) -> List[Dict[str, Any]]:
        return list(self._current or [])

    def pop_previous(self) -> List[Dict[str, Any]]:
        """Last snapshot that differed from the current one, handed out once.

        Later calls get ``[]`` until the data changes again.
        """
        with self._lock:
            previous, self._previous = self._previous, None
        return list(previous or [])

    def find(self, entry_id: str) -> Optional[Dict[str, Any]]:
        for row in self._current or []:
            if row["id"] == entry_id:
                return row
        return None


def init_snapshot(app, store: Optional[LeaderboardStore] = None) -> LeaderboardSnapshot:
    snapshot = LeaderboardSnapshot(store)
    app.extensions[EXTENSION_KEY] = snapshot
    return snapshot


def get_snapshot() -> LeaderboardSnapshot:
    return current_app.extensions[EXTENSION_KEY]
