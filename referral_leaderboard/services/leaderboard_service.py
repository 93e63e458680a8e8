import logging

from flask import current_app

from referral_leaderboard.services.snapshot import get_snapshot
from referral_leaderboard.utils.exceptions import ValidationError, WriteError

logger = logging.getLogger(__name__)


def get_leaderboard():
    # Full reload on every read; no pagination
    return get_snapshot().invalidate_and_reload()


def increment_referral(entry_id, snapshot_rows=None):
    """Add one referral to ``entry_id`` and return the reloaded leaderboard.

    The new count is computed from the snapshot the caller is looking at
    (``snapshot_rows``, or the last good snapshot, reloaded once if it lacks
    ``entry_id``), not read back from the store. Two increments issued from the same stale snapshot both write the
    same value, so one of them is lost. ``ATOMIC_INCREMENT`` switches to a
    database-side ``+ 1`` instead.
    """
    snapshot = get_snapshot()

    if current_app.config.get("ATOMIC_INCREMENT"):
        snapshot.store.increment(entry_id)
        logger.info("Atomically incremented referrals for %s", entry_id)
        return snapshot.invalidate_and_reload()

    if snapshot_rows is None:
        entry = snapshot.find(entry_id)
        if entry is None:
            # this worker may never have loaded the board the visitor saw
            snapshot.invalidate_and_reload()
            entry = snapshot.find(entry_id)
    else:
        entry = next((row for row in snapshot_rows if row["id"] == entry_id), None)
    if entry is None:
        raise WriteError(
            code="ENTRY_NOT_LOADED",
            message="Entry is not on the loaded leaderboard; reload and try again",
            details={"id": entry_id},
            status=409,
        )

    new_count = entry["referral_count"] + 1
    snapshot.store.update_count(entry_id, new_count)
    logger.info("Set referrals for %s to %d", entry_id, new_count)
    return snapshot.invalidate_and_reload()


def add_user(user_id):
    """Insert ``user_id`` with zero referrals; returns ``(entry, leaderboard)``.

    Blank names are rejected before the store is touched. Names are not
    required to be unique.
    """
    if not isinstance(user_id, str) or not user_id.strip():
        raise ValidationError("User ID must not be blank", details={"field": "userId"})

    snapshot = get_snapshot()
    entry = snapshot.store.insert(user_id.strip())
    leaderboard = snapshot.invalidate_and_reload()
    ranked = next((row for row in leaderboard if row["id"] == entry["id"]), entry)
    return ranked, leaderboard
