"""
Store boundary for the ``leaderboard`` table.

Everything that talks to the database goes through ``LeaderboardStore``; any
SQLAlchemy failure (including the driver timeouts configured from
``STORE_TIMEOUT``) is rolled back, logged and re-raised as ``FetchError`` or
``WriteError``.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from referral_leaderboard.extensions import db
from referral_leaderboard.models.leaderboard_entry import LeaderboardEntry
from referral_leaderboard.utils.exceptions import FetchError, WriteError

logger = logging.getLogger(__name__)


class LeaderboardStore:

    def fetch_ordered(self):
        """All rows as plain dicts, highest ``referral_count`` first."""
        try:
            rows = (
                LeaderboardEntry.query
                .order_by(
                    LeaderboardEntry.referral_count.desc(),
                    LeaderboardEntry.created_at.asc(),
                    LeaderboardEntry.id.asc(),
                )
                .all()
            )
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error("Leaderboard fetch failed: %s", e)
            raise FetchError(details={"reason": str(e.__class__.__name__)}) from e
        return [row.to_dict() for row in rows]

    def update_count(self, entry_id, referral_count):
        """Overwrite one entry's count; last write wins."""
        return self._update(entry_id, {LeaderboardEntry.referral_count: referral_count})

    def increment(self, entry_id):
        """Atomic ``referral_count + 1`` evaluated by the database."""
        return self._update(entry_id, {LeaderboardEntry.referral_count: LeaderboardEntry.referral_count + 1})

    def insert(self, user_id):
        entry = LeaderboardEntry(user_id=user_id, referral_count=0)
        try:
            db.session.add(entry)
            db.session.commit()
            # expired on commit; the refresh is still a store round-trip
            created = entry.to_dict()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error("Leaderboard insert of %r failed: %s", user_id, e)
            raise WriteError(details={"userId": user_id}) from e
        logger.info("Added leaderboard entry %s for %r", created["id"], user_id)
        return created

    def _update(self, entry_id, values):
        try:
            updated = (
                LeaderboardEntry.query
                .filter_by(id=entry_id)
                .update(values, synchronize_session=False)
            )
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error("Leaderboard update of %s failed: %s", entry_id, e)
            raise WriteError(details={"id": entry_id}) from e

        if not updated:
            raise WriteError(
                code="ENTRY_NOT_FOUND",
                message="Leaderboard entry not found",
                details={"id": entry_id},
                status=404,
            )
        return updated
