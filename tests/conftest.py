import pytest

from referral_leaderboard.main import create_app
from referral_leaderboard.extensions import db
from referral_leaderboard.models.leaderboard_entry import LeaderboardEntry


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def snapshot(app):
    return app.extensions["leaderboard_snapshot"]


@pytest.fixture
def add_entry(app):
    def _add(user_id, referral_count=0):
        entry = LeaderboardEntry(user_id=user_id, referral_count=referral_count)
        db.session.add(entry)
        db.session.commit()
        return entry.id
    return _add


@pytest.fixture
def stored_count(app):
    def _count(entry_id):
        return db.session.execute(
            db.select(LeaderboardEntry.referral_count).where(LeaderboardEntry.id == entry_id)
        ).scalar_one()
    return _count
