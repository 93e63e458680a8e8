from referral_leaderboard.main import create_app
from referral_leaderboard.extensions import db
from referral_leaderboard.models.leaderboard_entry import LeaderboardEntry

# -------------------------------------------------------------------
# CONFIG
# -------------------------------------------------------------------

DEMO_ENTRIES = [
    ("alice", 12),
    ("bob", 9),
    ("carol", 9),
    ("dave", 4),
    ("erin", 0),
]


# -------------------------------------------------------------------
# MAIN LOGIC
# -------------------------------------------------------------------

def seed_demo_entries(entries=DEMO_ENTRIES):
    """Insert each demo user that is not on the board yet. Returns how many were added."""
    print("🚀 Seeding leaderboard")
    db.create_all()

    added = 0
    for user_id, referral_count in entries:
        existing = (
            db.session.query(LeaderboardEntry)
            .filter(LeaderboardEntry.user_id == user_id)
            .first()
        )
        if existing:
            print(f"⚠️  {user_id} already present ({existing.referral_count}), skipping")
            continue

        db.session.add(LeaderboardEntry(user_id=user_id, referral_count=referral_count))
        print(f"➕ {user_id:<8} {referral_count}")
        added += 1

    db.session.commit()
    print(f"\n✅ Seeding completed, {added} entries added.")
    return added


# -------------------------------------------------------------------
# ENTRY POINT
# -------------------------------------------------------------------

if __name__ == "__main__":
    app = create_app()
    with app.app_context():
        seed_demo_entries()
