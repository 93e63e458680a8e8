from referral_leaderboard.extensions import db
from datetime import datetime
import uuid


def gen_entry_id():
    return f"lb-{uuid.uuid4()}"


class LeaderboardEntry(db.Model):
    __tablename__ = "leaderboard"

    id = db.Column(db.String(50), primary_key=True, default=gen_entry_id)
    user_id = db.Column(db.String(255), nullable=False)  # display name, not unique
    referral_count = db.Column(db.Integer, nullable=False, default=0, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        db.CheckConstraint("referral_count >= 0", name="ck_leaderboard_referral_count_non_negative"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "referral_count": self.referral_count,
        }

    def __repr__(self):
        return f"<LeaderboardEntry {self.id} {self.user_id}={self.referral_count}>"
