# fitrealm/models/achievement.py
from .. import db
from ..clock import utcnow

DAILY_REWARD_TYPE = "daily_reward"


class Achievement(db.Model):
    """
    Append-only trophy log.

    Rows of type "daily_reward" double as the once-per-day claim marker:
    they carry claim_date, and (user_id, type, claim_date) is unique.
    Other types leave claim_date NULL, which never collides.
    """

    __tablename__ = "achievements"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    title = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(255), nullable=False)
    type = db.Column(db.String(50), nullable=False)
    unlocked_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    claim_date = db.Column(db.Date)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    __table_args__ = (
        db.UniqueConstraint(
            "user_id", "type", "claim_date", name="uq_achievements_user_type_day"
        ),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "type": self.type,
            "unlockedAt": self.unlocked_at.isoformat() if self.unlocked_at else None,
        }
