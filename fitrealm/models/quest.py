# fitrealm/models/quest.py
from .. import db
from ..clock import utcnow

QUEST_TYPES = ("daily", "weekly", "achievement")


class Quest(db.Model):
    __tablename__ = "quests"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    title = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(255), nullable=False, default="")
    type = db.Column(
        db.Enum(*QUEST_TYPES, name="quest_type"),
        nullable=False,
    )
    target = db.Column(db.Integer, nullable=False)
    progress = db.Column(db.Integer, nullable=False, default=0)
    completed = db.Column(db.Boolean, nullable=False, default=False)
    xp_reward = db.Column(db.Integer, nullable=False, default=50)
    coin_reward = db.Column(db.Integer, nullable=False, default=25)
    completed_at = db.Column(db.DateTime)

    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=utcnow, onupdate=utcnow, nullable=False
    )

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "description": self.description,
            "type": self.type,
            "target": self.target,
            "progress": self.progress,
            "completed": bool(self.completed),
            "xpReward": self.xp_reward,
            "coinReward": self.coin_reward,
            "completedAt": self.completed_at.isoformat() if self.completed_at else None,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
