# fitrealm/models/battle.py
from .. import db
from ..clock import utcnow


class Battle(db.Model):
    """Historical record of one resolved encounter. Rows are never updated."""

    __tablename__ = "battles"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    enemy_type = db.Column(db.String(100), nullable=False)
    player_action = db.Column(db.String(100), nullable=False)
    victory = db.Column(db.Boolean, nullable=False)
    xp_gained = db.Column(db.Integer, nullable=False, default=0)
    coins_gained = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False, index=True)

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "enemyType": self.enemy_type,
            "playerAction": self.player_action,
            "victory": bool(self.victory),
            "xpGained": self.xp_gained,
            "coinsGained": self.coins_gained,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
