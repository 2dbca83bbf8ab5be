# fitrealm/models/character.py
from .. import db
from ..clock import utcnow

STARTING_STAT = 10
STARTING_HEALTH = 100
STARTING_COINS = 100


class Character(db.Model):
    __tablename__ = "characters"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    name = db.Column(db.String(100), nullable=False)

    level = db.Column(db.Integer, nullable=False, default=1)
    xp = db.Column(db.BigInteger, nullable=False, default=0)

    strength = db.Column(db.Integer, nullable=False, default=STARTING_STAT)
    endurance = db.Column(db.Integer, nullable=False, default=STARTING_STAT)
    agility = db.Column(db.Integer, nullable=False, default=STARTING_STAT)

    health = db.Column(db.Integer, nullable=False, default=STARTING_HEALTH)
    max_health = db.Column(db.Integer, nullable=False, default=STARTING_HEALTH)
    coins = db.Column(db.BigInteger, nullable=False, default=STARTING_COINS)

    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    # leaderboard periods filter on this column
    updated_at = db.Column(
        db.DateTime, default=utcnow, onupdate=utcnow, nullable=False, index=True
    )

    __table_args__ = (
        db.CheckConstraint("level >= 1", name="ck_characters_level"),
        db.CheckConstraint("xp >= 0", name="ck_characters_xp"),
        db.CheckConstraint("coins >= 0", name="ck_characters_coins"),
        db.CheckConstraint(
            "strength >= 0 AND endurance >= 0 AND agility >= 0",
            name="ck_characters_stats",
        ),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "level": self.level,
            "xp": self.xp,
            "strength": self.strength,
            "endurance": self.endurance,
            "agility": self.agility,
            "health": self.health,
            "maxHealth": self.max_health,
            "coins": self.coins,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
