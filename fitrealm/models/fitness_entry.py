# fitrealm/models/fitness_entry.py
from .. import db
from ..clock import utcnow


class FitnessEntry(db.Model):
    __tablename__ = "fitness_entries"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    # UTC calendar day; one row per user per day
    entry_date = db.Column(db.Date, nullable=False)

    calories = db.Column(db.Integer, nullable=False, default=0)
    steps = db.Column(db.Integer, nullable=False, default=0)
    exercise_minutes = db.Column(db.Integer, nullable=False, default=0)
    activity_type = db.Column(db.String(50), nullable=False, default="general")

    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=utcnow, onupdate=utcnow, nullable=False
    )

    __table_args__ = (
        db.UniqueConstraint("user_id", "entry_date", name="uq_fitness_entries_user_day"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "date": self.entry_date.isoformat() if self.entry_date else None,
            "calories": self.calories,
            "steps": self.steps,
            "exerciseMinutes": self.exercise_minutes,
            "activityType": self.activity_type,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
