# fitrealm/models/story_progress.py
from .. import db
from ..clock import utcnow


class StoryProgress(db.Model):
    __tablename__ = "story_progress"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    current_chapter = db.Column(db.Integer, nullable=False, default=1)
    # chapter numbers in the order they were completed
    completed_chapters = db.Column(db.JSON, nullable=False, default=list)

    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=utcnow, onupdate=utcnow, nullable=False
    )

    def to_dict(self):
        return {
            "currentChapter": self.current_chapter,
            "completedChapters": list(self.completed_chapters or []),
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
