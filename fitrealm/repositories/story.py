# fitrealm/repositories/story.py
from typing import List, Optional

from sqlalchemy import select

from .. import db
from ..clock import utcnow
from ..models.story_progress import StoryProgress
from .upsert import insert_ignoring_conflict


def get_progress(user_id: int) -> Optional[StoryProgress]:
    stmt = (
        select(StoryProgress)
        .where(StoryProgress.user_id == user_id)
        .execution_options(populate_existing=True)
    )
    return db.session.execute(stmt).scalar_one_or_none()


def upsert_progress(
    user_id: int,
    current_chapter: Optional[int] = None,
    completed_chapters: Optional[List[int]] = None,
) -> StoryProgress:
    insert_ignoring_conflict(
        StoryProgress,
        user_id=user_id,
        current_chapter=1,
        completed_chapters=[],
    )

    progress = get_progress(user_id)
    if current_chapter is not None:
        progress.current_chapter = current_chapter
    if completed_chapters is not None:
        progress.completed_chapters = completed_chapters
    progress.updated_at = utcnow()

    db.session.flush()
    return progress
