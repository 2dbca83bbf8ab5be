# fitrealm/services/story.py
from typing import Any, Dict, List, Optional

from ..repositories import story as story_repo
from ..transaction import atomic

DEFAULT_PROGRESS = {"currentChapter": 1, "completedChapters": []}


def get_progress(user_id: int) -> Dict[str, Any]:
    progress = story_repo.get_progress(user_id)
    if progress is None:
        return dict(DEFAULT_PROGRESS, completedChapters=[])
    return progress.to_dict()


def _dedupe(chapters: List[int]) -> List[int]:
    seen = set()
    ordered = []
    for chapter in chapters:
        if chapter not in seen:
            seen.add(chapter)
            ordered.append(chapter)
    return ordered


def save_progress(
    user_id: int,
    current_chapter: Optional[int] = None,
    completed_chapters: Optional[List[int]] = None,
) -> Dict[str, Any]:
    if completed_chapters is not None:
        completed_chapters = _dedupe(completed_chapters)

    with atomic():
        progress = story_repo.upsert_progress(
            user_id,
            current_chapter=current_chapter,
            completed_chapters=completed_chapters,
        )
    return progress.to_dict()
