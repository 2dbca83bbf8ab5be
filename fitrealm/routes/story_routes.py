# fitrealm/routes/story_routes.py
from flask import Blueprint, jsonify

from ..auth import Identity, login_required
from ..errors import InvalidRequest
from ..services import story
from ..validation import json_body, positive_int, positive_int_list

story_bp = Blueprint("story", __name__)


@story_bp.route("", methods=["GET"])
@login_required
def get_story(identity: Identity):
    return jsonify(story.get_progress(identity.user_id)), 200


@story_bp.route("", methods=["PUT"])
@login_required
def update_story(identity: Identity):
    """
    Body: { "currentChapter": 3, "completedChapters": [1, 2] }
    Either key may be omitted; completedChapters keeps completion order.
    """
    data = json_body()

    current_chapter = positive_int(data, "currentChapter")
    completed_chapters = positive_int_list(data, "completedChapters")
    if current_chapter is None and completed_chapters is None:
        raise InvalidRequest("currentChapter or completedChapters is required")

    progress = story.save_progress(
        identity.user_id,
        current_chapter=current_chapter,
        completed_chapters=completed_chapters,
    )
    return jsonify(progress), 200
