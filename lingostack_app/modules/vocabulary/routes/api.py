# File: vocabulary/routes/api.py
# Vocabulary - JSON API Endpoints

from flask import jsonify, request

from lingostack_app.core.error_handlers import NotFoundError, ValidationError, success_response
from .. import vocabulary_api_bp
from ..forms import STUDY_ACTIONS
from ..services.category_service import CategoryService
from ..services.study_service import StudyService


@vocabulary_api_bp.route('/categories')
def api_get_categories():
    """All categories with word counts and the languages they share."""
    summaries = CategoryService.get_category_summaries()
    return jsonify(success_response({'categories': [summary.to_dict() for summary in summaries]}))


@vocabulary_api_bp.route('/categories/<category>/words')
def api_get_category_words(category):
    """Words of one category in file order."""
    words = CategoryService.get_category_words(category)
    if words is None:
        raise NotFoundError(f"Category '{category}' not found or has no valid words", resource=category)
    return jsonify(success_response({
        'category': category,
        'words': [word.to_dict() for word in words],
    }))


@vocabulary_api_bp.route('/learn/<mode>/<category>')
def api_get_study_view(mode, category):
    """Current view payload of the study session."""
    context = StudyService.open(category, mode)
    return jsonify(success_response(context.build_view()))


@vocabulary_api_bp.route('/learn/<mode>/<category>/action', methods=['POST'])
def api_apply_action(mode, category):
    """Apply an action sent as JSON: ``{"action": "reveal"}``."""
    payload = request.get_json(silent=True) or {}
    action = payload.get('action')
    if action not in STUDY_ACTIONS:
        raise ValidationError('Invalid study action', errors={'action': action})

    context = StudyService.open(category, mode)
    view = StudyService.apply_action(
        context,
        action,
        prompt_language=payload.get('prompt_language'),
        answer_language=payload.get('answer_language'),
    )
    return jsonify(success_response(view))
