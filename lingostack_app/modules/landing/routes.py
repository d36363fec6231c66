from flask import current_app, render_template

from lingostack_app.core.error_handlers import CategoryStorageError
from lingostack_app.modules.vocabulary.interface import VocabularyInterface
from . import landing_bp


@landing_bp.route('/')
def index():
    """
    Home page: one button per category, sorted alphabetically.
    """
    try:
        categories = VocabularyInterface.list_categories()
    except CategoryStorageError:
        return render_template(
            'landing/index.html',
            categories=[],
            default_mode=VocabularyInterface.default_mode(),
            load_error='Error loading categories. Please check the server logs.',
        ), 500

    return render_template(
        'landing/index.html',
        categories=categories,
        default_mode=VocabularyInterface.default_mode(),
        load_error=None,
    )


@landing_bp.route('/health')
def health():
    """Health check endpoint."""
    return {'status': 'healthy', 'app': current_app.config.get('APP_NAME', 'LingoStack')}
