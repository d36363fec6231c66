# File: lingostack_app/config.py
# Purpose: Application configuration loaded from the environment.

import os

from dotenv import load_dotenv

load_dotenv()

# config.py lives in <project>/lingostack_app/, so the project root is one level up.
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Category word files (<name>.txt) live here unless CATEGORY_FOLDER is set.
DEFAULT_CATEGORY_FOLDER = os.path.join(BASE_DIR, 'data', 'categories')


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """
    Configuration class for the Flask application.
    """
    APP_NAME = 'LingoStack'

    # Signs the session cookie that carries the study state.
    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, though env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    CATEGORY_FOLDER = os.environ.get('CATEGORY_FOLDER') or DEFAULT_CATEGORY_FOLDER
    CATEGORY_FILE_ENCODING = 'utf-8'

    DEFAULT_PROMPT_LANGUAGE = os.environ.get('DEFAULT_PROMPT_LANGUAGE', 'english')
    DEFAULT_ANSWER_LANGUAGE = os.environ.get('DEFAULT_ANSWER_LANGUAGE', 'spanish')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')
    LOG_JSON = _env_flag('LOG_JSON')
    LOG_TO_FILE = _env_flag('LOG_TO_FILE', default=True)

    @classmethod
    def init_app(cls, app):
        """Create the folders the application expects to exist."""
        if app.config.get('LOG_TO_FILE'):
            os.makedirs(app.config['LOG_DIR'], exist_ok=True)
