# File: lingostack_app/modules/vocabulary/__init__.py
from flask import Blueprint

vocabulary_bp = Blueprint('vocabulary', __name__)
vocabulary_api_bp = Blueprint('vocabulary_api', __name__)

# Importing routes attaches them to the blueprints above
from . import routes  # noqa: E402,F401
