# File: lingostack_app/modules/vocabulary/routes/__init__.py
# Attaches the HTML and JSON routes to the vocabulary blueprints.

from . import api, views  # noqa: F401
