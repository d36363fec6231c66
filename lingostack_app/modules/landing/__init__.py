# File: lingostack_app/modules/landing/__init__.py
from flask import Blueprint

landing_bp = Blueprint('landing', __name__)

from . import routes  # noqa: E402,F401
