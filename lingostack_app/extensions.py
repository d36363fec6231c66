"""Application-wide extensions.

This module centralizes extension instances so they can be imported without
causing circular dependencies between blueprints and the application factory.
"""

from flask_wtf import CSRFProtect

csrf_protect = CSRFProtect()

__all__ = ["csrf_protect"]
