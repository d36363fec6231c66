# File: lingostack_app/modules/vocabulary/engine/__init__.py
from .session_manager import StudySessionManager

__all__ = ['StudySessionManager']
