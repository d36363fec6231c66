# File: lingostack_app/modules/vocabulary/modes/__init__.py
"""
Study Modes Package
===================
Contains the Mode abstraction and the concrete modes (list,
flashcards with answers, flashcards without answers).
"""

from .base_mode import BaseStudyMode
from .factory import ModeFactory

__all__ = ['BaseStudyMode', 'ModeFactory']
