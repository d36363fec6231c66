# File: lingostack_app/modules/vocabulary/modes/base_mode.py
"""
Base Study Mode
===============
Abstract contract for the ways a category can be studied
(word list, flashcards with answers, flashcards without answers).

A *Mode* is responsible for two things:

1. **Describing** itself: id, label, whether the session order is
   shuffled and which session actions it accepts.
2. **Building** a template-ready view payload from the parsed records
   and the current study session state.

Modes are **stateless**: all context is passed via arguments, the
state itself lives in ``StudySessionManager``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, List

from ..config import language_label

if TYPE_CHECKING:
    from ..engine.session_manager import StudySessionManager
    from ..schemas import WordRecord


class BaseStudyMode(ABC):
    """
    Contract for study modes.

    Subclass checklist:
    * Implement ``get_mode_id`` and ``build_view``.
    * Set ``label``, ``shuffles`` and ``actions``.
    * Keep ``build_view`` **pure**: no Flask context, no file access.
    """

    label: str = ''
    shuffles: bool = False
    actions: FrozenSet[str] = frozenset({'swap', 'languages'})

    @abstractmethod
    def get_mode_id(self) -> str:
        """
        Return the unique identifier for this mode, as used in URLs.

        Examples: ``'list'``, ``'flashcard-with-answers'``.
        """
        ...

    @abstractmethod
    def build_view(
        self,
        records: List['WordRecord'],
        session: 'StudySessionManager',
    ) -> Dict[str, Any]:
        """
        Transform the records and session state into a view payload.

        Args:
            records: Parsed category records, in file order.
            session: The study session for this category and mode.

        Returns:
            A JSON-serialisable dict consumed by the templates and the API.
        """
        ...

    def supports(self, action: str) -> bool:
        return action in self.actions

    def _base_view(self, session: 'StudySessionManager') -> Dict[str, Any]:
        return {
            'mode': self.get_mode_id(),
            'mode_label': self.label,
            'category': session.category,
            'prompt_language': session.prompt_language,
            'answer_language': session.answer_language,
            'prompt_label': language_label(session.prompt_language),
            'answer_label': language_label(session.answer_language),
            'available_languages': list(session.available_languages),
            'is_swapped': session.is_swapped,
        }
