# File: lingostack_app/modules/vocabulary/services/study_service.py
"""Resolves a (mode, category) request into records plus session state."""

import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from lingostack_app.core.error_handlers import NotFoundError
from ..engine.session_manager import StudySessionManager
from ..modes import BaseStudyMode, ModeFactory
from ..schemas import WordRecord
from .category_service import CategoryService


@dataclass
class StudyContext:
    """Everything a study page needs for one request."""
    category: str
    mode: BaseStudyMode
    records: List[WordRecord]
    session: StudySessionManager

    def build_view(self) -> Dict[str, Any]:
        return self.mode.build_view(self.records, self.session)


class StudyService:

    @staticmethod
    def open(category: str, mode_id: str, rng: Optional[random.Random] = None) -> StudyContext:
        """
        Load *category* and attach the study session for *mode_id*.

        Raises:
            NotFoundError: unknown mode, or a category without valid words.
        """
        try:
            study_mode = ModeFactory.create(mode_id)
        except KeyError:
            raise NotFoundError(f"Unknown learning type: {mode_id}", resource=mode_id) from None

        records = CategoryService.get_category_words(category)
        if records is None:
            raise NotFoundError(f"Category '{category}' not found or has no valid words", resource=category)

        manager = StudySessionManager.load_or_start(category, mode_id, records, rng)
        return StudyContext(category=category, mode=study_mode, records=records, session=manager)

    @staticmethod
    def apply_action(context: StudyContext, action: str,
                     prompt_language: Optional[str] = None,
                     answer_language: Optional[str] = None,
                     rng: Optional[random.Random] = None) -> Dict[str, Any]:
        """Apply *action* to the context's session and return the new view."""
        context.session.apply(
            action,
            prompt_language=prompt_language,
            answer_language=answer_language,
            rng=rng,
        )
        return context.build_view()
