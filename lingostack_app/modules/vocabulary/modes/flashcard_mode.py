# File: lingostack_app/modules/vocabulary/modes/flashcard_mode.py
"""
Flashcard Modes
===============
Shuffled, one card at a time.

* ``flashcard-with-answers``: prompt and answer are both on the card;
  clicking the card moves on.
* ``flashcard-without-answers``: the answer stays hidden until the first
  click; the second click hides it again and moves on.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .base_mode import BaseStudyMode

_NAVIGATION = frozenset({'next', 'previous', 'swap', 'languages', 'shuffle', 'restart'})


class FlashcardWithAnswersMode(BaseStudyMode):
    label = 'Flashcards (Answers)'
    shuffles = True
    actions = _NAVIGATION
    card_action = 'next'

    def get_mode_id(self) -> str:
        return 'flashcard-with-answers'

    def _card_view(self, session) -> Dict[str, Any]:
        view = self._base_view(session)
        record = session.current_record()
        view.update({
            'prompt': record.get(session.prompt_language),
            'answer': record.get(session.answer_language),
            'answer_visible': True,
            'position': session.position,
            'total': session.total,
            'progress': session.progress(),
            'counter': session.counter_text(),
            'direction_label': f"Show: {view['prompt_label']} → {view['answer_label']}",
            'card_action': self.card_action,
            'hint': None,
        })
        return view

    def build_view(self, records: List, session) -> Dict[str, Any]:
        return self._card_view(session)


class FlashcardWithoutAnswersMode(FlashcardWithAnswersMode):
    label = 'Flashcards (Test)'
    actions = _NAVIGATION | {'reveal'}
    card_action = 'reveal'

    def get_mode_id(self) -> str:
        return 'flashcard-without-answers'

    def build_view(self, records: List, session) -> Dict[str, Any]:
        view = self._card_view(session)
        view['answer_visible'] = session.answer_visible
        if not session.answer_visible:
            view['answer'] = None
        view['hint'] = (
            'Click card for next word' if session.answer_visible else 'Click card to reveal answer'
        )
        return view
