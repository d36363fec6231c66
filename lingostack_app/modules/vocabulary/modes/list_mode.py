# File: lingostack_app/modules/vocabulary/modes/list_mode.py
"""
List Mode
=========
Every word of the category in file order, shown as two columns.
Swapping languages swaps the columns.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .base_mode import BaseStudyMode


class ListMode(BaseStudyMode):
    label = 'List'
    shuffles = False

    def get_mode_id(self) -> str:
        return 'list'

    def build_view(self, records: List, session) -> Dict[str, Any]:
        view = self._base_view(session)
        view['rows'] = [
            {
                'prompt': record.get(session.prompt_language),
                'answer': record.get(session.answer_language),
            }
            for record in records
        ]
        view['swap_label'] = f"Swap Columns ({view['prompt_label']} / {view['answer_label']})"
        view['empty_message'] = 'No words found for this category.'
        return view
