# File: lingostack_app/modules/vocabulary/engine/session_manager.py
# Purpose: Study session state for one category and mode, kept in the Flask session cookie.

import random
from typing import List, Optional, Sequence

from flask import current_app, session

from lingostack_app.core.error_handlers import ValidationError
from lingostack_app.core.logging_config import get_logger
from ..logics.word_parser import common_languages
from ..modes import ModeFactory
from .algorithms import build_order, progress_percent, resolve_languages, wrap_position

logger = get_logger('lingostack.session')


def new_seed(rng: Optional[random.Random] = None) -> int:
    """Draw a 32-bit shuffle seed."""
    return (rng or random).getrandbits(32)


class StudySessionManager:
    """
    Manages the transient view state of one study session:
    shuffle order, current position, language direction and
    answer visibility.

    The cookie stores only the shuffle seed and the word count, so its
    size does not grow with the category. The order is rebuilt from the
    seed on every request.

    Only one session is kept per browser; opening another category
    or mode starts a new one.
    """
    SESSION_KEY = 'study_session'

    def __init__(self, category, mode, total, seed=0, position=0,
                 prompt_language='english', answer_language='spanish',
                 answer_visible=False, available_languages=None):
        self.category = category
        self.mode = mode
        self.seed = seed
        self.order = build_order(total, ModeFactory.create(mode).shuffles, random.Random(seed))
        self.position = wrap_position(position, len(self.order))
        self.prompt_language = prompt_language
        self.answer_language = answer_language
        self.answer_visible = answer_visible
        self.available_languages = list(available_languages or ('english', 'spanish'))
        self._records: List = []

    @classmethod
    def from_dict(cls, session_dict):
        return cls(
            category=session_dict['category'],
            mode=session_dict['mode'],
            total=int(session_dict['total']),
            seed=int(session_dict['seed']),
            position=session_dict.get('position', 0),
            prompt_language=session_dict.get('prompt_language', 'english'),
            answer_language=session_dict.get('answer_language', 'spanish'),
            answer_visible=session_dict.get('answer_visible', False),
            available_languages=session_dict.get('available_languages'),
        )

    def to_dict(self):
        return {
            'category': self.category,
            'mode': self.mode,
            'seed': self.seed,
            'total': self.total,
            'position': self.position,
            'prompt_language': self.prompt_language,
            'answer_language': self.answer_language,
            'answer_visible': self.answer_visible,
            'available_languages': self.available_languages,
        }

    # ── lifecycle ────────────────────────────────────────────────────

    @classmethod
    def start_new_session(cls, category, mode, records: Sequence, rng: Optional[random.Random] = None):
        """Start a fresh session for *category* in *mode* and store it."""
        available = common_languages(records)
        prompt, answer = resolve_languages(
            available,
            current_app.config.get('DEFAULT_PROMPT_LANGUAGE', 'english'),
            current_app.config.get('DEFAULT_ANSWER_LANGUAGE', 'spanish'),
        )
        manager = cls(
            category=category,
            mode=mode,
            total=len(records),
            seed=new_seed(rng),
            prompt_language=prompt,
            answer_language=answer,
            available_languages=available,
        )
        manager._records = list(records)
        manager.save()
        logger.info(f"Started study session: category={category!r} mode={mode} words={len(records)}")
        return manager

    @classmethod
    def load_or_start(cls, category, mode, records: Sequence, rng: Optional[random.Random] = None):
        """
        Resume the stored session when it matches *category*, *mode* and the
        current record count; otherwise start a new one.
        """
        stored = session.get(cls.SESSION_KEY)
        if stored:
            try:
                manager = cls.from_dict(stored)
            except (KeyError, TypeError, ValueError):
                logger.warning("Discarding malformed study session state.")
                manager = None
            if (
                manager is not None
                and manager.category == category
                and manager.mode == mode
                and manager.total == len(records)
                and manager.available_languages == common_languages(records)
            ):
                manager._records = list(records)
                return manager
        return cls.start_new_session(category, mode, records, rng)

    @classmethod
    def end_session(cls):
        session.pop(cls.SESSION_KEY, None)

    def save(self):
        session[self.SESSION_KEY] = self.to_dict()
        session.modified = True

    # ── state accessors ──────────────────────────────────────────────

    @property
    def total(self) -> int:
        return len(self.order)

    @property
    def is_swapped(self) -> bool:
        return self.prompt_language == self.available_languages[1] and \
            self.answer_language == self.available_languages[0]

    def current_record(self):
        if not self._records or not self.order:
            return None
        return self._records[self.order[self.position]]

    def progress(self) -> float:
        return progress_percent(self.position, self.total)

    def counter_text(self) -> str:
        return f"Card {self.position + 1} / {self.total}"

    # ── actions ──────────────────────────────────────────────────────

    def apply(self, action: str, prompt_language: Optional[str] = None,
              answer_language: Optional[str] = None, rng: Optional[random.Random] = None):
        """Apply a user interaction and persist the new state."""
        study_mode = ModeFactory.create(self.mode)
        if not study_mode.supports(action):
            raise ValidationError(
                f"Action '{action}' is not available in {study_mode.label} mode.",
                errors={'action': action},
            )

        if action == 'next':
            self.position = wrap_position(self.position + 1, self.total)
            self.answer_visible = False
        elif action == 'previous':
            self.position = wrap_position(self.position - 1, self.total)
            self.answer_visible = False
        elif action == 'reveal':
            if not self.answer_visible:
                self.answer_visible = True
            else:
                self.answer_visible = False
                self.position = wrap_position(self.position + 1, self.total)
        elif action == 'swap':
            self.prompt_language, self.answer_language = self.answer_language, self.prompt_language
            self.answer_visible = False
        elif action == 'languages':
            self._set_languages(prompt_language, answer_language)
            self.answer_visible = False
        elif action in ('shuffle', 'restart'):
            self.seed = new_seed(rng)
            self.order = build_order(self.total, study_mode.shuffles, random.Random(self.seed))
            self.position = 0
            self.answer_visible = False

        self.save()
        return self

    def _set_languages(self, prompt_language, answer_language):
        errors = {}
        if prompt_language not in self.available_languages:
            errors['prompt_language'] = f"Unavailable language: {prompt_language!r}"
        if answer_language not in self.available_languages:
            errors['answer_language'] = f"Unavailable language: {answer_language!r}"
        if not errors and prompt_language == answer_language:
            errors['answer_language'] = 'Prompt and answer languages must differ.'
        if errors:
            raise ValidationError('Invalid language selection', errors=errors)

        self.prompt_language = prompt_language
        self.answer_language = answer_language
