# File: lingostack_app/modules/vocabulary/modes/factory.py
"""
Mode Factory
============
Creates ``BaseStudyMode`` instances by mode id.

To add a mode:
1. Create ``your_mode.py`` with a class extending ``BaseStudyMode``.
2. Import and add it to ``_BUILTIN_MODES`` below.
"""

from __future__ import annotations

from typing import Dict, List, Type

from .base_mode import BaseStudyMode


class ModeFactory:
    """
    Factory for study modes.

    Supports both built-in auto-registration and runtime registration
    via ``register()``. Registration order is the display order.
    """

    _modes: Dict[str, Type[BaseStudyMode]] = {}
    _initialised: bool = False

    @classmethod
    def _ensure_builtins(cls) -> None:
        """Lazy-load built-in modes on first access."""
        if cls._initialised:
            return

        from .list_mode import ListMode
        from .flashcard_mode import FlashcardWithAnswersMode, FlashcardWithoutAnswersMode

        _BUILTIN_MODES = [
            ListMode,
            FlashcardWithAnswersMode,
            FlashcardWithoutAnswersMode,
        ]

        for mode_class in _BUILTIN_MODES:
            instance = mode_class()
            cls._modes[instance.get_mode_id()] = mode_class

        cls._initialised = True

    # ── public API ───────────────────────────────────────────────────

    @classmethod
    def register(cls, mode_class: Type[BaseStudyMode]) -> None:
        """Register a custom mode at runtime."""
        cls._ensure_builtins()
        instance = mode_class()
        cls._modes[instance.get_mode_id()] = mode_class

    @classmethod
    def create(cls, mode_name: str) -> BaseStudyMode:
        """
        Instantiate a mode by id.

        Raises:
            KeyError: If no mode is registered under *mode_name*.
        """
        cls._ensure_builtins()

        mode_class = cls._modes.get(mode_name)
        if mode_class is None:
            raise KeyError(
                f"Unknown study mode: {mode_name!r}. "
                f"Available: {list(cls._modes.keys())}"
            )
        return mode_class()

    @classmethod
    def available_modes(cls) -> List[str]:
        """Return registered mode ids."""
        cls._ensure_builtins()
        return list(cls._modes.keys())

    @classmethod
    def navigation(cls) -> List[Dict[str, str]]:
        """Id/label pairs for the mode switcher."""
        cls._ensure_builtins()
        return [{'id': mode_id, 'label': mode_class.label} for mode_id, mode_class in cls._modes.items()]
