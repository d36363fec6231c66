# File: lingostack_app/modules/vocabulary/services/category_service.py
"""Reads category word files from the configured category folder."""

import os
from typing import List, Optional

from flask import current_app
from werkzeug.security import safe_join

from lingostack_app.core.error_handlers import CategoryStorageError
from lingostack_app.core.logging_config import get_logger
from ..config import VocabularyModuleDefaultConfig
from ..logics.word_parser import common_languages, parse_category_text
from ..schemas import CategorySummary, WordRecord

SUFFIX = VocabularyModuleDefaultConfig.CATEGORY_FILE_SUFFIX

logger = get_logger('lingostack.vocabulary')


class CategoryService:
    """
    File-backed access to vocabulary categories.

    A category is a ``<name>.txt`` file inside ``CATEGORY_FOLDER``.
    """

    @staticmethod
    def _folder(folder: Optional[str] = None) -> str:
        return folder or current_app.config['CATEGORY_FOLDER']

    @staticmethod
    def category_path(category: str, folder: Optional[str] = None) -> Optional[str]:
        """Absolute path of the category file, or None if the name escapes the folder."""
        if not category or '/' in category or '\\' in category:
            return None
        return safe_join(CategoryService._folder(folder), f'{category}{SUFFIX}')

    @staticmethod
    def list_categories(folder: Optional[str] = None) -> List[str]:
        """Return category names (file names without extension), sorted alphabetically."""
        directory = CategoryService._folder(folder)
        try:
            entries = os.listdir(directory)
        except OSError as exc:
            logger.error(f"Error reading category directory {directory}: {exc}")
            raise CategoryStorageError(folder=directory) from exc

        names = [
            entry[:-len(SUFFIX)]
            for entry in entries
            if entry.endswith(SUFFIX) and os.path.isfile(os.path.join(directory, entry))
        ]
        return sorted(names)

    @staticmethod
    def get_category_words(category: str, folder: Optional[str] = None) -> Optional[List[WordRecord]]:
        """
        Load and parse one category.

        Returns None when the file is missing, empty or has no valid line.
        Invalid lines are skipped with a warning.
        """
        file_name = f'{category}{SUFFIX}'
        path = CategoryService.category_path(category, folder)
        if path is None:
            logger.warning(f"Rejected category name: {category!r}")
            return None

        encoding = current_app.config.get('CATEGORY_FILE_ENCODING', 'utf-8')
        try:
            with open(path, 'r', encoding=encoding) as handle:
                content = handle.read()
        except FileNotFoundError:
            logger.warning(f"Category file not found: {path}")
            return None
        except (OSError, UnicodeDecodeError) as exc:
            logger.error(f"Error reading category file {file_name}: {exc}")
            return None

        result = parse_category_text(content)
        if result.is_empty:
            logger.warning(f"Category file {file_name} is empty.")
            return None

        for line_number, line in result.invalid_lines:
            logger.warning(
                f'Invalid line format (expected at least 2 parts) in {file_name} '
                f'line {line_number}: "{line}"'
            )

        return result.records or None

    @staticmethod
    def get_category_summaries(folder: Optional[str] = None) -> List[CategorySummary]:
        """Every listed category with its word count and shared languages."""
        summaries = []
        for name in CategoryService.list_categories(folder):
            words = CategoryService.get_category_words(name, folder)
            if words is None:
                summaries.append(CategorySummary(name=name, word_count=0, is_valid=False))
                continue
            summaries.append(CategorySummary(
                name=name,
                word_count=len(words),
                languages=common_languages(words),
            ))
        return summaries
