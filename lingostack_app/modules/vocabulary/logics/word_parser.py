# File: lingostack_app/modules/vocabulary/logics/word_parser.py
"""
Stateless parsing of category word files.
Does NOT import Flask or touch the filesystem.

File format, one word per line::

    english,spanish
    english,spanish,dutch

Blank lines are ignored. Lines lacking a non-empty english or spanish
field are reported as invalid and skipped.
"""

import re
from typing import Optional

from ..config import VocabularyModuleDefaultConfig
from ..schemas import ParseResult, WordRecord

LANGUAGES = VocabularyModuleDefaultConfig.LANGUAGES
REQUIRED_LANGUAGES = VocabularyModuleDefaultConfig.REQUIRED_LANGUAGES
OPTIONAL_LANGUAGES = tuple(lang for lang in LANGUAGES if lang not in REQUIRED_LANGUAGES)

_LINE_BREAK_RE = re.compile(r'\r?\n')


def parse_line(line: str) -> Optional[WordRecord]:
    """Parse a single line into a WordRecord, or None when it is invalid."""
    parts = [part.strip() for part in line.split(VocabularyModuleDefaultConfig.FIELD_DELIMITER)]
    english = parts[0] if len(parts) > 0 else ''
    spanish = parts[1] if len(parts) > 1 else ''
    dutch = parts[2] if len(parts) > 2 else ''

    if not english or not spanish:
        return None
    return WordRecord(english=english, spanish=spanish, dutch=dutch or None)


def parse_category_text(text: str) -> ParseResult:
    """
    Parse the full contents of a category file.

    Records keep file order; invalid lines are collected with their
    1-based line number so the caller can report them.
    """
    result = ParseResult()
    non_blank = 0

    for line_number, line in enumerate(_LINE_BREAK_RE.split(text), start=1):
        if not line.strip():
            continue
        non_blank += 1
        record = parse_line(line)
        if record is None:
            result.invalid_lines.append((line_number, line))
        else:
            result.records.append(record)

    result.is_empty = non_blank == 0
    return result


def common_languages(records) -> list:
    """Languages present in every record, in canonical order."""
    if not records:
        return []
    return [lang for lang in LANGUAGES if all(record.has(lang) for record in records)]
