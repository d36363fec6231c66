# File: lingostack_app/modules/vocabulary/config.py

class VocabularyModuleDefaultConfig:
    FIELD_DELIMITER = ','
    CATEGORY_FILE_SUFFIX = '.txt'

    LANGUAGES = ('english', 'spanish', 'dutch')
    REQUIRED_LANGUAGES = ('english', 'spanish')
    LANGUAGE_LABELS = {
        'english': 'English',
        'spanish': 'Spanish',
        'dutch': 'Dutch',
    }

    MODE_LIST = 'list'
    MODE_FLASHCARD_WITH_ANSWERS = 'flashcard-with-answers'
    MODE_FLASHCARD_WITHOUT_ANSWERS = 'flashcard-without-answers'
    DEFAULT_MODE = MODE_LIST


def language_label(language):
    """Human readable name for a language key."""
    return VocabularyModuleDefaultConfig.LANGUAGE_LABELS.get(language, str(language).title())
