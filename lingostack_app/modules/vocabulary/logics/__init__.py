from .word_parser import common_languages, parse_category_text, parse_line

__all__ = ['common_languages', 'parse_category_text', 'parse_line']
