from dataclasses import dataclass, field

from typing import Optional, List, Tuple, Dict, Any


@dataclass(frozen=True)
class WordRecord:
    """One vocabulary entry: the same word in each available language."""
    english: str
    spanish: str
    dutch: Optional[str] = None

    def get(self, language: str) -> Optional[str]:
        """Return the text for *language*, or None when the record lacks it."""
        value = getattr(self, language, None) if language in ('english', 'spanish', 'dutch') else None
        return value or None

    def has(self, language: str) -> bool:
        return self.get(language) is not None

    @property
    def languages(self) -> Tuple[str, ...]:
        return tuple(lang for lang in ('english', 'spanish', 'dutch') if self.has(lang))

    def to_dict(self) -> Dict[str, str]:
        data = {'english': self.english, 'spanish': self.spanish}
        if self.dutch:
            data['dutch'] = self.dutch
        return data


@dataclass
class ParseResult:
    """Outcome of parsing one category file."""
    records: List[WordRecord] = field(default_factory=list)
    invalid_lines: List[Tuple[int, str]] = field(default_factory=list)
    is_empty: bool = False


@dataclass
class CategorySummary:
    """A category as listed on the landing page and the JSON API."""
    name: str
    word_count: int
    languages: List[str] = field(default_factory=list)
    is_valid: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'word_count': self.word_count,
            'languages': list(self.languages),
            'is_valid': self.is_valid,
        }
