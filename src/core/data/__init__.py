"""Data package for resume parser."""

from .models import ExtractionVocabulary, SectionKeywords
from .vocabulary import (
    COMMON_SKILLS,
    DEFAULT_VOCABULARY,
    DEGREE_KEYWORDS,
    EDUCATION_SECTION,
    EXPERIENCE_SECTION,
    PROGRAMMING_SKILLS,
    SKILLS_SECTION,
)

__all__ = [
    'ExtractionVocabulary',
    'SectionKeywords',
    'COMMON_SKILLS',
    'DEFAULT_VOCABULARY',
    'DEGREE_KEYWORDS',
    'EDUCATION_SECTION',
    'EXPERIENCE_SECTION',
    'PROGRAMMING_SKILLS',
    'SKILLS_SECTION',
]
