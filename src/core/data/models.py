"""Vocabulary types consumed by the resume parser."""

from dataclasses import dataclass
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class SectionKeywords:
    """Keywords that open a resume section and keywords that close it.

    Both sets are matched as substrings of the lower-cased line.
    """

    headers: Tuple[str, ...]
    terminators: Tuple[str, ...]

    def is_header(self, lowered_line: str) -> bool:
        return any(keyword in lowered_line for keyword in self.headers)

    def is_terminator(self, lowered_line: str) -> bool:
        return any(keyword in lowered_line for keyword in self.terminators)


@dataclass(frozen=True)
class ExtractionVocabulary:
    """Immutable keyword configuration injected into ResumeParser."""

    experience: SectionKeywords
    skills: SectionKeywords
    education: SectionKeywords
    skill_terms: Tuple[str, ...]
    programming_skills: FrozenSet[str]
    degree_keywords: Tuple[str, ...]
