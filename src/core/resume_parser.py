import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from .data import DEFAULT_VOCABULARY, ExtractionVocabulary
from .data_models import (
    EducationEntry,
    ExperienceEntry,
    ExtractedData,
    PersonalInfo,
    SkillEntry,
)
from .document_reader import DocumentReader
from .section_scanner import scan_section

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b')
PHONE_PATTERN = re.compile(r'(\+?1[-.\s]?)?\(?([0-9]{3})\)?[-.\s]?([0-9]{3})[-.\s]?([0-9]{4})')
LINKEDIN_PATTERN = re.compile(r'linkedin\.com/in/([a-zA-Z0-9-]+)', re.IGNORECASE)
YEAR_PATTERN = re.compile(r'\b(?:19|20)[0-9]{2}\b')

# Characters kept in a matched phone number
PHONE_NOISE = re.compile(r'[^0-9+()\-.\s]')
NAME_NOISE = re.compile(r'[^\w\s]')
FIRST_DIGIT = re.compile(r'[0-9]')


def split_lines(text: str) -> List[str]:
    """Split text into stripped, non-empty lines"""
    return [line.strip() for line in text.split('\n') if line.strip()]


@dataclass
class _PendingExperience:
    """Experience entry under construction, finalized when the next one starts or the scan ends."""
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: Optional[str] = None
    description: str = ""
    achievements: List[str] = field(default_factory=list)

    def finalize(self) -> ExperienceEntry:
        return ExperienceEntry(
            company=self.company,
            position=self.position,
            start_date=self.start_date,
            end_date=self.end_date,
            description=self.description,
            achievements=tuple(self.achievements),
        )


class ResumeParser:
    """Heuristic resume parser working on plain text lines.

    Personal info is matched against the whole text. Experience, skills and
    education each scan the line sequence for their own section and apply a
    field-specific pattern to the lines inside it. Extraction never fails:
    anything that does not match degrades to empty values.
    """

    def __init__(self,
                 vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY,
                 document_reader: Optional[DocumentReader] = None):
        self.vocabulary = vocabulary
        self._document_reader = document_reader

    @property
    def document_reader(self) -> DocumentReader:
        if self._document_reader is None:
            self._document_reader = DocumentReader()
        return self._document_reader

    def parse_document(self, buffer: bytes, media_type: str) -> ExtractedData:
        """Decode a document buffer and extract structured resume data"""
        text = self.document_reader.extract_text(buffer, media_type)
        return self.extract_data_from_text(text)

    def parse_resume_file(self, file_path: str) -> ExtractedData:
        """Read a resume from disk and extract structured resume data"""
        text = self.document_reader.read_document(file_path)
        return self.extract_data_from_text(text)

    def extract_data_from_text(self, text: str) -> ExtractedData:
        """Run all field extractors over the text"""
        lines = split_lines(text)

        data = ExtractedData(
            personal_info=self.extract_personal_info(lines, text),
            experience=self.extract_experience(lines, text),
            skills=self.extract_skills(lines, text),
            education=self.extract_education(lines, text),
        )
        logger.debug(
            f"Extracted {len(data.experience)} experience, {len(data.skills)} skill "
            f"and {len(data.education)} education entries from {len(lines)} lines"
        )
        return data

    def extract_personal_info(self, lines: List[str], full_text: str) -> PersonalInfo:
        """Extract name, email, phone and LinkedIn profile"""
        email = self._first_match(EMAIL_PATTERN, full_text)
        phone = self._first_match(PHONE_PATTERN, full_text)
        linkedin = self._first_match(LINKEDIN_PATTERN, full_text)

        # The name is assumed to be the first line of the document
        name = lines[0] if lines else ""

        return PersonalInfo(
            name=NAME_NOISE.sub('', name).strip(),
            email=email,
            phone=PHONE_NOISE.sub('', phone),
            linkedin=linkedin,
        )

    @staticmethod
    def _first_match(pattern: re.Pattern, text: str) -> str:
        match = pattern.search(text)
        return match.group(0) if match else ""

    def extract_experience(self, lines: List[str], full_text: str) -> List[ExperienceEntry]:
        """Extract work history entries from lines carrying year tokens"""
        experiences = []
        current = None

        for line in scan_section(lines, self.vocabulary.experience):
            dates = YEAR_PATTERN.findall(line)
            if not dates:
                continue

            if current is not None:
                experiences.append(current.finalize())

            current = _PendingExperience(
                company=FIRST_DIGIT.split(line, maxsplit=1)[0].strip(),
                start_date=dates[0],
                end_date=dates[1] if len(dates) > 1 else None,
            )

        if current is not None:
            experiences.append(current.finalize())

        return experiences

    def extract_skills(self, lines: List[str], full_text: str) -> List[SkillEntry]:
        """Extract vocabulary skills mentioned inside the skills section"""
        skills = []

        for line in scan_section(lines, self.vocabulary.skills):
            lowered = line.lower()
            for term in self.vocabulary.skill_terms:
                if term in lowered:
                    skills.append(SkillEntry(
                        name=term,
                        level="intermediate",
                        category="Programming" if term in self.vocabulary.programming_skills else "General",
                    ))

        return skills

    def extract_education(self, lines: List[str], full_text: str) -> List[EducationEntry]:
        """Extract one education entry per line carrying a degree keyword"""
        education = []

        for line in scan_section(lines, self.vocabulary.education):
            lowered = line.lower()
            if not any(keyword in lowered for keyword in self.vocabulary.degree_keywords):
                continue

            dates = YEAR_PATTERN.findall(line)
            education.append(EducationEntry(
                degree=line,
                start_date=dates[0] if dates else "",
                end_date=dates[1] if len(dates) > 1 else (dates[0] if dates else ""),
            ))

        return education
