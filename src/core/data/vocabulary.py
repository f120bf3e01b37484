"""Default section keywords and skill vocabulary."""

from .models import ExtractionVocabulary, SectionKeywords

EXPERIENCE_SECTION = SectionKeywords(
    headers=("experience", "work history", "employment", "professional experience"),
    terminators=("education", "skills", "projects"),
)

SKILLS_SECTION = SectionKeywords(
    headers=("skills", "technical skills", "core competencies", "technologies"),
    terminators=("experience", "education", "projects"),
)

EDUCATION_SECTION = SectionKeywords(
    headers=("education", "academic background", "qualifications"),
    terminators=("experience", "skills", "projects"),
)

# Order matters: entries are emitted in this order for each matching line.
COMMON_SKILLS = (
    "javascript", "python", "java", "react", "node.js", "sql", "html", "css",
    "project management", "leadership", "communication", "teamwork", "problem solving",
)

PROGRAMMING_SKILLS = frozenset({"javascript", "python"})

DEGREE_KEYWORDS = ("bachelor", "master", "phd", "degree", "diploma", "certificate")

DEFAULT_VOCABULARY = ExtractionVocabulary(
    experience=EXPERIENCE_SECTION,
    skills=SKILLS_SECTION,
    education=EDUCATION_SECTION,
    skill_terms=COMMON_SKILLS,
    programming_skills=PROGRAMMING_SKILLS,
    degree_keywords=DEGREE_KEYWORDS,
)
