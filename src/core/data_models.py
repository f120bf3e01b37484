from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple
import uuid


def _new_id() -> str:
    return str(uuid.uuid4())


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> dict:
        """Convert to the JSON structure shared with the storage and AI services"""
        return self.model_dump(by_alias=True, mode="json")


class PersonalInfo(_Record):
    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    linkedin: str = ""
    website: str = ""


class ExperienceEntry(_Record):
    id: str = Field(default_factory=_new_id)
    company: str = ""
    position: str = ""
    start_date: str = Field("", alias="startDate")
    end_date: Optional[str] = Field(None, alias="endDate")
    description: str = ""
    achievements: Tuple[str, ...] = Field(default_factory=tuple)


class SkillEntry(_Record):
    name: str
    level: str = "intermediate"
    category: str = "General"


class EducationEntry(_Record):
    id: str = Field(default_factory=_new_id)
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = Field("", alias="startDate")
    end_date: str = Field("", alias="endDate")
    gpa: Optional[float] = None


class ExtractedData(_Record):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: Tuple[ExperienceEntry, ...] = Field(default_factory=tuple)
    skills: Tuple[SkillEntry, ...] = Field(default_factory=tuple)
    education: Tuple[EducationEntry, ...] = Field(default_factory=tuple)
