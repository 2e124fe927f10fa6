from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes the camelCase keys used on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Severity(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class Vitals(CamelModel):
    temperature: Optional[str] = None
    pulse: Optional[str] = None
    spo2: Optional[str] = None
    bp: Optional[str] = None

    @field_validator("temperature", "pulse", "spo2", "bp", mode="before")
    @classmethod
    def coerce_reading(cls, v):
        # Forms send readings as strings, API clients sometimes as numbers
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class AnalysisRequest(CamelModel):
    symptoms: List[str] = Field(..., min_length=1)
    age: Optional[int] = Field(None, gt=0)
    gender: Optional[str] = None
    duration: Optional[str] = None
    vitals: Optional[Vitals] = None

    @field_validator("symptoms")
    @classmethod
    def validate_symptoms(cls, v: List[str]):
        if not any(s.strip() for s in v):
            raise ValueError("At least one symptom is required")
        return v


class DetailedInfo(CamelModel):
    prevention: List[str] = []
    self_care: List[str] = []
    when_to_see_doctor: List[str] = []
    common_approaches: List[str] = []
    exercises: List[str] = []
    diet_tips: List[str] = []
    how_others_can_help: List[str] = []


class ConditionCandidate(CamelModel):
    name: str
    probability: int = Field(..., ge=0, le=100)
    description: str = ""
    severity: Severity
    detailed_info: DetailedInfo = Field(default_factory=DetailedInfo)


class Doctor(CamelModel):
    id: Union[int, str]
    name: str
    specialty: str
    rating: float = 4.5
    location: str
    distance: Optional[str] = None
    image: str = ""
    availability: str


class HealthArticle(CamelModel):
    id: int
    title: str
    category: str
    read_time: str
    image: str
    excerpt: str
    content: str
    author: str = "Cura Gennie Health Team"
    published_date: str
