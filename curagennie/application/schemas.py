from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from curagennie.domain.models import AnalysisRequest, CamelModel, ConditionCandidate, Doctor


class AICondition(ConditionCandidate):
    @field_validator("probability", mode="before")
    @classmethod
    def round_probability(cls, v):
        if isinstance(v, float):
            return round(v)
        return v

    @field_validator("severity", mode="before")
    @classmethod
    def normalize_severity(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            if v == "medium":
                return "moderate"
        return v


class AIAnalysis(CamelModel):
    """Shape the generative model must return for a symptom analysis."""

    conditions: List[AICondition] = Field(..., min_length=1)
    guidance: List[str] = []
    lifestyle_tips: List[str] = []
    recommended_specialist: Optional[str] = None


class AnalysisResult(CamelModel):
    conditions: List[ConditionCandidate]
    guidance: List[str]
    lifestyle_tips: List[str]
    recommended_specialist: str
    input: AnalysisRequest
    doctors: List[Doctor] = []
    nearby_doctors: List[Doctor] = []


class MedicineQuery(BaseModel):
    query: str = Field(..., min_length=1)


class MedicineImageQuery(CamelModel):
    image_base64: str = Field(..., min_length=1)


class EquivalentMedicine(BaseModel):
    brand: str
    generic_name: str = ""
    approx_price: str = ""


class PharmacyLink(BaseModel):
    label: str
    url: str


class MedicineInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    generic_name: str = ""
    uses: List[str] = []
    warnings: List[str] = []
    side_effects: List[str] = Field([], alias="sideEffects")
    category: str = ""
    general_precautions: List[str] = []
    important_warnings: List[str] = []
    equivalent_medicines: List[EquivalentMedicine] = []
    pharmacy_links: List[PharmacyLink] = []
    disclaimer: str = (
        "This app does not provide dosage or timing. "
        "Always follow your doctor and the medicine label."
    )


class ErrorResponse(BaseModel):
    error: str
    message: str
