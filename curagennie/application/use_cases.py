import json
import logging
from typing import List, Optional
from urllib.parse import quote

from pydantic import ValidationError

from curagennie.application.errors import (
    AIProviderError,
    MedicineLookupError,
    MedicineLookupUnavailable,
)
from curagennie.application.ports import DoctorDirectoryPort, LLMPort
from curagennie.application.schemas import AIAnalysis, AnalysisResult, MedicineInfo, PharmacyLink
from curagennie.domain.models import AnalysisRequest, Doctor
from curagennie.domain.rules import SymptomAnalysis, analyze_symptoms, resolve_specialist


logger = logging.getLogger(__name__)


SYSTEM_PROMPT = (
    "You are a medical information assistant. Provide helpful health information "
    "while emphasizing safety disclaimers. Never provide dosages or specific treatment plans. "
    "Return a strict JSON object matching the schema provided."
)

MEDICINE_SYSTEM_PROMPT = (
    "You are a pharmaceutical information assistant. Provide medicine information for "
    "awareness only. NEVER provide dosage or specific treatment instructions."
)

IDENTIFY_MEDICINE_INSTRUCTION = (
    "Analyze this medicine package or pill image. Identify the medicine name, brand, "
    "and any visible text. Return ONLY the medicine name."
)

PHARMACY_SEARCH_URL = "https://example-pharmacy.com/search?query={}"

MAX_DOCTORS = 3


def build_analysis_prompt(request: AnalysisRequest) -> str:
    vitals = request.vitals
    lines = [
        "Symptoms: " + ", ".join(request.symptoms),
        "Age: " + str(request.age if request.age is not None else "unknown"),
        "Gender: " + (request.gender or "unknown"),
        "Duration: " + (request.duration or "unknown"),
    ]
    if vitals is not None:
        lines.append(
            f"Vitals: temperature={vitals.temperature or 'n/a'}, pulse={vitals.pulse or 'n/a'}, "
            f"spo2={vitals.spo2 or 'n/a'}, bp={vitals.bp or 'n/a'}"
        )
    else:
        lines.append("Vitals: not provided")

    return (
        "Based on the following details, provide a health analysis.\n\n"
        + "\n".join(lines)
        + "\n\nIMPORTANT SAFETY RULES:\n"
        "- This is for awareness only, NOT a diagnosis\n"
        "- Never provide specific dosages or treatment instructions\n"
        "- Always recommend consulting a doctor\n"
        "- Be cautious and conservative in assessments\n\n"
        "Respond ONLY with a JSON object with keys: conditions (array of objects with "
        "name, probability (integer 0-100), description, severity ('low' | 'moderate' | 'high'), "
        "and optional detailedInfo with prevention, selfCare, whenToSeeDoctor, commonApproaches, "
        "exercises, dietTips, howOthersCanHelp as arrays of strings), guidance (array of strings), "
        "lifestyleTips (array of strings), recommendedSpecialist (string)."
    )


def build_medicine_prompt(name: str) -> str:
    return (
        f'Provide detailed information about the medicine: "{name}"\n\n'
        "CRITICAL SAFETY RULES:\n"
        "- DO NOT provide dosage information\n"
        "- DO NOT provide timing or frequency instructions\n"
        "- Always state this is for awareness only\n"
        "- Emphasize consulting a doctor\n\n"
        "Respond ONLY with a JSON object with keys: name, generic_name, uses (array), "
        "warnings (array), sideEffects (array), category, general_precautions (array), "
        "important_warnings (array), equivalent_medicines (array of objects with brand, "
        "generic_name, approx_price), disclaimer."
    )


def extract_json_object(raw: str) -> str:
    """Trim prose or code fences around the outermost JSON object."""
    raw = (raw or "").strip()
    if not raw.startswith("{"):
        start_idx = raw.find("{")
        if start_idx != -1:
            raw = raw[start_idx:]
    if not raw.endswith("}"):
        end_idx = raw.rfind("}")
        if end_idx != -1:
            raw = raw[:end_idx + 1]
    return raw


def parse_ai_analysis(raw: str) -> AIAnalysis:
    try:
        data = json.loads(extract_json_object(raw))
        return AIAnalysis.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as e:
        raise AIProviderError(f"Invalid analysis JSON: {e}") from e


class RuleBasedStrategy:
    name = "rule-based"

    def analyze(self, request: AnalysisRequest) -> SymptomAnalysis:
        return analyze_symptoms(request)


class AIStrategy:
    name = "ai"

    def __init__(self, llm: LLMPort):
        self.llm = llm

    def analyze(self, request: AnalysisRequest) -> SymptomAnalysis:
        try:
            raw = self.llm.generate(build_analysis_prompt(request), system=SYSTEM_PROMPT)
        except Exception as e:
            raise AIProviderError(str(e)) from e

        analysis = parse_ai_analysis(raw)
        specialist = (analysis.recommended_specialist or "").strip()
        if not specialist:
            specialist = resolve_specialist(analysis.conditions[0].name)

        return SymptomAnalysis(
            conditions=list(analysis.conditions),
            guidance=analysis.guidance,
            lifestyle_tips=analysis.lifestyle_tips,
            recommended_specialist=specialist,
        )


class SymptomAnalysisUseCase:
    def __init__(self, directory: DoctorDirectoryPort, llm: Optional[LLMPort] = None):
        self.directory = directory
        self.llm = llm
        self.rule_based = RuleBasedStrategy()

    def select_strategy(self):
        if self.llm is not None and self.llm.is_configured():
            return AIStrategy(self.llm)
        return self.rule_based

    def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        strategy = self.select_strategy()
        try:
            outcome = strategy.analyze(request)
        except AIProviderError as e:
            logger.warning("AI analysis failed, falling back to rule engine: %s", e)
            outcome = self.rule_based.analyze(request)

        doctors = self.find_doctors(outcome.recommended_specialist)
        return AnalysisResult(
            conditions=outcome.conditions,
            guidance=outcome.guidance,
            lifestyle_tips=outcome.lifestyle_tips,
            recommended_specialist=outcome.recommended_specialist,
            input=request,
            doctors=doctors,
            nearby_doctors=list(doctors),
        )

    def find_doctors(self, specialist: str) -> List[Doctor]:
        try:
            return self._lookup_doctors(specialist)
        except Exception as e:
            logger.warning("Doctor lookup for %r failed: %s", specialist, e)
            return []

    def _lookup_doctors(self, specialist: str) -> List[Doctor]:
        # "Cardiologist / Emergency" is looked up as each of its parts
        found: List[Doctor] = []
        seen = set()
        try:
            for part in specialist.split("/"):
                part = part.strip()
                if not part:
                    continue
                for doctor in self.directory.get_doctors_by_specialty(part):
                    if doctor.id not in seen:
                        seen.add(doctor.id)
                        found.append(doctor)
        except Exception as e:
            logger.warning("Specialty lookup for %r failed, using full directory: %s", specialist, e)
            found = []
        if not found:
            found = self.directory.get_all_doctors()
        return found[:MAX_DOCTORS]


class MedicineInfoUseCase:
    def __init__(self, llm: Optional[LLMPort] = None):
        self.llm = llm

    def _require_llm(self) -> LLMPort:
        if self.llm is None or not self.llm.is_configured():
            raise MedicineLookupUnavailable("Medicine lookup requires a configured AI provider")
        return self.llm

    def lookup(self, query: str) -> MedicineInfo:
        llm = self._require_llm()
        try:
            raw = llm.generate(build_medicine_prompt(query), system=MEDICINE_SYSTEM_PROMPT)
            data = json.loads(extract_json_object(raw))
            info = MedicineInfo.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning("Medicine info JSON invalid for %r: %s", query, e)
            raise MedicineLookupError(f"Invalid medicine information returned: {e}") from e
        except Exception as e:
            raise MedicineLookupError(str(e)) from e

        info.pharmacy_links = [
            PharmacyLink(
                label="View on partner pharmacy",
                url=PHARMACY_SEARCH_URL.format(quote(query, safe="")),
            )
        ]
        return info

    def lookup_image(self, image_base64: str) -> MedicineInfo:
        llm = self._require_llm()
        try:
            name = llm.identify_image(image_base64, IDENTIFY_MEDICINE_INSTRUCTION)
        except Exception as e:
            raise MedicineLookupError(f"Could not identify medicine from image: {e}") from e

        name = (name or "").strip()
        if not name:
            raise MedicineLookupError("Could not identify medicine from image")
        logger.info("Identified medicine from image: %s", name)
        return self.lookup(name)
