import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .clusters import (
    BASELINE_GUIDANCE,
    CLUSTERS,
    FALLBACK_LIFESTYLE_TIP,
    NON_SPECIFIC_CONDITION,
    OTHER_CAUSES_CONDITION,
    SPO2_ESCALATION_THRESHOLD,
    Cluster,
)
from .models import AnalysisRequest, ConditionCandidate, Vitals


MAX_RANKED_CONDITIONS = 3

DEFAULT_SPECIALIST = "General Physician"

# Checked in order against the lower-cased condition name; first hit wins.
SPECIALIST_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("respiratory",), "General Physician / Pulmonologist"),
    (("cardiac", "chest", "emergency"), "Cardiologist / Emergency"),
    (("gastro", "digestive", "stomach"), "Gastroenterologist"),
    (("headache", "migraine", "neuro"), "Neurologist"),
    (("musculoskeletal", "joint", "muscle"), "Orthopedic Specialist"),
    (("allergic", "skin", "dermat"), "Dermatologist / Allergist"),
    (("urinary", "kidney"), "Urologist"),
    (("genital", "sexual"), "Gynecologist / Urologist / Sexual Health Specialist"),
    (("stress", "anxiety", "mental"), "Psychiatrist / Psychologist"),
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SymptomMatcher:
    """Substring matcher over the lower-cased symptom list.

    No stemming, no whole-word matching: ``"pain"`` matches ``"abdominal pain"``.
    """

    def __init__(self, symptoms: Iterable[str]):
        self.symptoms = [s.lower() for s in symptoms]

    def has_any(self, triggers: Iterable[str]) -> bool:
        triggers = list(triggers)
        return any(t in s for s in self.symptoms for t in triggers)


def parse_spo2(vitals: Optional[Vitals]) -> Optional[int]:
    """Read the leading integer of the SpO2 reading, or None when there is none."""
    if vitals is None or vitals.spo2 is None:
        return None
    m = _LEADING_INT.match(vitals.spo2)
    if not m:
        return None
    return int(m.group(1))


def matched_clusters(matcher: SymptomMatcher, clusters: Sequence[Cluster] = CLUSTERS) -> List[Cluster]:
    return [c for c in clusters if matcher.has_any(c.keywords)]


def build_candidates(clusters: Sequence[Cluster], vitals: Optional[Vitals] = None) -> List[ConditionCandidate]:
    spo2 = parse_spo2(vitals)
    candidates: List[ConditionCandidate] = []
    for cluster in clusters:
        candidate = cluster.condition.model_copy(deep=True)
        if (
            cluster.escalated_probability is not None
            and spo2 is not None
            and spo2 < SPO2_ESCALATION_THRESHOLD
        ):
            candidate.probability = cluster.escalated_probability
        candidates.append(candidate)

    if not candidates:
        candidates.append(NON_SPECIFIC_CONDITION.model_copy(deep=True))
    return candidates


def rank_candidates(candidates: Sequence[ConditionCandidate], limit: int = MAX_RANKED_CONDITIONS) -> List[ConditionCandidate]:
    """Merge by name keeping the most probable, sort descending and truncate.

    Sorting is stable, so equal probabilities keep the cluster check order.
    """
    merged: Dict[str, ConditionCandidate] = {}
    for candidate in candidates:
        current = merged.get(candidate.name)
        if current is None or candidate.probability > current.probability:
            merged[candidate.name] = candidate
    ranked = sorted(merged.values(), key=lambda c: c.probability, reverse=True)
    return ranked[:limit]


def append_other_causes(conditions: List[ConditionCandidate]) -> List[ConditionCandidate]:
    if any(c.name == OTHER_CAUSES_CONDITION.name for c in conditions):
        return list(conditions)
    return list(conditions) + [OTHER_CAUSES_CONDITION.model_copy(deep=True)]


def aggregate_guidance(clusters: Sequence[Cluster]) -> Tuple[List[str], List[str]]:
    guidance = list(BASELINE_GUIDANCE)
    lifestyle_tips: List[str] = []
    for cluster in clusters:
        guidance.extend(cluster.guidance)
        lifestyle_tips.extend(cluster.lifestyle_tips)
    if not lifestyle_tips:
        lifestyle_tips.append(FALLBACK_LIFESTYLE_TIP)
    return guidance, lifestyle_tips


def resolve_specialist(condition_name: Optional[str]) -> str:
    name = (condition_name or "").lower()
    for needles, specialist in SPECIALIST_RULES:
        if any(n in name for n in needles):
            return specialist
    return DEFAULT_SPECIALIST


@dataclass
class SymptomAnalysis:
    conditions: List[ConditionCandidate]
    guidance: List[str]
    lifestyle_tips: List[str]
    recommended_specialist: str


def analyze_symptoms(request: AnalysisRequest) -> SymptomAnalysis:
    matcher = SymptomMatcher(request.symptoms)
    clusters = matched_clusters(matcher)

    ranked = rank_candidates(build_candidates(clusters, request.vitals))
    # Specialist follows the top real condition, before the catch-all is added
    specialist = resolve_specialist(ranked[0].name)
    guidance, lifestyle_tips = aggregate_guidance(clusters)

    return SymptomAnalysis(
        conditions=append_other_causes(ranked),
        guidance=guidance,
        lifestyle_tips=lifestyle_tips,
        recommended_specialist=specialist,
    )
