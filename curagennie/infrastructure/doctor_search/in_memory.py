from typing import Iterable, List, Optional, Union

from curagennie.application.ports import DoctorDirectoryPort
from curagennie.domain.models import Doctor


def _avatar(photo_id: str) -> str:
    return f"https://images.unsplash.com/{photo_id}?q=80&w=200&auto=format&fit=crop"


SEED_DOCTORS = [
    Doctor(id=1, name="Dr. Sarah Chen", specialty="General Physician", rating=4.9,
           location="HealthFirst Clinic, Downtown", distance="1.2 km",
           image=_avatar("photo-1559839734-2b71ea197ec2"), availability="Available Today"),
    Doctor(id=2, name="Dr. James Wilson", specialty="Cardiologist", rating=4.8,
           location="City Heart Center", distance="3.5 km",
           image=_avatar("photo-1612349317150-e413f6a5b16d"), availability="Next Available: Tomorrow"),
    Doctor(id=3, name="Dr. Emily Brooks", specialty="General Physician", rating=4.7,
           location="Community Care Hospital", distance="2.0 km",
           image=_avatar("photo-1594824476967-48c8b964273f"), availability="Available Today"),
    Doctor(id=4, name="Dr. Arjun Mehta", specialty="Pulmonologist", rating=4.6,
           location="BreatheWell Chest Clinic", distance="4.1 km",
           image=_avatar("photo-1622253692010-333f2da6031d"), availability="Available Today"),
    Doctor(id=5, name="Dr. Laura Martinez", specialty="Gastroenterologist", rating=4.7,
           location="Digestive Health Institute", distance="5.3 km",
           image=_avatar("photo-1651008376811-b90baee60c1f"), availability="Next Available: Monday"),
    Doctor(id=6, name="Dr. Daniel Kim", specialty="Neurologist", rating=4.8,
           location="NeuroCare Center", distance="6.0 km",
           image=_avatar("photo-1537368910025-700350fe46c7"), availability="Next Available: Tomorrow"),
    Doctor(id=7, name="Dr. Priya Nair", specialty="Dermatologist", rating=4.6,
           location="ClearSkin Clinic", distance="2.8 km",
           image=_avatar("photo-1614608682850-e0d6ed316d47"), availability="Available Today"),
    Doctor(id=8, name="Dr. Michael Adeyemi", specialty="Orthopedic Specialist", rating=4.5,
           location="Motion Bone & Joint Hospital", distance="7.4 km",
           image=_avatar("photo-1582750433449-648ed127bb54"), availability="Next Available: Wednesday"),
    Doctor(id=9, name="Dr. Hannah Weber", specialty="Urologist", rating=4.5,
           location="City Urology Clinic", distance="3.9 km",
           image=_avatar("photo-1527613426441-4da17471b66d"), availability="Available Today"),
    Doctor(id=10, name="Dr. Grace Okafor", specialty="Gynecologist", rating=4.9,
           location="Women's Wellness Center", distance="2.2 km",
           image=_avatar("photo-1584467735871-8e85353a8413"), availability="Next Available: Tomorrow"),
    Doctor(id=11, name="Dr. Rohan Iyer", specialty="Psychiatrist", rating=4.7,
           location="MindSpace Clinic", distance="4.6 km",
           image=_avatar("photo-1612531386530-97286d97c2d2"), availability="Available Today"),
    Doctor(id=12, name="Dr. Olivia Grant", specialty="Emergency Medicine", rating=4.8,
           location="Central General Hospital ER", distance="1.9 km",
           image=_avatar("photo-1638202993928-7267aad84c31"), availability="24/7"),
]


class InMemoryDoctorDirectory(DoctorDirectoryPort):
    def __init__(self, doctors: Optional[Iterable[Doctor]] = None):
        self._doctors: List[Doctor] = list(SEED_DOCTORS if doctors is None else doctors)

    def get_all_doctors(self) -> List[Doctor]:
        return list(self._doctors)

    def get_doctors_by_specialty(self, specialty: str) -> List[Doctor]:
        needle = specialty.strip().lower()
        return [d for d in self._doctors if needle in d.specialty.lower()]

    def get_doctor_by_id(self, doctor_id: Union[int, str]) -> Optional[Doctor]:
        for doctor in self._doctors:
            if str(doctor.id) == str(doctor_id):
                return doctor
        return None
