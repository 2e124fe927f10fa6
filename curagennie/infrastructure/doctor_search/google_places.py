import logging
from typing import List, Optional, Union

import requests

from curagennie.application.errors import DirectoryLookupError
from curagennie.application.ports import DoctorDirectoryPort
from curagennie.domain.models import Doctor
from curagennie.infrastructure.config import Settings


logger = logging.getLogger(__name__)


TEXT_SEARCH_URL = "https://maps.googleapis.com/maps/api/place/textsearch/json"
DETAILS_URL = "https://maps.googleapis.com/maps/api/place/details/json"
DETAILS_FIELDS = "place_id,name,rating,formatted_address,icon,opening_hours"
# Details replies for a place id that does not exist
UNKNOWN_PLACE_STATUSES = ("ZERO_RESULTS", "NOT_FOUND", "INVALID_REQUEST")


def _availability(place: dict) -> str:
    open_now = (place.get("opening_hours") or {}).get("open_now")
    if open_now is True:
        return "Open now"
    if open_now is False:
        return "Closed now"
    return "Hours not listed"


def _to_doctor(place: dict, specialty: str) -> Doctor:
    doctor = Doctor(
        id=place.get("place_id") or place.get("name", ""),
        name=place.get("name", "Clinic"),
        specialty=specialty,
        location=place.get("formatted_address", ""),
        image=place.get("icon", ""),
        availability=_availability(place),
    )
    if place.get("rating") is not None:
        doctor.rating = float(place["rating"])
    return doctor


class GooglePlacesDoctorDirectory(DoctorDirectoryPort):
    """Doctor directory backed by the Google Places Text Search API."""

    def __init__(self, settings: Settings | None = None, limit: int = 5):
        self.settings = settings or Settings()
        self.api_key = self.settings.google_places_api_key
        self.location = self.settings.doctor_search_location
        self.limit = limit

    def _get(self, url: str, params: dict, empty_statuses=("ZERO_RESULTS",)) -> dict:
        params = dict(params, key=self.api_key)
        try:
            resp = requests.get(url, params=params, timeout=15)
            resp.raise_for_status()
            data = resp.json()
        except Exception as e:
            logger.exception("Places request to %s failed: %s", url, e)
            raise DirectoryLookupError(str(e)) from e

        status = data.get("status", "OK")
        if status in empty_statuses:
            return {}
        if status != "OK":
            raise DirectoryLookupError(f"Places API returned {status}: {data.get('error_message', '')}")
        return data

    def _search(self, query: str, specialty: str) -> List[Doctor]:
        if not self.api_key:
            logger.warning("Google Places API key missing; doctor search disabled.")
            return []
        if self.location:
            query = f"{query} in {self.location}"
        data = self._get(TEXT_SEARCH_URL, {"query": query})
        results = data.get("results", [])[:self.limit]
        return [_to_doctor(r, specialty) for r in results]

    def get_doctors_by_specialty(self, specialty: str) -> List[Doctor]:
        return self._search(f"{specialty} doctor", specialty)

    def get_all_doctors(self) -> List[Doctor]:
        return self._search("doctor clinic", "General Physician")

    def get_doctor_by_id(self, doctor_id: Union[int, str]) -> Optional[Doctor]:
        if not self.api_key:
            return None
        params = {"place_id": str(doctor_id), "fields": DETAILS_FIELDS}
        data = self._get(DETAILS_URL, params, empty_statuses=UNKNOWN_PLACE_STATUSES)
        result = data.get("result")
        if not result:
            return None
        return _to_doctor(result, "Doctor")
