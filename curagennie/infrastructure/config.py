import os
import logging
from typing import List, Optional

from dotenv import load_dotenv


logger = logging.getLogger(__name__)

# Values already present in the environment win over the .env file
load_dotenv()


def get_secret(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


class Settings:
    @property
    def mistral_api_key(self) -> Optional[str]:
        return get_secret("MISTRAL_API_KEY")

    @property
    def mistral_model(self) -> str:
        return get_secret("MISTRAL_MODEL", "mistral-large-latest") or "mistral-large-latest"

    @property
    def mistral_vision_model(self) -> str:
        return get_secret("MISTRAL_VISION_MODEL", "pixtral-large-latest") or "pixtral-large-latest"

    @property
    def google_places_api_key(self) -> Optional[str]:
        return get_secret("GOOGLE_PLACES_API_KEY")

    @property
    def doctor_search_location(self) -> Optional[str]:
        return get_secret("DOCTOR_SEARCH_LOCATION")

    @property
    def allowed_origins(self) -> List[str]:
        raw = get_secret("ALLOWED_ORIGINS", "*") or "*"
        origins = [o.strip() for o in raw.split(",") if o.strip()]
        return origins or ["*"]

    @property
    def host(self) -> str:
        return get_secret("HOST", "0.0.0.0") or "0.0.0.0"

    @property
    def port(self) -> int:
        raw = get_secret("PORT", "8000")
        try:
            return int(raw)
        except (TypeError, ValueError):
            logger.warning("Invalid PORT %r, using 8000", raw)
            return 8000

    @property
    def log_level(self) -> str:
        return (get_secret("LOG_LEVEL", "INFO") or "INFO").upper()
