from typing import List, Optional, Protocol, Union

from curagennie.domain.models import Doctor, HealthArticle


class DoctorDirectoryPort(Protocol):
    def get_doctors_by_specialty(self, specialty: str) -> List[Doctor]:
        """Case-insensitive partial match on the doctor's specialty."""
        ...

    def get_all_doctors(self) -> List[Doctor]:
        ...

    def get_doctor_by_id(self, doctor_id: Union[int, str]) -> Optional[Doctor]:
        ...


class ArticleCatalogPort(Protocol):
    def get_all_articles(self) -> List[HealthArticle]:
        ...

    def get_articles_by_category(self, category: str) -> List[HealthArticle]:
        ...

    def get_article_by_id(self, article_id: int) -> Optional[HealthArticle]:
        ...


class LLMPort(Protocol):
    def is_configured(self) -> bool:
        """
        True when credentials are present. Must not raise.
        """
        ...

    def generate(self, prompt: str, system: Optional[str] = None) -> str:
        """
        Sends one prompt and returns the raw text reply, expected to be a JSON object.
        """
        ...

    def identify_image(self, image_base64: str, instruction: str) -> str:
        ...
