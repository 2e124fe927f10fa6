from typing import Iterable, List, Optional

from curagennie.application.ports import ArticleCatalogPort
from curagennie.domain.models import HealthArticle


def _cover(photo_id: str) -> str:
    return f"https://images.unsplash.com/{photo_id}?q=80&w=800&auto=format&fit=crop"


SEED_ARTICLES = [
    HealthArticle(
        id=1,
        title="How to manage recurring headaches safely",
        category="Pain Management",
        read_time="5 min read",
        image=_cover("photo-1515023677547-593d9635e982"),
        excerpt=(
            "Understanding the triggers of migraines and tension headaches, and natural "
            "ways to reduce frequency."
        ),
        content=(
            "Most recurring headaches are tension headaches or migraines. Keeping a simple "
            "diary of sleep, meals, screen time and stress often reveals a pattern. Regular "
            "sleep, enough water and short breaks from screens reduce how often they come back.\n\n"
            "See a doctor quickly for a sudden severe headache, or a headache with fever, a stiff "
            "neck, confusion or weakness."
        ),
        published_date="2024-01-15",
    ),
    HealthArticle(
        id=2,
        title="Understanding seasonal allergies vs. cold",
        category="Respiratory Health",
        read_time="4 min read",
        image=_cover("photo-1584634731339-252c581abfc5"),
        excerpt=(
            "Key differences between allergy symptoms and the common cold to help you choose "
            "the right treatment."
        ),
        content=(
            "Colds are caused by viruses and usually bring a sore throat, body ache and sometimes "
            "a mild fever. Allergies cause itching, sneezing and watery eyes without fever, and "
            "they last as long as you are exposed to the trigger.\n\n"
            "Allergies are not contagious. A cold usually settles within ten days."
        ),
        published_date="2024-02-02",
    ),
    HealthArticle(
        id=3,
        title="5 Daily habits for better heart health",
        category="Heart Health",
        read_time="6 min read",
        image=_cover("photo-1571019611242-c8c3bdd92552"),
        excerpt=(
            "Simple lifestyle changes you can make today to improve your cardiovascular health "
            "significantly."
        ),
        content=(
            "Walk for at least thirty minutes a day, eat more vegetables and less salt, avoid "
            "tobacco, sleep seven to eight hours and check your blood pressure regularly.\n\n"
            "Chest pain, breathlessness or fainting always need urgent medical attention."
        ),
        published_date="2024-02-20",
    ),
    HealthArticle(
        id=4,
        title="The importance of hydration during fever",
        category="Wellness",
        read_time="3 min read",
        image=_cover("photo-1543599538-a6c4f6cc5c05"),
        excerpt=(
            "Why fluids are critical when you're sick and what are the best drinks to stay "
            "hydrated."
        ),
        content=(
            "Fever increases the water your body loses through sweat and breathing. Sip water, "
            "oral rehydration solution, soups or coconut water through the day.\n\n"
            "Very little urine, dizziness or a dry mouth are signs of dehydration."
        ),
        published_date="2024-03-05",
    ),
]


class InMemoryArticleCatalog(ArticleCatalogPort):
    def __init__(self, articles: Optional[Iterable[HealthArticle]] = None):
        self._articles: List[HealthArticle] = list(SEED_ARTICLES if articles is None else articles)

    def get_all_articles(self) -> List[HealthArticle]:
        return list(self._articles)

    def get_articles_by_category(self, category: str) -> List[HealthArticle]:
        needle = category.strip().lower()
        return [a for a in self._articles if needle in a.category.lower()]

    def get_article_by_id(self, article_id: int) -> Optional[HealthArticle]:
        for article in self._articles:
            if article.id == article_id:
                return article
        return None
