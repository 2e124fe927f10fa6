import logging
from typing import Any, List, Optional

import uvicorn
from fastapi import Body, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from curagennie.application.errors import MedicineLookupError, MedicineLookupUnavailable
from curagennie.application.ports import ArticleCatalogPort, DoctorDirectoryPort, LLMPort
from curagennie.application.schemas import (
    AnalysisResult,
    ErrorResponse,
    MedicineImageQuery,
    MedicineInfo,
    MedicineQuery,
)
from curagennie.application.use_cases import MedicineInfoUseCase, SymptomAnalysisUseCase
from curagennie.domain.models import AnalysisRequest, Doctor, HealthArticle
from curagennie.infrastructure.articles import InMemoryArticleCatalog
from curagennie.infrastructure.config import Settings
from curagennie.infrastructure.doctor_search.google_places import GooglePlacesDoctorDirectory
from curagennie.infrastructure.doctor_search.in_memory import InMemoryDoctorDirectory
from curagennie.infrastructure.llm.mistral_client import MistralLLMAdapter


logger = logging.getLogger(__name__)


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, message=message).model_dump(),
    )


def _validation_message(errors: List[dict]) -> str:
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def create_app(
    directory: DoctorDirectoryPort,
    articles: ArticleCatalogPort,
    llm: Optional[LLMPort] = None,
    allowed_origins: Optional[List[str]] = None,
) -> FastAPI:
    analysis = SymptomAnalysisUseCase(directory=directory, llm=llm)
    medicines = MedicineInfoUseCase(llm=llm)

    app = FastAPI(title="Cura Gennie API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request, exc: RequestValidationError):
        return _error(400, "Invalid request", _validation_message(list(exc.errors())))

    @app.get("/health")
    def health():
        return {"ok": True, "aiConfigured": bool(llm is not None and llm.is_configured())}

    @app.post("/api/analyze-symptoms", response_model=AnalysisResult)
    def analyze_symptoms(payload: Any = Body(...)):
        try:
            request = AnalysisRequest.model_validate(payload)
        except ValidationError as e:
            return _error(400, "Invalid symptom analysis request", _validation_message(e.errors()))
        try:
            return analysis.analyze(request)
        except Exception as e:
            logger.exception("Symptom analysis error")
            return _error(500, "Failed to analyze symptoms", str(e))

    def _medicine_response(lookup, arg, failure: str):
        try:
            return lookup(arg)
        except MedicineLookupUnavailable as e:
            return _error(503, "Medicine lookup unavailable", str(e))
        except MedicineLookupError as e:
            logger.warning("%s: %s", failure, e)
            return _error(500, failure, str(e))
        except Exception as e:
            logger.exception(failure)
            return _error(500, failure, str(e))

    @app.post("/api/medicine-info", response_model=MedicineInfo, response_model_by_alias=True)
    def medicine_info(payload: Any = Body(...)):
        try:
            query = MedicineQuery.model_validate(payload)
        except ValidationError as e:
            return _error(400, "Medicine name is required", _validation_message(e.errors()))
        return _medicine_response(medicines.lookup, query.query, "Failed to fetch medicine information")

    @app.post("/api/medicine-info-image", response_model=MedicineInfo, response_model_by_alias=True)
    def medicine_info_image(payload: Any = Body(...)):
        try:
            query = MedicineImageQuery.model_validate(payload)
        except ValidationError as e:
            return _error(400, "Image data is required", _validation_message(e.errors()))
        return _medicine_response(medicines.lookup_image, query.image_base64, "Failed to analyze medicine image")

    @app.get("/api/doctors", response_model=List[Doctor])
    def list_doctors(specialty: Optional[str] = None):
        try:
            if specialty:
                return directory.get_doctors_by_specialty(specialty)
            return directory.get_all_doctors()
        except Exception as e:
            logger.exception("Get doctors error")
            return _error(500, "Failed to fetch doctors", str(e))

    @app.get("/api/doctors/{doctor_id}", response_model=Doctor)
    def get_doctor(doctor_id: str):
        try:
            doctor = directory.get_doctor_by_id(doctor_id)
        except Exception as e:
            logger.exception("Get doctor error")
            return _error(500, "Failed to fetch doctor", str(e))
        if doctor is None:
            return _error(404, "Doctor not found", f"No doctor with id {doctor_id}")
        return doctor

    @app.get("/api/articles", response_model=List[HealthArticle])
    def list_articles(category: Optional[str] = None):
        try:
            if category:
                return articles.get_articles_by_category(category)
            return articles.get_all_articles()
        except Exception as e:
            logger.exception("Get articles error")
            return _error(500, "Failed to fetch articles", str(e))

    @app.get("/api/articles/{article_id}", response_model=HealthArticle)
    def get_article(article_id: int):
        try:
            article = articles.get_article_by_id(article_id)
        except Exception as e:
            logger.exception("Get article error")
            return _error(500, "Failed to fetch article", str(e))
        if article is None:
            return _error(404, "Article not found", f"No article with id {article_id}")
        return article

    return app


def build_directory(settings: Settings) -> DoctorDirectoryPort:
    if settings.google_places_api_key and settings.doctor_search_location:
        logger.info("Using Google Places doctor directory around %s", settings.doctor_search_location)
        return GooglePlacesDoctorDirectory(settings=settings)
    return InMemoryDoctorDirectory()


def app_from_settings(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    llm = MistralLLMAdapter(settings=settings)
    if not llm.is_configured():
        logger.warning("No AI provider configured; symptom analysis uses the rule engine only.")
    return create_app(
        directory=build_directory(settings),
        articles=InMemoryArticleCatalog(),
        llm=llm,
        allowed_origins=settings.allowed_origins,
    )


def main():
    settings = Settings()
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(app_from_settings(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
