import logging

from fastapi import FastAPI

from cvparser.api.routes.parse import router as parse_router
from cvparser.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    description="Deterministic resume parsing service that extracts a flat candidate profile from PDF/Word resumes",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(parse_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "cv-parser", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}
