from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

load_dotenv()

from cfp_review.config import settings
from cfp_review.core.exceptions import ScoringException
from cfp_review.core.logging import configure_logging

# IMPORT ROUTERS
from cfp_review.routers.health import router as health_router
from cfp_review.routers.cfp_scoring import router as cfp_scoring_router
from cfp_review.routers.cfp_scoring import (
    scoring_exception_handler,
    validation_exception_handler,
)

configure_logging(settings)


# SWAGGER UI — tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "CFP Scoring"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

# REGISTER EXCEPTION HANDLERS
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(ScoringException, scoring_exception_handler)

# REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
app.include_router(health_router)       # Health
app.include_router(cfp_scoring_router)  # CFP Scoring


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "cfp_review.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
