"""
Health Check Router - CFP Review Scoring Service
cfp_review/routers/health.py

The scoring core has no external dependencies, so health reports the
service version and the scoring self-check only.
"""
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Dict
from datetime import datetime, timezone

from cfp_review.config import settings
from cfp_review.models.enumerations import ShortlistStatus
from cfp_review.scoring.classifier import ClassificationInput, ShortlistClassifier

router = APIRouter(tags=["Health"])


#  Schemas


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    dependencies: Dict[str, str]


def check_scoring_engine() -> str:
    """Run one known classification through the engine."""
    result = ShortlistClassifier().classify(
        ClassificationInput(avg_score=3.0, review_count=2, coverage_ratio=0.5)
    )
    if result == ShortlistStatus.LIKELY_SHORTLISTED:
        return "healthy"
    return f"unhealthy: unexpected classification {result.value}"


@router.get("/health", response_model=HealthResponse)
async def health_check():
    dependencies = {"scoring_engine": check_scoring_engine()}
    all_healthy = all(v == "healthy" for v in dependencies.values())
    body = HealthResponse(
        status="healthy" if all_healthy else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        dependencies=dependencies,
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK if all_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(mode="json"),
    )
