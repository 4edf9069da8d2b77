"""
CFP Scoring Router - CFP Review Scoring Service
cfp_review/routers/cfp_scoring.py

Endpoints:
  POST /api/v1/cfp/scoring              — Score one submission from its reviews
  POST /api/v1/cfp/classify             — Classify raw aggregate facts
  POST /api/v1/cfp/insights             — Committee insights for a submission set
  POST /api/v1/cfp/submissions/ranked   — Filtered, sorted, paginated list
  POST /api/v1/cfp/reviews/validate      — Check a new review before it is stored
  GET  /api/v1/cfp/buckets              — Bucket tables and status labels

Every request recomputes from the reviews in its body.
"""

import logging
from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cfp_review.config import settings
from cfp_review.core.exceptions import ScoringException
from cfp_review.models.review import ReviewCreate
from cfp_review.models.scoring import (
    BucketOut,
    BucketsResponse,
    ClassifyRequest,
    ClassifyResponse,
    InsightsRequest,
    InsightsResponse,
    RankedSubmission,
    RankingRequest,
    RankingResponse,
    ScoringRequest,
    SubmissionIn,
    SubmissionScoringResponse,
)
from cfp_review.scoring.buckets import COVERAGE_BUCKETS, SCORE_BUCKETS, BucketIndexer
from cfp_review.scoring.classifier import (
    SHORTLIST_STATUS_LABELS,
    SHORTLIST_STATUS_TONES,
    ClassificationInput,
    ShortlistClassifier,
    score_tier,
    status_label,
)
from cfp_review.scoring.score_aggregator import SubmissionScoring
from cfp_review.scoring.utils import format_percent, format_score
from cfp_review.services.scoring_service import (
    ScoringService,
    SubmissionReviews,
    get_scoring_service,
)
from cfp_review.services.submission_ranking import SubmissionFilter

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/cfp", tags=["CFP Scoring"])

_indexer = BucketIndexer()
_classifier = ShortlistClassifier()


#  Validation Error Messages


FIELD_MESSAGES = {
    "total_reviewers": {
        "missing": "Total reviewers is required",
        "greater_than_equal": "Total reviewers cannot be negative",
        "int_type": "Total reviewers must be an integer",
        "int_parsing": "Total reviewers must be a valid integer",
    },
    "score_overall": {
        "less_than_equal": "Overall score must be between 1 and 5",
        "greater_than_equal": "Overall score must be between 1 and 5",
        "float_parsing": "Overall score must be a valid number",
    },
    "created_at": {
        "missing": "Review timestamp is required",
        "datetime": "Review timestamp must be an ISO-8601 datetime",
    },
    "private_notes": {
        "string_too_long": "Private notes must be at most 5000 characters",
    },
    "feedback_to_speaker": {
        "string_too_long": "Feedback to speaker must be at most 2000 characters",
    },
    "sort_by": {
        "enum": "Unknown sort option",
    },
}

DEFAULT_MESSAGES = {
    "missing": "Field '{field}' is required",
    "string_too_short": "Field '{field}' is too short",
    "string_too_long": "Field '{field}' is too long",
    "less_than_equal": "Field '{field}' exceeds maximum allowed value",
    "greater_than_equal": "Field '{field}' is below minimum allowed value",
    "float_type": "Field '{field}' must be a number",
    "float_parsing": "Field '{field}' must be a valid number",
    "int_type": "Field '{field}' must be an integer",
    "int_parsing": "Field '{field}' must be a valid integer",
    "enum": "Field '{field}' has an unsupported value",
}


def get_validation_message(field: str, error_type: str) -> str:
    # Nested locations such as reviews.0.score_overall match on the leaf name
    leaf = field.rsplit(".", 1)[-1]
    if leaf in FIELD_MESSAGES:
        for key in FIELD_MESSAGES[leaf]:
            if key in error_type:
                return FIELD_MESSAGES[leaf][key]
    for key, template in DEFAULT_MESSAGES.items():
        if key in error_type:
            return template.format(field=field)
    return f"Invalid value for field '{field}'"


def _error_body(error_code: str, message: str, details=None) -> dict:
    return {
        "error_code": error_code,
        "message": message,
        "details": details,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_body("VALIDATION_ERROR", "Request validation failed"),
        )
    err = errors[0]
    error_type = err.get("type", "")
    loc = err.get("loc", [])
    if "json_invalid" in error_type:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body("INVALID_REQUEST", "Malformed JSON request body"),
        )
    field = ".".join(str(l) for l in loc if l != "body")
    message = get_validation_message(field, error_type)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_error_body(
            "VALIDATION_ERROR",
            message,
            {"field": field, "type": error_type} if field else None,
        ),
    )


async def scoring_exception_handler(request: Request, exc: ScoringException):
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.error_code, exc.message),
    )


# =====================================================================
# Helpers
# =====================================================================

def _to_response(scoring: SubmissionScoring) -> SubmissionScoringResponse:
    return SubmissionScoringResponse(
        review_count=scoring.review_count,
        avg_score=scoring.avg_score,
        total_reviewers=scoring.total_reviewers,
        coverage_ratio=scoring.coverage_ratio,
        coverage_percent=scoring.coverage_percent,
        last_reviewed_at=scoring.last_reviewed_at,
        status=scoring.status,
        status_label=status_label(scoring.status),
        avg_score_display=format_score(scoring.avg_score),
        coverage_display=format_percent(scoring.coverage_percent),
        score_bucket=_indexer.score_bucket(scoring.avg_score),
        coverage_bucket=_indexer.coverage_bucket(scoring.coverage_percent),
        score_tier=score_tier(scoring.avg_score),
    )


def _to_submission_reviews(submissions: List[SubmissionIn]) -> List[SubmissionReviews]:
    return [
        SubmissionReviews(
            submission_id=s.submission_id,
            reviews=[r.to_review(s.submission_id) for r in s.reviews],
            total_reviewers=s.total_reviewers,
            title=s.title,
            submission_type=s.submission_type,
            created_at=s.created_at,
            abstract=s.abstract,
            speaker=s.speaker,
            tags=tuple(s.tags),
        )
        for s in submissions
    ]


# =====================================================================
# Endpoints
# =====================================================================

@router.post("/scoring", response_model=SubmissionScoringResponse)
async def score_submission(
    body: ScoringRequest,
    service: ScoringService = Depends(get_scoring_service),
):
    """Compute SubmissionScoring for one submission."""
    scoring = service.score([r.to_review() for r in body.reviews], body.total_reviewers)
    return _to_response(scoring)


@router.post("/classify", response_model=ClassifyResponse)
async def classify(body: ClassifyRequest):
    result = _classifier.classify(
        ClassificationInput(
            avg_score=body.avg_score,
            review_count=body.review_count,
            coverage_ratio=body.coverage_ratio,
        )
    )
    return ClassifyResponse(status=result, label=status_label(result))


@router.post("/insights", response_model=InsightsResponse)
async def insights(
    body: InsightsRequest,
    service: ScoringService = Depends(get_scoring_service),
):
    """Status, score-bucket and coverage-bucket tallies for a submission set."""
    logger.info(f"Insights requested for {len(body.submissions)} submissions")
    result = service.summarize(_to_submission_reviews(body.submissions))
    return InsightsResponse(
        by_status=result.by_status,
        by_score_bucket=result.by_score_bucket,
        by_coverage_bucket=result.by_coverage_bucket,
        total=result.total,
    )


@router.post("/submissions/ranked", response_model=RankingResponse)
async def ranked_submissions(
    body: RankingRequest,
    service: ScoringService = Depends(get_scoring_service),
):
    """Score, filter, sort and paginate a submission list."""
    page = service.rank(
        _to_submission_reviews(body.submissions),
        filters=SubmissionFilter(
            search=body.filters.search,
            submission_type=body.filters.submission_type,
            min_reviews=body.filters.min_reviews,
            shortlist_only=body.filters.shortlist_only,
        ),
        sort_by=body.sort_by,
        page=body.page,
        page_size=body.page_size,
    )
    return RankingResponse(
        items=[
            RankedSubmission(
                submission_id=s.submission_id,
                title=s.title,
                submission_type=s.submission_type,
                created_at=s.created_at,
                scoring=_to_response(s.scoring),
            )
            for s in page.items
        ],
        page=page.page,
        page_size=page.page_size,
        total_items=page.total_items,
        total_pages=page.total_pages,
    )


@router.post("/reviews/validate", response_model=ReviewCreate)
async def validate_review(body: ReviewCreate):
    """
    Run the review write-boundary checks and echo the accepted review.

    Scores must be integers 1-5, private notes at most 5000 characters and
    speaker feedback at most 2000. Failures use the validation error envelope.
    """
    return body


@router.get("/buckets", response_model=BucketsResponse)
async def buckets():
    """Static bucket definitions and status display tables."""
    return BucketsResponse(
        score_buckets=[BucketOut(key=b.key, label=b.label, min=b.min, max=b.max) for b in SCORE_BUCKETS],
        coverage_buckets=[BucketOut(key=b.key, label=b.label, min=b.min, max=b.max) for b in COVERAGE_BUCKETS],
        status_labels=dict(SHORTLIST_STATUS_LABELS),
        status_tones=dict(SHORTLIST_STATUS_TONES),
    )
