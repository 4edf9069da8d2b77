from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from cfp_review.scoring.score_aggregator import Review


class ReviewCreate(BaseModel):
    """
    Model for recording a new review. This is the write boundary where
    score ranges are enforced; the scoring core trusts what it reads.
    """

    score_overall: int = Field(
        ...,
        ge=1,
        le=5,
        description="Overall score (1-5)"
    )

    score_relevance: Optional[int] = Field(default=None, ge=1, le=5)
    score_technical_depth: Optional[int] = Field(default=None, ge=1, le=5)
    score_clarity: Optional[int] = Field(default=None, ge=1, le=5)
    score_diversity: Optional[int] = Field(default=None, ge=1, le=5)

    private_notes: Optional[str] = Field(
        default=None,
        max_length=5000,
        description="Notes visible to the program committee only"
    )

    feedback_to_speaker: Optional[str] = Field(
        default=None,
        max_length=2000,
        description="Feedback shared with the speaker"
    )


class ReviewIn(BaseModel):
    """
    A stored review as handed to the scoring endpoints.
    """

    score_overall: Optional[float] = Field(
        default=None,
        ge=1,
        le=5,
        description="Overall score (1-5), null when the reviewer left no score"
    )

    created_at: datetime = Field(
        ...,
        description="When the review was recorded (ISO-8601)"
    )

    reviewer_id: Optional[str] = None

    def to_review(self, submission_id: Optional[str] = None) -> Review:
        return Review(
            score_overall=self.score_overall,
            created_at=self.created_at,
            reviewer_id=self.reviewer_id,
            submission_id=submission_id,
        )
