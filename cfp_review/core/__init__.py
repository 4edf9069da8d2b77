"""
Core Package - CFP Review Scoring Service
cfp_review/core/__init__.py

Core infrastructure: exceptions, logging.
"""

from cfp_review.core.exceptions import (
    InsightsBatchTooLargeException,
    ScoringException,
    UnknownSortOptionException,
)
from cfp_review.core.logging import configure_logging

__all__ = [
    # Exceptions
    "InsightsBatchTooLargeException",
    "ScoringException",
    "UnknownSortOptionException",
    # Logging
    "configure_logging",
]
