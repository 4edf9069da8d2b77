"""
Custom Exceptions - CFP Review Scoring Service
cfp_review/core/exceptions.py

Raised by the service layer only. The scoring core itself is total and
never raises.
"""


class ScoringException(Exception):
    """Base exception for scoring service operations."""

    error_code = "SCORING_ERROR"
    status_code = 400

    def __init__(self, message: str = "Scoring request failed"):
        self.message = message
        super().__init__(message)


class InsightsBatchTooLargeException(ScoringException):
    """Submission batch exceeds the configured limit."""

    error_code = "BATCH_TOO_LARGE"
    status_code = 413

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Batch of {size} submissions exceeds the limit of {limit}")


class UnknownSortOptionException(ScoringException):
    """Sort key is not one of the supported submission orderings."""

    error_code = "UNKNOWN_SORT_OPTION"

    def __init__(self, sort_by: str):
        self.sort_by = sort_by
        super().__init__(f"Unknown sort option '{sort_by}'")
