"""
Services module for the CFP Review Scoring Service.
"""

from cfp_review.services.scoring_service import ScoringService, get_scoring_service

__all__ = ["ScoringService", "get_scoring_service"]
