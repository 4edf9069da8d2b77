"""
Submission Ranking
cfp_review/services/submission_ranking.py

Filter, sort and paginate scored submissions for the committee list view.
Missing averages, coverage and review timestamps sort as 0, and a missing
created_at sorts as the oldest. Sorting is stable, so ties keep their
input order.

Search syntax: whitespace-separated terms must all appear in the title,
abstract, speaker or tags. "double quoted" terms match as a phrase and a
leading - excludes a term or phrase. Matching is case-insensitive.
"""

import math
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from cfp_review.core.exceptions import UnknownSortOptionException
from cfp_review.models.enumerations import ShortlistStatus, SortOption
from cfp_review.scoring.score_aggregator import SubmissionScoring, as_utc_timestamp


@dataclass(frozen=True)
class ScoredSubmission:
    """A submission paired with its freshly computed scoring."""
    submission_id: str
    title: str
    submission_type: Optional[str]
    created_at: Optional[datetime]
    scoring: SubmissionScoring
    abstract: str = ""
    speaker: Optional[str] = None
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SubmissionFilter:
    search: Optional[str] = None
    submission_type: Optional[str] = None
    min_reviews: int = 0
    shortlist_only: bool = False


@dataclass
class Page:
    items: List[ScoredSubmission]
    page: int
    page_size: int
    total_items: int
    total_pages: int


_SEARCH_TOKEN = re.compile(r'-?"[^"]+"|-?\S+')


def parse_search(search: Optional[str]) -> Tuple[List[str], List[str]]:
    """Split a search string into (include, exclude) lowercase terms."""
    include: List[str] = []
    exclude: List[str] = []
    for token in _SEARCH_TOKEN.findall(search or ""):
        negated = token.startswith("-")
        term = token[1:] if negated else token
        if term.startswith('"') and term.endswith('"') and len(term) >= 2:
            term = term[1:-1]
        term = term.strip().lower()
        if not term:
            continue
        (exclude if negated else include).append(term)
    return include, exclude


def _haystack(s: ScoredSubmission) -> str:
    return " ".join(
        [s.title, s.abstract, s.speaker or "", " ".join(s.tags)]
    ).lower()


def matches_search(
    submission: ScoredSubmission,
    include: Sequence[str],
    exclude: Sequence[str],
) -> bool:
    haystack = _haystack(submission)
    if any(term not in haystack for term in include):
        return False
    return not any(term in haystack for term in exclude)


def filter_submissions(
    submissions: Sequence[ScoredSubmission],
    filters: SubmissionFilter,
) -> List[ScoredSubmission]:
    result = list(submissions)

    include, exclude = parse_search(filters.search)
    if include or exclude:
        result = [s for s in result if matches_search(s, include, exclude)]

    if filters.submission_type:
        result = [s for s in result if s.submission_type == filters.submission_type]

    if filters.min_reviews > 0:
        result = [s for s in result if s.scoring.review_count >= filters.min_reviews]

    if filters.shortlist_only:
        result = [
            s for s in result
            if s.scoring.status == ShortlistStatus.LIKELY_SHORTLISTED
        ]

    return result


def _last_reviewed(s: ScoredSubmission) -> float:
    if s.scoring.last_reviewed_at is None:
        return 0.0
    return as_utc_timestamp(s.scoring.last_reviewed_at)


def _created(s: ScoredSubmission) -> float:
    if s.created_at is None:
        return float("-inf")
    return as_utc_timestamp(s.created_at)


# sort option -> (key, descending)
_SORT_KEYS: Dict[SortOption, Tuple[Callable[[ScoredSubmission], object], bool]] = {
    SortOption.NEWEST: (_created, True),
    SortOption.OLDEST: (_created, False),
    SortOption.MOST_REVIEWS: (lambda s: s.scoring.review_count, True),
    SortOption.LEAST_REVIEWS: (lambda s: s.scoring.review_count, False),
    SortOption.HIGHEST_SCORE: (lambda s: s.scoring.avg_score or 0, True),
    SortOption.LOWEST_SCORE: (lambda s: s.scoring.avg_score or 0, False),
    SortOption.HIGHEST_COVERAGE: (lambda s: s.scoring.coverage_percent, True),
    SortOption.LOWEST_COVERAGE: (lambda s: s.scoring.coverage_percent, False),
    SortOption.LAST_REVIEWED: (_last_reviewed, True),
    SortOption.TITLE: (lambda s: s.title.casefold(), False),
}


def sort_submissions(
    submissions: Sequence[ScoredSubmission],
    sort_by: Union[SortOption, str] = SortOption.NEWEST,
) -> List[ScoredSubmission]:
    """Return a new list ordered by one of the SortOption keys."""
    try:
        option = SortOption(sort_by)
    except ValueError:
        raise UnknownSortOptionException(str(sort_by)) from None

    key, descending = _SORT_KEYS[option]
    return sorted(submissions, key=key, reverse=descending)


def paginate(
    submissions: Sequence[ScoredSubmission],
    page: int,
    page_size: int,
) -> Page:
    """Slice a 1-based page out of an ordered list."""
    total_items = len(submissions)
    total_pages = math.ceil(total_items / page_size) if page_size > 0 else 0
    start = (page - 1) * page_size
    return Page(
        items=list(submissions[start:start + page_size]),
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
    )
