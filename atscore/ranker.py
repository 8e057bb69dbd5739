import concurrent.futures
import time
from typing import List, Sequence
import logging

from .constants import RankingPoints
from .schemas import CandidateRecord, RankExplanation, RankedResult, SearchPage, SearchQuery
from .settings import Settings

logger = logging.getLogger(__name__)


class CandidateRanker:
    """Additive weighted ranking of candidate records against a search query.

    Every candidate is scored; nothing is filtered out. Results are ordered by
    descending score and candidates with equal scores keep their input order.
    """

    def __init__(self, max_workers: int = 4):
        self.max_workers = max_workers

    @classmethod
    def from_settings(cls, settings: Settings) -> 'CandidateRanker':
        return cls(max_workers=settings.max_workers)

    def score_candidate(self, candidate: CandidateRecord, query: SearchQuery) -> RankedResult:
        score = 0
        explanation = RankExplanation()

        # Keyword matching in bio and role
        if query.keywords:
            search_text = ' '.join(
                part for part in (candidate.bio, candidate.role, candidate.custom_role) if part
            ).lower()
            for keyword in query.keywords.lower().split():
                if keyword in search_text:
                    explanation.keywords_matched += 1
                    score += RankingPoints.KEYWORD

        # Skills matching
        candidate_skills = {skill.lower() for skill in candidate.skills}
        for skill in query.skills:
            if skill.lower() in candidate_skills:
                explanation.skills_matched += 1
                score += RankingPoints.SKILL

        # Location matching
        if query.location and query.location in candidate.preferred_locations:
            explanation.location_match = True
            score += RankingPoints.LOCATION

        # Job type matching
        if query.job_type and query.job_type == candidate.job_preference:
            explanation.job_type_match = True
            score += RankingPoints.JOB_TYPE

        # Role matching
        if query.role:
            candidate_role = ' '.join(
                part for part in (candidate.role, candidate.custom_role) if part
            ).lower()
            if query.role.lower() in candidate_role:
                explanation.role_match = True
                score += RankingPoints.ROLE

        return RankedResult(
            candidate=candidate,
            score=min(RankingPoints.MAX_SCORE, score),
            explanation=explanation,
        )

    @staticmethod
    def _sort(results: List[RankedResult]) -> List[RankedResult]:
        # sorted() is stable, so ties keep input order
        return sorted(results, key=lambda result: result.score, reverse=True)

    def rank(self, candidates: Sequence[CandidateRecord], query: SearchQuery) -> List[RankedResult]:
        results = self._sort([self.score_candidate(candidate, query) for candidate in candidates])
        logger.debug(f"Ranked {len(results)} candidates")
        return results

    def rank_parallel(
        self,
        candidates: Sequence[CandidateRecord],
        query: SearchQuery
    ) -> List[RankedResult]:
        """Score candidates on a thread pool, then apply the same stable sort."""
        start_time = time.time()

        with concurrent.futures.ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            # map() yields results in submission order
            scored = list(executor.map(lambda candidate: self.score_candidate(candidate, query), candidates))

        results = self._sort(scored)
        logger.info(
            f"Ranked {len(results)} candidates on {self.max_workers} workers "
            f"in {time.time() - start_time:.3f}s"
        )
        return results

    def search(self, candidates: Sequence[CandidateRecord], query: SearchQuery) -> SearchPage:
        """Rank all candidates and return the requested page."""
        ranked = self.rank(candidates, query)
        offset = (query.page - 1) * query.limit
        return SearchPage(
            results=ranked[offset:offset + query.limit],
            total=len(ranked),
            page=query.page,
            limit=query.limit,
        )
