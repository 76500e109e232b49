"""
Suggestion Ranker

Orchestrates search, deduplication, scoring, confidence estimation and
ranking of archive-driven job suggestions for a batch of order items.
"""

import asyncio
import re
from collections.abc import Callable
from datetime import datetime

from ....core.config import settings
from ....core.observability import SUGGESTIONS_GENERATED, get_logger
from ...shared.base import utc_now
from ..entities.archive import JobArchive
from ..entities.suggestion import ArchiveDrivenJobSuggestion
from ..repositories.archive_repository import ArchiveSearchCriteria, CancellationToken
from ..value_objects.enums import RecommendationType
from ..value_objects.order import OrderItem
from .archive_search import ArchiveSearchGateway
from .confidence import ConfidenceEstimator
from .job_synthesizer import JobSynthesizer
from .optimization_engine import OptimizationEngine
from .risk_assessor import RiskAssessor
from .similarity import SimilarityScorer

logger = get_logger(__name__)

KEYWORD_SEPARATORS = re.compile(r"[\s\-_.,;:!?()\[\]{}]+")
MIN_KEYWORD_LENGTH = 3
MAX_KEYWORDS = 5


def extract_keywords(text: str) -> list[str]:
    """Distinct lower-cased search tokens of a part name or description."""
    keywords: list[str] = []
    for word in KEYWORD_SEPARATORS.split(text.lower()):
        if len(word) >= MIN_KEYWORD_LENGTH and word not in keywords:
            keywords.append(word)
    return keywords[:MAX_KEYWORDS]


def deduplicate_archives(archives: list[JobArchive]) -> list[JobArchive]:
    """Keep the first occurrence of each archive id, preserving order."""
    seen: set[str] = set()
    unique: list[JobArchive] = []
    for archive in archives:
        if archive.id not in seen:
            seen.add(archive.id)
            unique.append(archive)
    return unique


class SuggestionRanker:
    """
    Domain service producing ranked suggestions for order items.

    Items are searched concurrently; the merged suggestions are sorted only
    after every item has finished so callers never see a partial ranking.
    """

    def __init__(
        self,
        search_gateway: ArchiveSearchGateway,
        synthesizer: JobSynthesizer | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._search = search_gateway
        self._synthesizer = synthesizer or JobSynthesizer(clock=clock)
        self._clock = clock
        self._scorer = SimilarityScorer()
        self._confidence = ConfidenceEstimator()
        self._optimizations = OptimizationEngine()
        self._risks = RiskAssessor()

    async def generate_suggestions(
        self,
        order_items: list[OrderItem],
        delivery_date: datetime | None,
        customer_id: str | None = None,
        cancellation: CancellationToken | None = None,
    ) -> list[ArchiveDrivenJobSuggestion]:
        """
        Rank archive-driven job suggestions for a batch of order items.

        Args:
            order_items: Items of the new order
            delivery_date: Requested delivery date for the new jobs
            customer_id: Optional customer filter for the primary search
            cancellation: Optional token abandoning outstanding searches

        Returns:
            At most ``MAX_SUGGESTIONS`` suggestions, best first
        """
        logger.info(
            "Generating archive-driven job suggestions", item_count=len(order_items)
        )
        now = self._clock()

        per_item = await asyncio.gather(
            *(
                self._suggestions_for_item(
                    item, delivery_date, customer_id, cancellation, now
                )
                for item in order_items
            )
        )
        suggestions = [suggestion for batch in per_item for suggestion in batch]

        # sorted() is stable, so ties keep item/archive order
        ranked = sorted(
            suggestions, key=lambda suggestion: suggestion.ranking_score, reverse=True
        )[: settings.MAX_SUGGESTIONS]

        SUGGESTIONS_GENERATED.inc(len(ranked))
        logger.info(
            "Generated archive-driven job suggestions",
            candidate_count=len(suggestions),
            returned_count=len(ranked),
        )
        return ranked

    async def find_similar_archived_jobs(
        self,
        order_item: OrderItem,
        customer_id: str | None = None,
        cancellation: CancellationToken | None = None,
    ) -> list[JobArchive]:
        """
        Archives resembling an order item, deduplicated by archive id.

        Searches by part name first; when that finds nothing, searches each
        keyword of the name/description and pools the results.
        """
        search_term = order_item.display_name
        archives = await self._search.search(
            ArchiveSearchCriteria(
                part_name=search_term,
                customer_id=customer_id,
                include_performance_data=True,
                max_results=settings.ARCHIVE_SEARCH_MAX_RESULTS,
            ),
            cancellation,
        )

        if not archives:
            for keyword in extract_keywords(search_term):
                archives.extend(
                    await self._search.search(
                        ArchiveSearchCriteria(
                            part_name=keyword,
                            max_results=settings.KEYWORD_SEARCH_MAX_RESULTS,
                        ),
                        cancellation,
                    )
                )

        return deduplicate_archives(archives)[: settings.SIMILAR_ARCHIVES_LIMIT]

    async def _suggestions_for_item(
        self,
        item: OrderItem,
        delivery_date: datetime | None,
        customer_id: str | None,
        cancellation: CancellationToken | None,
        now: datetime,
    ) -> list[ArchiveDrivenJobSuggestion]:
        archives = await self.find_similar_archived_jobs(item, customer_id, cancellation)
        if not archives:
            logger.info("No similar archived jobs found", part_name=item.display_name)
            return []

        suggestions = []
        for archive in archives[: settings.SUGGESTION_ARCHIVES_PER_ITEM]:
            similarity = self._scorer.score(item, archive)
            if similarity < settings.MIN_SIMILARITY_SCORE:
                continue
            suggestions.append(
                self.build_suggestion(item, archive, similarity, delivery_date, now)
            )
        return suggestions

    def build_suggestion(
        self,
        item: OrderItem,
        archive: JobArchive,
        similarity: float,
        delivery_date: datetime | None,
        now: datetime,
    ) -> ArchiveDrivenJobSuggestion:
        job, tasks, subtasks = self._synthesizer.build_candidate(
            archive, item, delivery_date
        )
        optimizations = self._optimizations.derive_optimizations(archive, item)
        risks = self._risks.assess(archive)

        return ArchiveDrivenJobSuggestion(
            source_archive_id=archive.id,
            part_name=item.display_name,
            similarity_score=similarity,
            confidence_level=self._confidence.estimate(archive, similarity, now),
            recommendation_type=RecommendationType.from_similarity(similarity),
            suggested_job=job,
            suggested_tasks=tuple(tasks),
            suggested_subtasks=tuple(subtasks),
            historical_performance=self._risks.summarize_performance(archive),
            optimizations=tuple(optimizations),
            risk_assessment=tuple(risks),
            recommendations=tuple(self._risks.recommend(archive, optimizations, risks)),
        )
