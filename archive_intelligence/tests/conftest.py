import pytest

from archive_intelligence.application.services.archive_job_service import (
    ArchiveDrivenJobService,
)
from archive_intelligence.core.observability import setup_structured_logging
from archive_intelligence.domain.archives.entities.archive import JobArchive
from archive_intelligence.domain.archives.entities.suggestion import (
    ArchiveDrivenJobSuggestion,
)
from archive_intelligence.domain.archives.services.archive_search import (
    ArchiveSearchGateway,
)
from archive_intelligence.domain.archives.services.job_synthesizer import (
    JobSynthesizer,
)
from archive_intelligence.domain.archives.services.similarity import SimilarityScorer
from archive_intelligence.domain.archives.services.suggestion_ranker import (
    SuggestionRanker,
)
from archive_intelligence.infrastructure.repositories.in_memory_archive_repository import (
    InMemoryArchiveRepository,
)

from .fixtures import NOW, ArchiveFactory, OrderItemFactory, fixed_clock


@pytest.fixture(scope="session", autouse=True)
def structured_logging() -> None:
    """Configure structlog once for the test session."""
    setup_structured_logging()


@pytest.fixture
def bracket_archive() -> JobArchive:
    """Recent, excellent archive of the Landing Gear Bracket."""
    return ArchiveFactory.create()


@pytest.fixture
def archive_repository(bracket_archive) -> InMemoryArchiveRepository:
    return InMemoryArchiveRepository([bracket_archive])


@pytest.fixture
def search_gateway(archive_repository) -> ArchiveSearchGateway:
    return ArchiveSearchGateway(archive_repository, timeout_seconds=1.0)


@pytest.fixture
def synthesizer() -> JobSynthesizer:
    return JobSynthesizer(clock=fixed_clock)


@pytest.fixture
def ranker(search_gateway, synthesizer) -> SuggestionRanker:
    return SuggestionRanker(search_gateway, synthesizer, clock=fixed_clock)


@pytest.fixture
def service(archive_repository) -> ArchiveDrivenJobService:
    return ArchiveDrivenJobService(
        archive_repository, clock=fixed_clock, search_timeout_seconds=1.0
    )


@pytest.fixture
def bracket_suggestion(ranker, bracket_archive) -> ArchiveDrivenJobSuggestion:
    """Suggestion for the bracket archive with both optimizations."""
    item = OrderItemFactory.create()
    similarity = SimilarityScorer.score(item, bracket_archive)
    return ranker.build_suggestion(item, bracket_archive, similarity, None, NOW)
