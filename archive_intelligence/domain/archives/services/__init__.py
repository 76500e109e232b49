"""
Domain Services

Stateless services implementing the archive-driven job creation rules.
Only ArchiveSearchGateway suspends; everything else is pure computation
over archives already in hand.
"""

from .archive_search import ArchiveSearchGateway
from .confidence import ConfidenceEstimator
from .job_synthesizer import JobSynthesizer
from .job_validation import JobCreationValidator
from .lot_service import LotCreationResult, LotJobRequest, LotJobService
from .optimization_engine import OptimizationEngine
from .performance_predictor import PerformancePredictor
from .process_inheritance import ProcessInheritanceResolver
from .risk_assessor import RiskAssessor
from .similarity import SimilarityScorer
from .suggestion_ranker import SuggestionRanker

__all__ = [
    "ArchiveSearchGateway",
    "ConfidenceEstimator",
    "JobCreationValidator",
    "JobSynthesizer",
    "LotCreationResult",
    "LotJobRequest",
    "LotJobService",
    "OptimizationEngine",
    "PerformancePredictor",
    "ProcessInheritanceResolver",
    "RiskAssessor",
    "SimilarityScorer",
    "SuggestionRanker",
]
