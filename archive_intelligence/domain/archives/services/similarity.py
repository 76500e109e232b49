"""
Similarity Scoring

Scores how closely a new order item resembles an archived job, as a
weighted blend of part name, material, quantity and process overlap.
"""

from collections.abc import Iterable

from ..entities.archive import JobArchive
from ..value_objects.order import OrderItem

PART_NAME_WEIGHT = 0.4
MATERIAL_WEIGHT = 0.2
QUANTITY_WEIGHT = 0.2
PROCESS_WEIGHT = 0.2


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum single-character edits turning ``a`` into ``b``."""
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            substitution = previous[j - 1] + (char_a != char_b)
            current.append(min(current[j - 1] + 1, previous[j] + 1, substitution))
        previous = current
    return previous[-1]


def string_similarity(a: str | None, b: str | None) -> float:
    """
    Case-insensitive normalized edit-distance similarity.

    Returns:
        0-100, where two empty strings are a vacuous perfect match
    """
    a = (a or "").lower()
    b = (b or "").lower()
    longest = max(len(a), len(b))
    if longest == 0:
        return 100.0
    return (longest - levenshtein_distance(a, b)) / longest * 100


def quantity_similarity(a: int | None, b: int | None) -> float:
    """Linear min/max ratio (0-1); 0 when either quantity is absent."""
    if not a or not b or a <= 0 or b <= 0:
        return 0.0
    return min(a, b) / max(a, b)


def process_overlap(a: Iterable[str], b: Iterable[str]) -> float:
    """Jaccard overlap of two process-name sets, 0-100."""
    set_a = {name.strip().casefold() for name in a if name.strip()}
    set_b = {name.strip().casefold() for name in b if name.strip()}
    if not set_a and not set_b:
        return 100.0
    if not set_a or not set_b:
        return 0.0
    return len(set_a & set_b) / len(set_a | set_b) * 100


class SimilarityScorer:
    """Domain service scoring one order item against one archive."""

    @staticmethod
    def score(order_item: OrderItem, archive: JobArchive) -> float:
        """
        Weighted similarity between an order item and an archived job.

        Args:
            order_item: New order line item
            archive: Candidate archived job

        Returns:
            Similarity score clamped to 0-100
        """
        snapshot = archive.job_snapshot

        similarity = (
            string_similarity(order_item.display_name, snapshot.part_name)
            * PART_NAME_WEIGHT
        )
        similarity += (
            string_similarity(order_item.material, snapshot.material)
            * MATERIAL_WEIGHT
        )
        similarity += (
            quantity_similarity(order_item.quantity, snapshot.quantity)
            * 100
            * QUANTITY_WEIGHT
        )
        similarity += (
            process_overlap(
                order_item.assigned_processes, snapshot.assigned_processes
            )
            * PROCESS_WEIGHT
        )

        return max(0.0, min(100.0, similarity))
