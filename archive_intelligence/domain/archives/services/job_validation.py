"""
Job Creation Validator

Checks order data before a job is created. Blocking problems are reported
as errors, advisory ones as warnings; nothing here raises.
"""

from collections.abc import Callable, Iterable
from datetime import datetime, timedelta

from ....core.config import settings
from ....core.observability import get_logger
from ...shared.base import utc_now
from ..value_objects.analysis import JobCreationValidationResult
from ..value_objects.order import JobCreationOrderData

logger = get_logger(__name__)

SHORT_LEAD_TIME = timedelta(days=7)
LARGE_QUANTITY = 1000


class JobCreationValidator:
    """Domain service validating order data for job creation."""

    def __init__(
        self,
        known_processes: Iterable[str] | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._known_processes = frozenset(
            known_processes if known_processes is not None else settings.KNOWN_PROCESSES
        )
        self._clock = clock

    def validate(self, order_data: JobCreationOrderData) -> JobCreationValidationResult:
        """
        Validate order data for job creation.

        Args:
            order_data: Order header and the item to be manufactured

        Returns:
            Validation result; ``is_valid`` is False when any error was found
        """
        errors: list[str] = []
        warnings: list[str] = []
        item = order_data.item

        if not order_data.order_id:
            errors.append("Order ID is required")
        if not order_data.order_number:
            errors.append("Order Number is required")
        if not order_data.client_name:
            errors.append("Client Name is required")
        if not item.part_name:
            errors.append("Part Name is required")

        if not item.assigned_processes:
            errors.append("At least one manufacturing process must be assigned")
        else:
            unknown = [p for p in item.assigned_processes if p not in self._known_processes]
            if unknown:
                warnings.append(f"Unknown processes: {', '.join(unknown)}")

        if order_data.due_date is not None:
            now = self._clock()
            if order_data.due_date < now:
                errors.append("Due date cannot be in the past")
            elif order_data.due_date - now < SHORT_LEAD_TIME:
                warnings.append(
                    "Due date is less than 7 days away - may be challenging to meet"
                )

        if item.quantity is None or item.quantity <= 0:
            errors.append("Quantity must be greater than 0")
        elif item.quantity > LARGE_QUANTITY:
            warnings.append("Large quantity order - consider creating multiple lots")

        result = JobCreationValidationResult(
            is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings)
        )
        if not result.is_valid:
            logger.info(
                "Job creation data rejected",
                order_id=order_data.order_id,
                error_count=len(errors),
                warning_count=len(warnings),
            )
        return result
