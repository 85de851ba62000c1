"""Value objects - Immutable objects defined by their attributes."""

from payment_dispatch.domain.value_objects.payer import Payer
from payment_dispatch.domain.value_objects.payment_id import PaymentId
from payment_dispatch.domain.value_objects.processing_outcome import (
    OutcomeStatus,
    ProcessingOutcome,
)
from payment_dispatch.domain.value_objects.timestamp import require_utc

__all__ = [
    "OutcomeStatus",
    "Payer",
    "PaymentId",
    "ProcessingOutcome",
    "require_utc",
]
