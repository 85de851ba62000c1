from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_dispatch.domain.value_objects.payment_id import PaymentId


class OutcomeStatus(Enum):
    """Result of invoking a variant's process behavior."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ProcessingOutcome:
    """What a payment variant reports after processing itself.

    The message is the human-readable line the dispatcher writes between
    its start and completion markers. For a failed outcome it holds the
    failure reason instead.
    """

    payment_id: PaymentId
    kind: str
    status: OutcomeStatus
    message: str

    @classmethod
    def success(cls, payment_id: PaymentId, kind: str, message: str) -> ProcessingOutcome:
        return cls(
            payment_id=payment_id,
            kind=kind,
            status=OutcomeStatus.SUCCEEDED,
            message=message,
        )

    @classmethod
    def failure(cls, payment_id: PaymentId, kind: str, reason: str) -> ProcessingOutcome:
        return cls(
            payment_id=payment_id,
            kind=kind,
            status=OutcomeStatus.FAILED,
            message=reason,
        )

    @property
    def succeeded(self) -> bool:
        return self.status is OutcomeStatus.SUCCEEDED
