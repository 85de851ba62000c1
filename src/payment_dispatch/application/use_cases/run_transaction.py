from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from payment_dispatch.domain.exceptions import ProcessingFailureError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from payment_dispatch.application.ports import TransactionOutput
    from payment_dispatch.domain.entities import Payment
    from payment_dispatch.domain.value_objects import PaymentId, ProcessingOutcome

logger = logging.getLogger(__name__)

START_MARKER = "Initiating transaction..."
COMPLETED_MARKER = "Transaction completed."
FAILED_PREFIX = "Transaction failed: "
SEPARATOR = ""


class TransactionStatus(Enum):
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class TransactionResult:
    """Output DTO for the run transaction use case."""

    payment_id: PaymentId
    kind: str
    status: TransactionStatus
    outcome: ProcessingOutcome | None  # None if process() raised
    error: str | None = None

    @property
    def completed(self) -> bool:
        return self.status is TransactionStatus.COMPLETED


class RunTransactionUseCase:
    """Dispatches one payment through its own processing behavior.

    Output per call, in order:
        "Initiating transaction..."
        <the variant's processing message>
        "Transaction completed."   (or "Transaction failed: <reason>")
        ""                         (blank separator)

    The use case relies only on Payment.process(); it never branches on
    the concrete variant. No state is kept between calls.
    """

    def __init__(self, output: TransactionOutput) -> None:
        self._output = output

    def execute(self, payment: Payment) -> TransactionResult:
        """Run a single transaction.

        Args:
            payment: Any payment variant.

        Returns:
            TransactionResult; FAILED when processing failed.

        A ProcessingFailureError (or a failed outcome) is reported on the
        output and in the result, never re-raised. Any other exception
        propagates after the start marker has been written.
        """
        logger.info("Starting %s transaction %s", payment.kind, payment.id)
        self._output.write_line(START_MARKER)

        try:
            outcome = payment.process()
        except ProcessingFailureError as e:
            return self._fail(payment, outcome=None, reason=e.reason)

        if not outcome.succeeded:
            return self._fail(payment, outcome=outcome, reason=outcome.message)

        self._output.write_line(outcome.message)
        self._output.write_line(COMPLETED_MARKER)
        self._output.write_line(SEPARATOR)
        logger.info("Completed %s transaction %s", payment.kind, payment.id)

        return TransactionResult(
            payment_id=payment.id,
            kind=payment.kind,
            status=TransactionStatus.COMPLETED,
            outcome=outcome,
        )

    def run_all(self, payments: Iterable[Payment]) -> list[TransactionResult]:
        """Run transactions sequentially, in submission order."""
        return [self.execute(payment) for payment in payments]

    def _fail(
        self,
        payment: Payment,
        outcome: ProcessingOutcome | None,
        reason: str,
    ) -> TransactionResult:
        self._output.write_line(f"{FAILED_PREFIX}{reason}")
        self._output.write_line(SEPARATOR)
        logger.warning("Transaction %s (%s) failed: %s", payment.id, payment.kind, reason)

        return TransactionResult(
            payment_id=payment.id,
            kind=payment.kind,
            status=TransactionStatus.FAILED,
            outcome=outcome,
            error=reason,
        )
