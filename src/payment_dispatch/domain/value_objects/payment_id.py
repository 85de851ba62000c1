from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True, slots=True)
class PaymentId:
    """Identity of one payment record.

    Generated by Payment.create(); carried on the ProcessingOutcome and
    TransactionResult and printed in dispatcher log lines so all three
    can be matched up.
    """

    value: UUID

    @classmethod
    def generate(cls) -> PaymentId:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)
