"""Payment variants sharing one processing contract.

Every variant carries the same base record (id, amount, payer, created_at)
plus its own payload, and knows how to describe and process itself. Callers
depend only on that capability set, never on the concrete class.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import MISSING, dataclass, fields
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any, ClassVar

from payment_dispatch.domain.exceptions import (
    InvalidAmountError,
    InvalidPayerError,
    InvalidPaymentDetailsError,
)
from payment_dispatch.domain.value_objects import (
    Payer,
    PaymentId,
    ProcessingOutcome,
    require_utc,
)

if TYPE_CHECKING:
    from datetime import datetime

BASE_FIELDS = frozenset({"id", "amount", "payer", "created_at"})

CARD_NUMBER_SEPARATORS = re.compile(r"[\s-]")
CARD_NUMBER_DIGITS = re.compile(r"\d{12,19}")
EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


def parse_amount(amount: Decimal | int | float | str) -> Decimal:
    """Normalize an amount to Decimal.

    Floats go through str() so 100.0 becomes Decimal("100.0") rather
    than its binary expansion. The Decimal keeps that string's digits
    and exponent; use format_amount() to render it.

    Raises:
        InvalidAmountError: If the amount is not a finite number > 0.
    """
    if isinstance(amount, bool) or not isinstance(amount, (Decimal, int, float, str)):
        raise InvalidAmountError(f"Amount must be numeric, got {type(amount).__name__}")

    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation as e:
        raise InvalidAmountError(f"Amount is not a number: {amount!r}") from e

    if not value.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {amount!r}")

    if value <= 0:
        raise InvalidAmountError(f"Amount must be greater than 0, got {value}")

    return value


def format_amount(amount: Decimal) -> str:
    """Render an amount in plain positional notation, e.g. 1E+16 as 10000000000000000."""
    return format(amount, "f")


@dataclass(frozen=True, slots=True)
class Payment(ABC):
    """Base record for one transaction attempt.

    Payment is immutable (frozen dataclass): amount, payer and created_at
    are fixed at construction. Use the create() factory method on a
    concrete variant to construct instances with validation.

    Subclasses set two class attributes:
        kind:  registry key, e.g. "credit_card"
        label: human-readable name used in messages, e.g. "Credit Card"
    """

    kind: ClassVar[str]
    label: ClassVar[str]

    id: PaymentId
    amount: Decimal
    payer: Payer
    created_at: datetime

    @classmethod
    def create(
        cls,
        amount: Decimal | int | float | str,
        payer: Payer | str,
        created_at: datetime,
        **details: Any,
    ) -> Payment:
        """Factory method to create a payment variant with validation.

        Args:
            amount: Monetary quantity, greater than 0.
            payer: Identifier of the paying party.
            created_at: Timestamp of record creation (UTC).
            **details: Kind-specific payload (e.g. card_number, email).

        Returns:
            A new instance of the concrete variant.

        Raises:
            InvalidAmountError: If amount is not a finite number > 0.
            InvalidPayerError: If payer is empty.
            InvalidPaymentDetailsError: If payload keywords are missing or unexpected.
            ValueError: If created_at is not a UTC datetime.
        """
        require_utc(created_at, "created_at")

        expected = cls.detail_fields()
        missing = cls.required_detail_fields() - details.keys()
        unexpected = details.keys() - expected
        if missing or unexpected:
            raise InvalidPaymentDetailsError(
                f"{cls.label} payment expects details {sorted(expected)}; "
                f"missing={sorted(missing)}, unexpected={sorted(unexpected)}"
            )

        return cls(
            id=PaymentId.generate(),
            amount=parse_amount(amount),
            payer=payer if isinstance(payer, Payer) else Payer(payer),
            created_at=created_at,
            **details,
        )

    @classmethod
    def detail_fields(cls) -> frozenset[str]:
        """Names of the kind-specific payload fields."""
        return frozenset(f.name for f in fields(cls)) - BASE_FIELDS

    @classmethod
    def required_detail_fields(cls) -> frozenset[str]:
        """Payload fields without a default; create() must receive these."""
        return frozenset(
            f.name
            for f in fields(cls)
            if f.default is MISSING and f.default_factory is MISSING
        ) - BASE_FIELDS

    def describe(self) -> str:
        """Return a summary with amount, payer and creation time."""
        return (
            f"{self.label} payment of ${format_amount(self.amount)} from {self.payer} "
            f"at {self.created_at.isoformat()}"
        )

    @abstractmethod
    def process(self) -> ProcessingOutcome:
        """Perform the kind-specific processing action.

        Returns:
            The outcome, whose message is the line to report.

        Raises:
            ProcessingFailureError: If the payment cannot be processed.
        """

    def validate_details(self) -> None:
        """Check the shape of the kind-specific payload.

        Raises:
            InvalidPaymentDetailsError: If the payload is malformed.
        """

    def details(self) -> dict[str, str]:
        """Kind-specific payload safe to log."""
        return {}

    def _processing_message(self) -> str:
        amount = format_amount(self.amount)
        return f"Processing {self.label} payment of ${amount} from {self.payer}"


@dataclass(frozen=True, slots=True)
class CreditCardPayment(Payment):
    """Card payment. The card number never appears in messages or logs."""

    kind: ClassVar[str] = "credit_card"
    label: ClassVar[str] = "Credit Card"

    card_number: str

    def process(self) -> ProcessingOutcome:
        return ProcessingOutcome.success(self.id, self.kind, self._processing_message())

    def validate_details(self) -> None:
        if not isinstance(self.card_number, str):
            raise InvalidPaymentDetailsError("Card number must be a string")

        digits = CARD_NUMBER_SEPARATORS.sub("", self.card_number)
        if not CARD_NUMBER_DIGITS.fullmatch(digits):
            raise InvalidPaymentDetailsError("Card number must contain 12 to 19 digits")

    def details(self) -> dict[str, str]:
        digits = CARD_NUMBER_SEPARATORS.sub("", str(self.card_number))
        return {"card_last4": digits[-4:]}


@dataclass(frozen=True, slots=True)
class PayPalPayment(Payment):
    kind: ClassVar[str] = "paypal"
    label: ClassVar[str] = "PayPal"

    email: str

    def process(self) -> ProcessingOutcome:
        return ProcessingOutcome.success(
            self.id, self.kind, f"{self._processing_message()} via {self.email}"
        )

    def validate_details(self) -> None:
        if not isinstance(self.email, str) or not EMAIL_PATTERN.fullmatch(self.email):
            raise InvalidPaymentDetailsError(f"Invalid PayPal email: {self.email!r}")

    def details(self) -> dict[str, str]:
        return {"email": self.email}


@dataclass(frozen=True, slots=True)
class CashPayment(Payment):
    kind: ClassVar[str] = "cash"
    label: ClassVar[str] = "Cash"

    def process(self) -> ProcessingOutcome:
        return ProcessingOutcome.success(self.id, self.kind, self._processing_message())
