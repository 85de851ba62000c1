from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from payment_dispatch.application.registry import PaymentKindRegistry

if TYPE_CHECKING:
    from decimal import Decimal

    from payment_dispatch.application.ports import TimeProvider
    from payment_dispatch.domain.entities import Payment
    from payment_dispatch.domain.value_objects import Payer

logger = logging.getLogger(__name__)


class PaymentFactory:
    """Builds payment records of any registered kind.

    Responsibilities:
    - Resolve the variant class from the registry
    - Stamp the record with the injected clock (one now() call per record)
    - Optionally check the kind-specific payload shape

    The factory never keeps the records it builds.
    """

    def __init__(
        self,
        time_provider: TimeProvider,
        registry: PaymentKindRegistry | None = None,
        validate_details: bool = True,
    ) -> None:
        self._time_provider = time_provider
        self._registry = registry if registry is not None else PaymentKindRegistry.with_defaults()
        self._validate_details = validate_details

    @property
    def registry(self) -> PaymentKindRegistry:
        return self._registry

    def create(
        self,
        kind: str,
        amount: Decimal | int | float | str,
        payer: Payer | str,
        **details: Any,
    ) -> Payment:
        """Construct a payment record of the given kind.

        Args:
            kind: Registered kind, e.g. "credit_card", "paypal", "cash".
            amount: Monetary quantity, greater than 0.
            payer: Identifier of the paying party.
            **details: Kind-specific payload (card_number, email, ...).

        Returns:
            The new, immutable payment record.

        Raises:
            UnknownPaymentKindError: No variant registered under kind.
            InvalidAmountError: Amount is not a finite number > 0.
            InvalidPayerError: Payer is empty.
            InvalidPaymentDetailsError: Payload missing, unexpected or malformed.
        """
        payment_cls = self._registry.get(kind)
        payment = payment_cls.create(
            amount=amount,
            payer=payer,
            created_at=self._time_provider.now(),
            **details,
        )

        if self._validate_details:
            payment.validate_details()

        logger.debug(
            "Created %s payment %s for %s (%s)",
            payment.kind,
            payment.id,
            payment.payer,
            payment.details(),
        )
        return payment

    def credit_card(
        self, amount: Decimal | int | float | str, payer: Payer | str, card_number: str
    ) -> Payment:
        return self.create("credit_card", amount, payer, card_number=card_number)

    def paypal(self, amount: Decimal | int | float | str, payer: Payer | str, email: str) -> Payment:
        return self.create("paypal", amount, payer, email=email)

    def cash(self, amount: Decimal | int | float | str, payer: Payer | str) -> Payment:
        return self.create("cash", amount, payer)
