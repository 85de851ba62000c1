from __future__ import annotations

import logging
from typing import TypeVar

from payment_dispatch.domain.entities import (
    CashPayment,
    CreditCardPayment,
    Payment,
    PayPalPayment,
)
from payment_dispatch.domain.exceptions import (
    DuplicatePaymentKindError,
    UnknownPaymentKindError,
)

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=type[Payment])

DEFAULT_VARIANTS: tuple[type[Payment], ...] = (CreditCardPayment, PayPalPayment, CashPayment)


class PaymentKindRegistry:
    """Maps kind strings to payment variant classes.

    The built-in variants form the default set; third parties add new kinds
    by registering a Payment subclass, without touching the dispatcher:

        registry = PaymentKindRegistry.with_defaults()

        @registry.register
        @dataclass(frozen=True, slots=True)
        class GiftCardPayment(Payment):
            kind: ClassVar[str] = "gift_card"
            ...

    Registration order is preserved by kinds().
    """

    def __init__(self) -> None:
        self._variants: dict[str, type[Payment]] = {}

    @classmethod
    def with_defaults(cls) -> PaymentKindRegistry:
        """Registry preloaded with credit card, PayPal and cash."""
        registry = cls()
        for variant in DEFAULT_VARIANTS:
            registry.register(variant)
        return registry

    def register(self, payment_cls: P) -> P:
        """Register a variant class under its kind.

        Returns the class unchanged so this can be used as a decorator.

        Raises:
            TypeError: If payment_cls is not a Payment subclass or has no kind.
            DuplicatePaymentKindError: If another class already owns the kind.
        """
        if not isinstance(payment_cls, type) or not issubclass(payment_cls, Payment):
            raise TypeError(f"Expected a Payment subclass, got {payment_cls!r}")

        kind = getattr(payment_cls, "kind", None)
        if not isinstance(kind, str) or not kind:
            raise TypeError(f"{payment_cls.__name__} must define a non-empty 'kind'")

        existing = self._variants.get(kind)
        if existing is payment_cls:
            return payment_cls
        if existing is not None:
            raise DuplicatePaymentKindError(
                f"Payment kind '{kind}' is already registered to {existing.__name__}"
            )

        self._variants[kind] = payment_cls
        logger.debug("Registered payment kind %s -> %s", kind, payment_cls.__name__)
        return payment_cls

    def get(self, kind: str) -> type[Payment]:
        """Return the variant class registered under kind.

        Raises:
            UnknownPaymentKindError: If nothing is registered under kind.
        """
        try:
            return self._variants[kind]
        except KeyError:
            raise UnknownPaymentKindError(
                f"Unknown payment kind '{kind}'; registered: {', '.join(self._variants) or 'none'}"
            ) from None

    def kinds(self) -> list[str]:
        return list(self._variants)

    def __contains__(self, kind: object) -> bool:
        return kind in self._variants

    def __len__(self) -> int:
        return len(self._variants)
