"""Composition root: wires adapters and settings into the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from payment_dispatch.application.payment_factory import PaymentFactory
from payment_dispatch.application.registry import PaymentKindRegistry
from payment_dispatch.application.use_cases import RunTransactionUseCase
from payment_dispatch.infrastructure.config import get_settings
from payment_dispatch.infrastructure.logging import configure_logging
from payment_dispatch.infrastructure.time_provider import SystemTimeProvider
from payment_dispatch.infrastructure.transaction_output import ConsoleTransactionOutput

if TYPE_CHECKING:
    from decimal import Decimal

    from payment_dispatch.application.ports import TimeProvider, TransactionOutput
    from payment_dispatch.application.use_cases import TransactionResult
    from payment_dispatch.infrastructure.config import Settings


@dataclass(frozen=True, slots=True)
class Dispatcher:
    """A payment factory and the transaction use case sharing one setup."""

    factory: PaymentFactory
    run_transaction: RunTransactionUseCase

    def submit(
        self,
        kind: str,
        amount: Decimal | int | float | str,
        payer: str,
        **details: Any,
    ) -> TransactionResult:
        """Build a payment of the given kind and run it immediately."""
        payment = self.factory.create(kind, amount, payer, **details)
        return self.run_transaction.execute(payment)


def build_dispatcher(
    settings: Settings | None = None,
    output: TransactionOutput | None = None,
    time_provider: TimeProvider | None = None,
    registry: PaymentKindRegistry | None = None,
) -> Dispatcher:
    """Build a Dispatcher from settings.

    Defaults: cached settings, console output, system clock and the
    built-in payment kinds.
    """
    settings = settings if settings is not None else get_settings()
    configure_logging(settings)

    factory = PaymentFactory(
        time_provider=time_provider if time_provider is not None else SystemTimeProvider(),
        registry=registry,
        validate_details=settings.validate_details,
    )
    use_case = RunTransactionUseCase(
        output=output if output is not None else ConsoleTransactionOutput()
    )
    return Dispatcher(factory=factory, run_transaction=use_case)
