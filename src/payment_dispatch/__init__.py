"""payment-dispatch - Payment variants processed through one dispatcher.

Build records with a PaymentFactory (or build_dispatcher() for the default
wiring) and run them with RunTransactionUseCase.
"""

from payment_dispatch.application.payment_factory import PaymentFactory
from payment_dispatch.application.registry import PaymentKindRegistry
from payment_dispatch.application.use_cases import (
    RunTransactionUseCase,
    TransactionResult,
    TransactionStatus,
)
from payment_dispatch.domain.entities import (
    CashPayment,
    CreditCardPayment,
    Payment,
    PayPalPayment,
)
from payment_dispatch.infrastructure.bootstrap import Dispatcher, build_dispatcher

__all__ = [
    "CashPayment",
    "CreditCardPayment",
    "Dispatcher",
    "PayPalPayment",
    "Payment",
    "PaymentFactory",
    "PaymentKindRegistry",
    "RunTransactionUseCase",
    "TransactionResult",
    "TransactionStatus",
    "build_dispatcher",
]
