"""Use cases - Application workflows built on the domain and ports."""

from payment_dispatch.application.use_cases.run_transaction import (
    RunTransactionUseCase,
    TransactionResult,
    TransactionStatus,
)

__all__ = [
    "RunTransactionUseCase",
    "TransactionResult",
    "TransactionStatus",
]
