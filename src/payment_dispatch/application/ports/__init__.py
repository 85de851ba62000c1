"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from payment_dispatch.application.ports.time_provider import TimeProvider
from payment_dispatch.application.ports.transaction_output import TransactionOutput

__all__ = [
    "TimeProvider",
    "TransactionOutput",
]
