"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Time Provider: Clock abstraction for testability
- Transaction Output: Console and in-memory sinks for dispatcher output
- Config & Logging: Settings loading and log handler setup
- Bootstrap: Composition root wiring everything together

Infrastructure adapters implement the ports defined in the application layer.
"""

from payment_dispatch.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider
from payment_dispatch.infrastructure.transaction_output import (
    ConsoleTransactionOutput,
    InMemoryTransactionOutput,
)

__all__ = [
    "ConsoleTransactionOutput",
    "FixedTimeProvider",
    "InMemoryTransactionOutput",
    "SystemTimeProvider",
]
