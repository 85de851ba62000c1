"""Shared pytest fixtures for the test suite."""

from datetime import UTC, datetime

import pytest

from payment_dispatch.application.payment_factory import PaymentFactory
from payment_dispatch.application.use_cases import RunTransactionUseCase
from payment_dispatch.infrastructure.time_provider import FixedTimeProvider
from payment_dispatch.infrastructure.transaction_output import InMemoryTransactionOutput


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def output() -> InMemoryTransactionOutput:
    """Captures dispatcher output lines."""
    return InMemoryTransactionOutput()


@pytest.fixture
def factory(time_provider: FixedTimeProvider) -> PaymentFactory:
    return PaymentFactory(time_provider=time_provider)


@pytest.fixture
def use_case(output: InMemoryTransactionOutput) -> RunTransactionUseCase:
    return RunTransactionUseCase(output=output)
