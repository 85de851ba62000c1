"""Tests for PaymentFactory.

Tests cover:
- Construction of each built-in kind through create() and the shortcuts
- Timestamps come from the injected TimeProvider
- Payload shape checks can be switched off
- Third-party kinds via a custom registry
- Card numbers never reach the logs
"""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal
from typing import ClassVar

import pytest

from payment_dispatch.application.payment_factory import PaymentFactory
from payment_dispatch.application.registry import PaymentKindRegistry
from payment_dispatch.domain.entities import (
    CashPayment,
    CreditCardPayment,
    Payment,
    PayPalPayment,
)
from payment_dispatch.domain.exceptions import (
    InvalidAmountError,
    InvalidPayerError,
    InvalidPaymentDetailsError,
    UnknownPaymentKindError,
)
from payment_dispatch.domain.value_objects import ProcessingOutcome
from payment_dispatch.infrastructure.time_provider import FixedTimeProvider


@dataclass(frozen=True, slots=True)
class BankTransferPayment(Payment):
    kind: ClassVar[str] = "bank_transfer"
    label: ClassVar[str] = "Bank Transfer"

    iban: str

    def process(self) -> ProcessingOutcome:
        return ProcessingOutcome.success(
            self.id, self.kind, f"{self._processing_message()} to {self.iban}"
        )


@dataclass(frozen=True, slots=True)
class GiftCardPayment(Payment):
    kind: ClassVar[str] = "gift_card"
    label: ClassVar[str] = "Gift Card"

    code: str
    note: str = ""

    def process(self) -> ProcessingOutcome:
        suffix = f" ({self.note})" if self.note else ""
        return ProcessingOutcome.success(
            self.id, self.kind, f"{self._processing_message()}{suffix}"
        )


class TestCreate:
    def test_creates_credit_card(self, factory: PaymentFactory) -> None:
        payment = factory.create("credit_card", 100.0, "Alice", card_number="1234-5678-9012-3456")

        assert isinstance(payment, CreditCardPayment)
        assert payment.amount == Decimal("100.0")
        assert str(payment.payer) == "Alice"

    def test_creates_paypal(self, factory: PaymentFactory) -> None:
        payment = factory.create("paypal", 50.0, "Bob", email="bob@example.com")

        assert isinstance(payment, PayPalPayment)
        assert payment.email == "bob@example.com"

    def test_creates_cash(self, factory: PaymentFactory) -> None:
        payment = factory.create("cash", 20.0, "Charlie")

        assert isinstance(payment, CashPayment)

    def test_shortcuts_match_create(self, factory: PaymentFactory) -> None:
        assert isinstance(factory.credit_card(1, "Alice", "4111111111111111"), CreditCardPayment)
        assert isinstance(factory.paypal(1, "Bob", "bob@example.com"), PayPalPayment)
        assert isinstance(factory.cash(1, "Charlie"), CashPayment)

    def test_default_registry_has_builtin_kinds(self, factory: PaymentFactory) -> None:
        assert factory.registry.kinds() == ["credit_card", "paypal", "cash"]


class TestTimestamps:
    def test_uses_injected_time(self, factory: PaymentFactory, fixed_time: datetime) -> None:
        payment = factory.cash(1, "Alice")

        assert payment.created_at == fixed_time

    def test_timestamp_is_fixed_at_construction(
        self, factory: PaymentFactory, time_provider: FixedTimeProvider, fixed_time: datetime
    ) -> None:
        payment = factory.cash(1, "Alice")
        time_provider.set_time(datetime(2030, 1, 1, tzinfo=UTC))

        assert payment.created_at == fixed_time
        assert factory.cash(1, "Alice").created_at == datetime(2030, 1, 1, tzinfo=UTC)


class TestValidation:
    def test_raises_for_unknown_kind(self, factory: PaymentFactory) -> None:
        with pytest.raises(UnknownPaymentKindError):
            factory.create("bitcoin", 1, "Alice")

    def test_raises_for_invalid_amount(self, factory: PaymentFactory) -> None:
        with pytest.raises(InvalidAmountError):
            factory.cash(0, "Alice")

    def test_raises_for_invalid_payer(self, factory: PaymentFactory) -> None:
        with pytest.raises(InvalidPayerError):
            factory.cash(1, "")

    def test_raises_for_malformed_card_number(self, factory: PaymentFactory) -> None:
        with pytest.raises(InvalidPaymentDetailsError):
            factory.credit_card(1, "Alice", "not-a-card")

    def test_raises_for_malformed_email(self, factory: PaymentFactory) -> None:
        with pytest.raises(InvalidPaymentDetailsError):
            factory.paypal(1, "Bob", "bob")

    def test_raises_for_missing_details(self, factory: PaymentFactory) -> None:
        with pytest.raises(InvalidPaymentDetailsError):
            factory.create("paypal", 1, "Bob")

    def test_shape_checks_can_be_disabled(self, time_provider: FixedTimeProvider) -> None:
        factory = PaymentFactory(time_provider=time_provider, validate_details=False)

        payment = factory.paypal(1, "Bob", "bob")

        assert isinstance(payment, PayPalPayment)

    def test_disabling_shape_checks_keeps_amount_validation(
        self, time_provider: FixedTimeProvider
    ) -> None:
        factory = PaymentFactory(time_provider=time_provider, validate_details=False)

        with pytest.raises(InvalidAmountError):
            factory.paypal(-5, "Bob", "bob")


class TestCustomRegistry:
    def test_creates_registered_third_party_kind(self, time_provider: FixedTimeProvider) -> None:
        registry = PaymentKindRegistry.with_defaults()
        registry.register(BankTransferPayment)
        factory = PaymentFactory(time_provider=time_provider, registry=registry)

        payment = factory.create("bank_transfer", 75, "Erin", iban="DE89370400440532013000")

        assert isinstance(payment, BankTransferPayment)
        assert payment.process().message == (
            "Processing Bank Transfer payment of $75 from Erin to DE89370400440532013000"
        )

    def test_defaulted_detail_field_is_optional(self, time_provider: FixedTimeProvider) -> None:
        registry = PaymentKindRegistry.with_defaults()
        registry.register(GiftCardPayment)
        factory = PaymentFactory(time_provider=time_provider, registry=registry)

        payment = factory.create("gift_card", 5, "Ann", code="ABC")

        assert isinstance(payment, GiftCardPayment)
        assert payment.note == ""
        assert payment.process().message == "Processing Gift Card payment of $5 from Ann"

    def test_defaulted_detail_field_can_be_given(self, time_provider: FixedTimeProvider) -> None:
        registry = PaymentKindRegistry.with_defaults()
        registry.register(GiftCardPayment)
        factory = PaymentFactory(time_provider=time_provider, registry=registry)

        payment = factory.create("gift_card", 5, "Ann", code="ABC", note="birthday")

        assert payment.process().message.endswith("(birthday)")

    def test_required_detail_field_still_enforced(self, time_provider: FixedTimeProvider) -> None:
        registry = PaymentKindRegistry.with_defaults()
        registry.register(GiftCardPayment)
        factory = PaymentFactory(time_provider=time_provider, registry=registry)

        with pytest.raises(InvalidPaymentDetailsError, match=r"missing=\['code'\]"):
            factory.create("gift_card", 5, "Ann", note="birthday")

    def test_unknown_detail_rejected_alongside_defaults(
        self, time_provider: FixedTimeProvider
    ) -> None:
        registry = PaymentKindRegistry.with_defaults()
        registry.register(GiftCardPayment)
        factory = PaymentFactory(time_provider=time_provider, registry=registry)

        with pytest.raises(InvalidPaymentDetailsError, match="pin"):
            factory.create("gift_card", 5, "Ann", code="ABC", pin="1234")

    def test_empty_registry_knows_no_kinds(self, time_provider: FixedTimeProvider) -> None:
        factory = PaymentFactory(time_provider=time_provider, registry=PaymentKindRegistry())

        with pytest.raises(UnknownPaymentKindError):
            factory.cash(1, "Alice")


class TestLogging:
    def test_logs_creation_without_card_number(
        self, factory: PaymentFactory, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="payment_dispatch"):
            factory.credit_card(1, "Alice", "1234-5678-9012-3456")

        assert "credit_card" in caplog.text
        assert "3456" in caplog.text
        assert "1234-5678" not in caplog.text
