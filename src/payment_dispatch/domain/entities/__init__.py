"""Domain entities - Payment variants and their shared base."""

from payment_dispatch.domain.entities.payment import (
    CashPayment,
    CreditCardPayment,
    Payment,
    PayPalPayment,
)

__all__ = [
    "CashPayment",
    "CreditCardPayment",
    "PayPalPayment",
    "Payment",
]
