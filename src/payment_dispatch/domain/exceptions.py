"""Domain exceptions for payment-dispatch.

Exception hierarchy:
    DomainException (base)
    ├── Validation Errors
    │   ├── InvalidAmountError
    │   ├── InvalidPayerError
    │   └── InvalidPaymentDetailsError
    ├── Registry Errors
    │   ├── UnknownPaymentKindError
    │   └── DuplicatePaymentKindError
    └── Processing Errors
        └── ProcessingFailureError (recovered by the dispatcher)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_dispatch.domain.value_objects.payment_id import PaymentId


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidAmountError(DomainException):
    """Raised when a payment amount fails validation.

    The amount must be a finite number greater than 0.
    """


class InvalidPayerError(DomainException):
    """Raised when a payer identifier is empty or too long."""


class InvalidPaymentDetailsError(DomainException):
    """Raised when the kind-specific payload is missing or malformed.

    Examples:
        - card number that is not 12-19 digits
        - PayPal email without a domain
        - unexpected keyword passed to a variant factory
    """


# =============================================================================
# Registry Errors
# =============================================================================


class UnknownPaymentKindError(DomainException):
    """Raised when no payment variant is registered under a kind."""


class DuplicatePaymentKindError(DomainException):
    """Raised when a different class is registered under an existing kind.

    Re-registering the same class is allowed and has no effect.
    """


# =============================================================================
# Processing Errors
# =============================================================================


class ProcessingFailureError(DomainException):
    """Raised by a variant's process() when the payment cannot be processed.

    This is a RECOVERABLE error: the transaction dispatcher reports it as a
    failed transaction and does not emit the completion marker. It never
    terminates the caller.
    """

    def __init__(self, payment_id: PaymentId, reason: str) -> None:
        super().__init__(f"Processing failed for payment {payment_id.value}: {reason}")
        self.payment_id = payment_id
        self.reason = reason
