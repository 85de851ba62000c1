"""Domain layer - Payment variants, value objects and domain errors.

This layer contains:
- Entities: The payment variants (credit card, PayPal, cash) and their base
- Value Objects: Immutable objects defined by their attributes (e.g., Payer, PaymentId)
- Domain Exceptions: Validation, registry and processing errors

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
