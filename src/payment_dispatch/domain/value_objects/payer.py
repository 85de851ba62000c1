from __future__ import annotations

from dataclasses import dataclass

from payment_dispatch.domain.exceptions import InvalidPayerError

MAX_LENGTH = 128


@dataclass(frozen=True)
class Payer:
    """Domain value object for the paying party's identifier.

    Rules:
      - Whitespace is trimmed (normalization)
      - Non-empty after trimming, max 128 chars
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidPayerError(f"Payer must be a string, got {type(self.value).__name__}")

        normalized = self.value.strip()

        if normalized != self.value:
            object.__setattr__(self, "value", normalized)

        if not normalized:
            raise InvalidPayerError("Payer cannot be empty")

        if len(normalized) > MAX_LENGTH:
            raise InvalidPayerError(f"Payer cannot exceed {MAX_LENGTH} characters")

    def __str__(self) -> str:
        return self.value
