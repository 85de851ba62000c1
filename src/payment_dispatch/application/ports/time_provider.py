from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


class TimeProvider(ABC):
    """Port supplying the created_at stamp for new payment records.

    PaymentFactory reads now() exactly once per record; the record keeps
    that value for its whole life and shows it in describe().

    Contract:
    - now() MUST return a datetime with tzinfo=datetime.UTC
      (see domain.value_objects.require_utc); Payment.create() rejects
      anything else with ValueError
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the timestamp to stamp on the next payment record."""
        ...
