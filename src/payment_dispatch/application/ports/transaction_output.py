from __future__ import annotations

from abc import ABC, abstractmethod


class TransactionOutput(ABC):
    """Port for the dispatcher's textual output.

    Contract:
    - write_line() receives one line without a trailing newline
    - Lines MUST be emitted in the order received
    - An empty string is a blank separator line and MUST be kept

    Diagnostic logging never goes through this port; it carries only
    the transaction markers and processing messages.
    """

    @abstractmethod
    def write_line(self, line: str) -> None:
        """Emit a single line of transaction output."""
        ...
