from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from payment_dispatch.application.ports import TransactionOutput

if TYPE_CHECKING:
    from typing import TextIO


class ConsoleTransactionOutput(TransactionOutput):
    """Writes transaction lines to a text stream.

    When no stream is given, sys.stdout is looked up on every write so
    redirection (e.g. pytest's capsys) is honored.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write_line(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{line}\n")


class InMemoryTransactionOutput(TransactionOutput):
    """Collects transaction lines in memory for tests and embedding.

    NOT thread-safe; the dispatcher is strictly sequential.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    @property
    def lines(self) -> list[str]:
        """Copy of the lines written so far."""
        return list(self._lines)

    def clear(self) -> None:
        self._lines.clear()

    def write_line(self, line: str) -> None:
        self._lines.append(line)
