"""Per-render writer adapter with first-error short-circuiting.

A ``StatefulWriter`` sits between a node tree and the real output sink
for the duration of one top-level ``render`` call.  The first ``OSError``
raised by the sink is recorded; every later write is silently dropped so
that a broken connection does not receive a cascade of further writes.
After the traversal the caller re-raises the recorded error with
``raise_for_error``.

The adapter is itself a sink (it has ``write``), so render callbacks and
third-party nodes that only know about ``write`` participate in the
short-circuit without any changes.
"""
from __future__ import annotations

from typing import Protocol


class Sink(Protocol):
    """Anything that accepts bytes, e.g. a binary file or ``io.BytesIO``."""

    def write(self, data: bytes, /) -> object: ...


class StatefulWriter:
    """Write to ``sink`` until the first error, then stop.

    Parameters
    ----------
    sink:
        The underlying binary sink.
    """

    __slots__ = ("_sink", "error")

    def __init__(self, sink: Sink) -> None:
        self._sink = sink
        self.error: OSError | None = None

    @property
    def sink(self) -> Sink:
        """The wrapped sink."""
        return self._sink

    @property
    def failed(self) -> bool:
        """Return True once a write error has been recorded."""
        return self.error is not None

    def write(self, data: bytes | str) -> None:
        """Write ``data`` (text is UTF-8 encoded) unless a previous write failed."""
        if self.error is not None or not data:
            return
        if isinstance(data, str):
            data = data.encode("utf-8")
        try:
            self._sink.write(data)
        except OSError as exc:
            self.error = exc

    def record(self, error: OSError) -> None:
        """Record ``error`` if no earlier error is known."""
        if self.error is None:
            self.error = error

    def raise_for_error(self) -> None:
        """Re-raise the recorded error, if any, unchanged."""
        if self.error is not None:
            raise self.error
