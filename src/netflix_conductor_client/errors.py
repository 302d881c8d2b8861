"""Exceptions raised by the service façades.

HTTP failures are not wrapped: ``requests.HTTPError`` (and the other
``requests.RequestException`` subclasses) reach the caller unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ReadBackMismatch(Exception):
    """Raised when a read-after-write check returns a different resource.

    Attributes:
        kind: Resource family, e.g. ``"task"``, ``"workflow definition"``.
        expected: Identity that was just written (name or workflow id).
        actual: Identity returned by the confirming read, ``None`` if nothing came back.
    """

    kind: str
    expected: str
    actual: str | None

    def __str__(self) -> str:
        return (
            f"Wrote {self.kind} {self.expected!r} but read-back returned "
            f"{self.actual!r}"
        )
