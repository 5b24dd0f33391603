"""Explicit result values shared by the service layer.

Look-ups never return ``None`` to the HTTP layer: an absent entity is
reported as a ``NotFound`` value that callers must check for.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NotFound:
    """The entity addressed by ``id`` does not exist."""

    resource: str
    id: object

    def __str__(self) -> str:
        return f"{self.resource} {self.id} not found."
