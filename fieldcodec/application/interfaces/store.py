"""Document store interface (port) used by the store-side converters.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
No infrastructure imports.
"""

from __future__ import annotations

from typing import Any, Protocol


class IDocumentStore(Protocol):
    """Protocol for the backing document store."""

    async def get(self, path: str) -> dict[str, Any] | None:
        """Return the document's native fields, or None if it does not exist."""

    async def set(self, path: str, data: dict[str, Any], merge: bool = False) -> None:
        """Write native fields; merge=True updates only the given paths."""

    def resolve_reference(self, path: str) -> Any:
        """Return the store's reference object for a document path."""
