"""Boundary Protocols: contracts between core/services and external backends.

Invariants:
    - Services depend on these Protocols, never on a concrete SDK client
    - Implementations provided by infrastructure via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping lets tests pass a plain fake
"""

from typing import Protocol


class ImageStorage(Protocol):
    """Contract for listing-photo object storage: implemented by infrastructure."""
    bucket: str

    async def upload(
        self, object_path: str, data: bytes, content_type: str,
    ) -> str: ...

    async def remove(self, object_paths: list[str]) -> None: ...
