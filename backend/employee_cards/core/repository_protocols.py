"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions are never async themselves
"""

from typing import Protocol


class StorageSlot(Protocol):
    """Durable named key-value slot holding one serialized value per key."""
    async def read(self, key: str) -> str | None: ...
    async def write(self, key: str, value: str) -> None: ...


class ImageEditor(Protocol):
    """Turns a source image into one fixed-size embedded image (data URL).

    crop is (left, top, width, height) in source pixels, or None for a
    centred square. Raises ImageEditError for undecodable input.
    """
    async def edit(
        self, source: bytes, crop: tuple[int, int, int, int] | None = None,
    ) -> str: ...
