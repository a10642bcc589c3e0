"""Port for computing asset checksums."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ChecksumService(Protocol):
    """Computes the MD5 of a remote asset; each call may fail independently."""

    async def compute_md5(self, url: str) -> str: ...


__all__ = ["ChecksumService"]
