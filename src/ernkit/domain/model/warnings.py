"""Typed, non-fatal warnings returned alongside generated messages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class WarningKind(StrEnum):
    CHECKSUM_FAILED = "checksum_failed"
    CHECKSUM_PENDING = "checksum_pending"
    UNMAPPED_ROLE = "unmapped_role"
    CONTRIBUTOR_VALIDATION = "contributor_validation"
    OVERRIDE_REJECTED = "override_rejected"


@dataclass(frozen=True, slots=True)
class GenerationWarning:
    kind: WarningKind
    message: str
    subject: str | None = None

    def __str__(self) -> str:
        return self.message
