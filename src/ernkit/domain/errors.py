"""Error taxonomy raised by classification and ERN generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .model import Classification, Track


class ErnError(Exception):
    """Base class for every error raised by ernkit's core."""


class PreconditionViolation(ErnError):
    """Generation inputs are incomplete; nothing was built."""


class ReleaseValidationError(PreconditionViolation):
    """A release failed pre-generation validation.

    ``problems`` lists every issue found, not just the first one, and
    ``offending_tracks`` holds each track whose ISRC is missing or malformed.
    """

    def __init__(
        self,
        release_id: str,
        problems: Sequence[str],
        *,
        offending_tracks: Sequence[Track] = (),
    ) -> None:
        self.release_id = release_id
        self.problems = tuple(problems)
        self.offending_tracks = tuple(offending_tracks)
        details = "; ".join(self.problems)
        super().__init__(f"Release {release_id} cannot be delivered: {details}")


class InvalidClassificationError(PreconditionViolation):
    def __init__(self, release_id: str, classification: Classification) -> None:
        self.release_id = release_id
        self.classification = classification
        super().__init__(
            f"Release {release_id} has no valid classification: {classification.rationale}"
        )


class ErnPreconditionError(PreconditionViolation):
    """A builder was handed inputs that would produce invalid DDEX XML."""


class UnsupportedErnVersionError(ErnError, ValueError):
    def __init__(self, version: object) -> None:
        self.version = version
        super().__init__(f"Unsupported ERN version: {version}")


class ReleaseNotFoundError(ErnError, LookupError):
    def __init__(self, release_id: str) -> None:
        self.release_id = release_id
        super().__init__(f"Release not found: {release_id}")
