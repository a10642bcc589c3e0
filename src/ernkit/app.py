"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from ernkit.adapters.checksum import HttpChecksumService
from ernkit.config import get_ern_settings
from ernkit.domain.errors import ReleaseNotFoundError
from ernkit.domain.generation import ErnGenerator

if TYPE_CHECKING:
    from ernkit.config import ErnSettings
    from ernkit.domain.generation import GenerationResult
    from ernkit.domain.model import DeliveryTarget
    from ernkit.domain.ports import ChecksumService, DeliveryHistory, ReleaseRepository

log = getLogger(__name__)


def generate_release_ern(
    release_id: str,
    target: DeliveryTarget,
    *,
    releases: ReleaseRepository,
    history: DeliveryHistory,
    checksums: ChecksumService | None = None,
    settings: ErnSettings | None = None,
    takedown: bool = False,
) -> GenerationResult:
    """Generate the ERN message delivering ``release_id`` to ``target``."""

    release = releases.get(release_id)
    if release is None:
        raise ReleaseNotFoundError(release_id)

    effective_settings = settings or get_ern_settings()
    effective_checksums = checksums or HttpChecksumService()
    log.info(
        "Starting ERN generation: release=%s, target=%s, takedown=%s",
        release_id,
        target.id,
        takedown,
    )

    generator = ErnGenerator(effective_checksums, history, effective_settings)
    result = generator.generate_ern(release, target, takedown=takedown)

    log.info(
        f"Finished ERN generation: message={result.message_id}, "
        f"version={result.version.value}, type={result.message_sub_type.value}, "
        f"warnings={len(result.warnings)}"
    )
    return result
