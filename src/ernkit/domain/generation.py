"""ERN generation use case: validate, classify, hash assets and build the message."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from ernkit.domain.classification import ReleaseClassifier
from ernkit.domain.contributors import ContributorRoleMapper, validate_contributors
from ernkit.domain.errors import InvalidClassificationError, ReleaseValidationError
from ernkit.domain.identifiers import is_valid_isrc, is_valid_upc, new_message_id
from ernkit.domain.model import (
    HASH_FAILED,
    DeliveryStatus,
    GenerationWarning,
    MessageSubType,
    WarningKind,
)
from ernkit.domain.ports.clock import utcnow
from ernkit.ern import BuildConfig, build_product, build_resources, get_builder

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from datetime import datetime

    from ernkit.config import ErnSettings
    from ernkit.domain.model import (
        Classification,
        DeliveryTarget,
        ErnVersion,
        Release,
        Track,
    )
    from ernkit.domain.ports import ChecksumService, Clock, DeliveryHistory

log = getLogger(__name__)

type MessageIdFactory = Callable[[datetime], str]


@dataclass(frozen=True, slots=True)
class GenerationResult:
    xml: str
    message_id: str
    classification: Classification
    version: ErnVersion
    message_sub_type: MessageSubType
    warnings: tuple[GenerationWarning, ...] = field(default_factory=tuple)


def validate_release_for_generation(release: Release) -> None:
    """Raise ``ReleaseValidationError`` listing every identifier problem of ``release``."""

    problems: list[str] = []
    if not release.upc:
        problems.append("UPC is missing")
    elif not is_valid_upc(release.upc):
        problems.append(f"UPC {release.upc!r} must be 12 to 14 digits")

    offending: list[Track] = []
    for index, track in enumerate(release.ordered_tracks, start=1):
        label = f"Track {index} ({track.title}, id {track.id})"
        if not (track.isrc or "").strip():
            offending.append(track)
            problems.append(f"{label} is missing its ISRC")
        elif not is_valid_isrc(track.isrc):
            offending.append(track)
            problems.append(f"{label} has invalid ISRC {track.isrc!r}")

    if problems:
        raise ReleaseValidationError(release.id, problems, offending_tracks=offending)


def determine_message_sub_type(
    release_id: str,
    target_id: str,
    history: DeliveryHistory,
    *,
    takedown: bool = False,
) -> MessageSubType:
    """Takedown when asked; Update after a completed delivery; Initial otherwise."""

    if takedown:
        return MessageSubType.TAKEDOWN
    completed = history.find(
        release_id=release_id, target_id=target_id, status=DeliveryStatus.COMPLETED
    )
    if any(
        record.message_sub_type in {MessageSubType.INITIAL, MessageSubType.UPDATE}
        for record in completed
    ):
        return MessageSubType.UPDATE
    return MessageSubType.INITIAL


class ErnGenerator:
    """Builds one ERN message for a release and a delivery target.

    Collaborators are injected: ``checksums`` hashes remote assets (``None``
    leaves every hash pending), ``history`` decides between Initial and
    Update messages and ``clock`` stamps the message.
    """

    def __init__(
        self,
        checksums: ChecksumService | None,
        history: DeliveryHistory,
        settings: ErnSettings,
        *,
        classifier: ReleaseClassifier | None = None,
        mapper: ContributorRoleMapper | None = None,
        clock: Clock = utcnow,
        message_id_factory: MessageIdFactory = new_message_id,
    ) -> None:
        self.checksums = checksums
        self.history = history
        self.settings = settings
        self.classifier = classifier or ReleaseClassifier()
        self.mapper = mapper or ContributorRoleMapper()
        self.clock = clock
        self.message_id_factory = message_id_factory

    async def generate(
        self,
        release: Release,
        target: DeliveryTarget,
        *,
        takedown: bool = False,
    ) -> GenerationResult:
        validate_release_for_generation(release)

        classification = self.classifier.classify(release)
        if not classification.is_valid:
            raise InvalidClassificationError(release.id, classification)

        builder = get_builder(target.ern_version or self.settings.default_version)
        sub_type = determine_message_sub_type(
            release.id, target.id, self.history, takedown=takedown
        )
        log.info(
            "Generating ERN %s %s message for release %s to %s",
            builder.version.value,
            sub_type.value,
            release.id,
            target.id,
        )

        warnings: list[GenerationWarning] = []
        hashes = await self._compute_hashes(release, warnings)
        warnings.extend(_contributor_warnings(release))
        if classification.override_rejected:
            warnings.append(
                GenerationWarning(
                    kind=WarningKind.OVERRIDE_REJECTED,
                    message=classification.rationale,
                    subject=classification.requested_type,
                )
            )

        product = build_product(
            release,
            classification,
            builder.policy,
            mapper=self.mapper,
            genre_mapping=target.genre_mapping,
            warnings=warnings,
        )
        resources = build_resources(product, release, builder.policy, hashes)
        now = self.clock()
        message_id = self.message_id_factory(now)
        config = BuildConfig(
            message_id=message_id,
            sender_party_id=self.settings.sender_party_id,
            sender_name=self.settings.sender_name,
            recipient_name=target.recipient_name,
            recipient_party_id=target.party_id,
            message_sub_type=sub_type,
            test_mode=self.settings.test_mode or target.test_mode,
            include_deals=sub_type is not MessageSubType.TAKEDOWN,
            territories=target.territories,
            deal_start_date=target.deal_start_date,
            deal_end_date=target.deal_end_date,
            commercial_models=target.commercial_models,
            exclusivity=target.exclusivity,
            pre_order_date=target.pre_order_date,
            display_start_date=target.display_start_date,
            created_at=now,
        )
        xml = builder.build(product, resources, config)

        log.info(
            "Generated message %s for release %s with %d warning(s)",
            message_id,
            release.id,
            len(warnings),
        )
        return GenerationResult(
            xml=xml,
            message_id=message_id,
            classification=classification,
            version=builder.version,
            message_sub_type=sub_type,
            warnings=tuple(warnings),
        )

    async def _compute_hashes(
        self, release: Release, warnings: list[GenerationWarning]
    ) -> dict[str, str]:
        urls: list[str] = []
        for label, url in _asset_urls(release):
            if not url:
                warnings.append(
                    GenerationWarning(
                        kind=WarningKind.CHECKSUM_PENDING,
                        message=f"{label} has no URL; MD5 left pending",
                        subject=label,
                    )
                )
            elif url not in urls:
                urls.append(url)

        if not urls:
            return {}
        if self.checksums is None:
            warnings.extend(
                GenerationWarning(
                    kind=WarningKind.CHECKSUM_PENDING,
                    message=f"No checksum service configured; MD5 of {url} left pending",
                    subject=url,
                )
                for url in urls
            )
            return {}

        service = self.checksums
        digests = await asyncio.gather(*(self._checksum(service, url, warnings) for url in urls))
        return dict(zip(urls, digests, strict=True))

    async def _checksum(
        self, service: ChecksumService, url: str, warnings: list[GenerationWarning]
    ) -> str:
        try:
            return await asyncio.wait_for(
                service.compute_md5(url),
                timeout=self.settings.checksum_timeout_seconds,
            )
        except TimeoutError:
            reason = f"timed out after {self.settings.checksum_timeout_seconds:g}s"
        except Exception as exc:  # noqa: BLE001
            reason = str(exc) or type(exc).__name__
        log.warning("MD5 calculation failed for %s: %s", url, reason)
        warnings.append(
            GenerationWarning(
                kind=WarningKind.CHECKSUM_FAILED,
                message=f"MD5 calculation failed for {url}: {reason}",
                subject=url,
            )
        )
        return HASH_FAILED

    def generate_ern(
        self,
        release: Release,
        target: DeliveryTarget,
        *,
        takedown: bool = False,
    ) -> GenerationResult:
        """Synchronous wrapper around :meth:`generate`."""

        return asyncio.run(self.generate(release, target, takedown=takedown))


def _asset_urls(release: Release) -> Iterable[tuple[str, str | None]]:
    for index, track in enumerate(release.ordered_tracks, start=1):
        yield f"Track {index} audio", track.audio.url if track.audio else None
    cover = release.cover_image
    yield "Cover image", cover.url if cover else None


def _contributor_warnings(release: Release) -> list[GenerationWarning]:
    return [
        GenerationWarning(kind=WarningKind.CONTRIBUTOR_VALIDATION, message=problem)
        for problem in validate_contributors(release)
    ]

