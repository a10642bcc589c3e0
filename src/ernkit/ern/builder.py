"""One ERN document pipeline for every supported version."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from ernkit.domain.errors import ErnPreconditionError
from ernkit.domain.identifiers import is_valid_isrc, is_valid_upc
from ernkit.domain.parties import PartyReferenceRegistry

from .context import BuildContext
from .deal_list import build_deal_list
from .header import build_message_header, build_update_indicator
from .party_list import build_party_list, collect_parties
from .policy import get_policy
from .release_list import build_release_list
from .resource_list import build_resource_list
from .xml import new_message, serialize

if TYPE_CHECKING:
    from ernkit.domain.model import ErnVersion

    from .inputs import BuildConfig, Product, ResourceBundle
    from .policy import ErnVersionPolicy

log = getLogger(__name__)

LANGUAGE_AND_SCRIPT_CODE = "en"


class ErnBuilder:
    """Builds ``NewReleaseMessage`` documents for the version described by ``policy``.

    The builder holds no per-message state: the party registry is created
    inside :meth:`build`, so one builder may serve concurrent builds.
    """

    def __init__(self, policy: ErnVersionPolicy) -> None:
        self.policy = policy

    @property
    def version(self) -> ErnVersion:
        return self.policy.version

    def build(self, product: Product, resources: ResourceBundle, config: BuildConfig) -> str:
        """Return the UTF-8 XML document; raise before building on missing identifiers."""

        self.check_preconditions(product, resources)
        policy = self.policy
        context = BuildContext(
            policy=policy,
            product=product,
            resources=resources,
            config=config,
            parties=PartyReferenceRegistry(),
        )

        profile = config.profile or product.profile
        root = new_message(
            policy,
            MessageSchemaVersionId=policy.schema_version_id,
            ReleaseProfileVersionId=policy.profile_version_id(profile),
            LanguageAndScriptCode=LANGUAGE_AND_SCRIPT_CODE,
        )
        build_message_header(root, context)
        build_update_indicator(root, context)
        if policy.party_list:
            collect_parties(product, context.parties)
            build_party_list(root, context.parties)
        build_resource_list(root, context)
        build_release_list(root, context)
        build_deal_list(root, context)

        log.debug(
            "Built ERN %s message %s with %d sound recordings",
            policy.version.value,
            config.message_id,
            len(resources.sound_recordings),
        )
        return serialize(root)

    def check_preconditions(self, product: Product, resources: ResourceBundle) -> None:
        problems: list[str] = []
        if not product.upc:
            problems.append("UPC is missing")
        elif not is_valid_upc(product.upc):
            problems.append(f"UPC {product.upc!r} is not 12 to 14 digits")

        for track in product.tracks:
            recording = resources.sound_recording(track.resource_reference)
            if recording is None:
                problems.append(
                    f"Track {track.sequence_number} ({track.title}) has no resource "
                    f"{track.resource_reference}"
                )
            elif not recording.isrc:
                problems.append(f"Track {track.sequence_number} ({track.title}) has no ISRC")
            elif not is_valid_isrc(recording.isrc):
                problems.append(
                    f"Track {track.sequence_number} ({track.title}) has invalid ISRC "
                    f"{recording.isrc!r}"
                )
        if problems:
            raise ErnPreconditionError("; ".join(problems))


def get_builder(version: ErnVersion | str) -> ErnBuilder:
    """Builder for ``version``; raises ``UnsupportedErnVersionError`` for unknown versions."""

    return ErnBuilder(get_policy(version))
