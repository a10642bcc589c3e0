"""Per-version structural rules of the ERN document pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from ernkit.domain.errors import UnsupportedErnVersionError
from ernkit.domain.identifiers import release_reference, resource_reference
from ernkit.domain.model import CommercialModel, ErnVersion

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ernkit.domain.model import ReleaseProfile, ReleaseReference, ResourceReference

XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"


@dataclass(frozen=True, slots=True)
class ErnVersionPolicy:
    """Everything that differs between the supported ERN versions.

    Section builders branch on these flags only; they never compare version
    numbers directly.
    """

    version: ErnVersion
    namespace: str
    schema_version_id: str
    profile_version_suffix: str | None
    padded_references: bool
    message_thread_id: bool
    update_indicator: bool
    party_list: bool
    release_grid: bool
    legacy_resource_ids: bool
    territorial_details: bool
    is_provided_in_delivery: bool
    resource_groups: bool
    deal_extensions: bool
    uri_element: str
    file_path_prefix: str = ""
    default_commercial_models: tuple[CommercialModel, ...] = field(default_factory=tuple)

    @property
    def schema_location(self) -> str:
        return f"{self.namespace} {self.namespace}/release-notification.xsd"

    def profile_version_id(self, profile: ReleaseProfile) -> str | None:
        if self.profile_version_suffix is None:
            return None
        return f"{profile.value}/{self.profile_version_suffix}"

    def resource_reference(self, index: int) -> ResourceReference:
        return resource_reference(index, padded=self.padded_references)

    def release_reference(self, index: int = 1) -> ReleaseReference:
        return release_reference(index, padded=self.padded_references)


ERN_382 = ErnVersionPolicy(
    version=ErnVersion.V382,
    namespace="http://ddex.net/xml/ern/382",
    schema_version_id="ern/382",
    profile_version_suffix=None,
    padded_references=True,
    message_thread_id=True,
    update_indicator=True,
    party_list=False,
    release_grid=True,
    legacy_resource_ids=True,
    territorial_details=True,
    is_provided_in_delivery=False,
    resource_groups=False,
    deal_extensions=False,
    uri_element="URL",
    file_path_prefix="resources/",
    default_commercial_models=(
        CommercialModel(type="PayAsYouGoModel", usage_types=("PermanentDownload",)),
    ),
)

ERN_42 = ErnVersionPolicy(
    version=ErnVersion.V42,
    namespace="http://ddex.net/xml/ern/42",
    schema_version_id="ern/42",
    profile_version_suffix="14",
    padded_references=True,
    message_thread_id=False,
    update_indicator=False,
    party_list=False,
    release_grid=False,
    legacy_resource_ids=False,
    territorial_details=False,
    is_provided_in_delivery=True,
    resource_groups=False,
    deal_extensions=False,
    uri_element="URI",
    default_commercial_models=(
        CommercialModel(
            type="PayAsYouGoModel", usage_types=("PermanentDownload", "OnDemandStream")
        ),
    ),
)

ERN_43 = ErnVersionPolicy(
    version=ErnVersion.V43,
    namespace="http://ddex.net/xml/ern/43",
    schema_version_id="ern/43",
    profile_version_suffix="23",
    padded_references=False,
    message_thread_id=False,
    update_indicator=False,
    party_list=True,
    release_grid=False,
    legacy_resource_ids=False,
    territorial_details=False,
    is_provided_in_delivery=False,
    resource_groups=True,
    deal_extensions=True,
    uri_element="URI",
    default_commercial_models=(
        CommercialModel(
            type="SubscriptionModel", usage_types=("OnDemandStream", "NonInteractiveStream")
        ),
    ),
)

POLICIES: Mapping[ErnVersion, ErnVersionPolicy] = MappingProxyType(
    {policy.version: policy for policy in (ERN_382, ERN_42, ERN_43)}
)


def get_policy(version: ErnVersion | str) -> ErnVersionPolicy:
    """Resolve a policy from a version such as ``"4.3"`` or ``"382"``."""

    try:
        return POLICIES[ErnVersion.parse(version)]
    except (KeyError, ValueError) as exc:
        raise UnsupportedErnVersionError(version) from exc
