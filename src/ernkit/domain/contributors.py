"""Translate catalog contributor roles into DDEX contributor elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from ernkit.dictionaries.contributor_roles import DEFAULT_ROLE_CATALOG

from .model import (
    ContributorCategory,
    ContributorElementType,
    GenerationWarning,
    WarningKind,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ernkit.dictionaries.contributor_roles import RoleCatalog

    from .model import Contributor, Release

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MappedContributor:
    """A contributor ready to be written as a DDEX (Indirect)ResourceContributor."""

    element_type: ContributorElementType
    party_name: str
    role: str
    user_defined: bool = False
    sequence_number: int | None = None


@dataclass(slots=True)
class ContributorGroups:
    resource_contributors: list[MappedContributor] = field(default_factory=list)
    indirect_resource_contributors: list[MappedContributor] = field(default_factory=list)
    warnings: list[GenerationWarning] = field(default_factory=list)


class ContributorRoleMapper:
    def __init__(self, catalog: RoleCatalog | None = None) -> None:
        self.catalog = catalog or DEFAULT_ROLE_CATALOG

    def category_of(self, contributor: Contributor) -> ContributorCategory | None:
        return contributor.category or self.catalog.categorize(contributor.role)

    def map_to_ddex(
        self,
        contributor: Contributor,
        *,
        sequence_number: int | None = None,
        warnings: list[GenerationWarning] | None = None,
    ) -> MappedContributor:
        """Map one contributor; an unknown role is passed through as user defined.

        Unmapped roles are logged and, when ``warnings`` is given, appended to it.
        """

        category = self.category_of(contributor)
        element_type = (
            ContributorElementType.INDIRECT_RESOURCE_CONTRIBUTOR
            if category is ContributorCategory.COMPOSER_LYRICIST
            else ContributorElementType.RESOURCE_CONTRIBUTOR
        )
        ddex_role = self._ddex_role(contributor.role, category)
        if ddex_role is None:
            log.warning(
                "No DDEX mapping for role %r in category %s, using it as user defined",
                contributor.role,
                category.value if category else None,
            )
            if warnings is not None:
                warnings.append(
                    GenerationWarning(
                        kind=WarningKind.UNMAPPED_ROLE,
                        message=(
                            f"No DDEX mapping for role {contributor.role!r} of "
                            f"{contributor.name}; sent as user defined"
                        ),
                        subject=contributor.name,
                    )
                )
            return MappedContributor(
                element_type=element_type,
                party_name=contributor.name,
                role=contributor.role,
                user_defined=True,
                sequence_number=sequence_number,
            )
        return MappedContributor(
            element_type=element_type,
            party_name=contributor.name,
            role=ddex_role,
            sequence_number=sequence_number,
        )

    def group_by_element_type(self, contributors: Iterable[Contributor]) -> ContributorGroups:
        groups = ContributorGroups()
        for index, contributor in enumerate(contributors, start=1):
            mapped = self.map_to_ddex(
                contributor, sequence_number=index, warnings=groups.warnings
            )
            if mapped.element_type is ContributorElementType.INDIRECT_RESOURCE_CONTRIBUTOR:
                groups.indirect_resource_contributors.append(mapped)
            else:
                groups.resource_contributors.append(mapped)
        return groups

    def _ddex_role(self, role: str, category: ContributorCategory | None) -> str | None:
        mapped = self.catalog.ddex_role(role, category)
        if mapped is not None:
            return mapped
        dictionary = self.catalog.dictionary_for(category) if category else None
        # Roles already spelled in DDEX vocabulary pass unchanged.
        if dictionary is not None and role in dictionary.ddex_roles.values():
            return role
        return None


def validate_contributors(release: Release) -> list[str]:
    """Return every contributor problem found on ``release``; never raises."""

    errors: list[str] = []
    if not (release.display_artist or "").strip():
        errors.append("DisplayArtist is required for the release")

    for index, track in enumerate(release.ordered_tracks, start=1):
        if not (track.display_artist or "").strip():
            errors.append(f"Track {index} missing DisplayArtist")
        for position, contributor in enumerate(track.contributors, start=1):
            if not (contributor.name or "").strip():
                errors.append(f"Track {index}, contributor {position}: missing name")
            if not (contributor.role or "").strip():
                errors.append(f"Track {index}, contributor {position}: missing role")
    return errors
