"""Contributor role vocabularies and their DDEX role translations."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from ernkit.domain.model.enums import ContributorCategory

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

PERFORMER_ROLES: tuple[str, ...] = (
    "Accordion", "Acoustic Bass", "Acoustic Guitar", "Additional Vocals", "Alto",
    "Alto Saxophone", "Bagpipes", "Banjo", "Baritone", "Baritone Saxophone", "Bass",
    "Bass Clarinet", "Bass Guitar", "Bass Trombone", "Bassoon", "Bells", "Bongos", "Brass",
    "Cello", "Choir", "Chorus", "Clarinet", "Classical Guitar", "Clavinet", "Congas",
    "Contrabass", "Cornet", "Cymbals", "DJ Mixer", "DJ Scratches", "Dobro", "Double Bass",
    "Drums", "Electric Bass", "Electric Guitar", "Electric Piano", "Electronic Drums",
    "English Horn", "Fiddle", "Flugelhorn", "Flute", "French Horn", "Glass Harmonica",
    "Glockenspiel", "Grand Piano", "Guitar", "Harmonica", "Harp", "Harpsichord", "Horn",
    "Keyboard", "Lead Guitar", "Lead Vocals", "Lute", "Mandolin", "Maracas", "Marimba",
    "Mellotron", "Mezzo Soprano", "Moog Synthesizer", "Oboe", "Orchestra", "Organ",
    "Percussion", "Piano", "Piccolo", "Pipe Organ", "Primary Artist", "Programming",
    "Rhythm Guitar", "Rhodes Piano", "Saxophone", "Shaker", "Sitar", "Slide Guitar",
    "Snare Drum", "Solo", "Soprano", "Soprano Saxophone", "Steel Drums", "Steel Guitar",
    "Strings", "Synthesizer", "Tabla", "Talk Box", "Tambourine", "Tenor", "Tenor Saxophone",
    "Theremin", "Timbales", "Timpani", "Triangle", "Trombone", "Trumpet", "Tuba",
    "Turntables", "Ukulele", "Upright Bass", "Vibraphone", "Viola", "Violin", "Vocals",
    "Vocoder", "Whistle", "Wood Block", "Woodwinds", "Wurlitzer", "Xylophone",
)  # fmt: skip

PRODUCER_ENGINEER_ROLES: tuple[str, ...] = (
    "A&R", "Arranger", "Art Direction", "Artist Development", "Assistant Engineer",
    "Assistant Mastering Engineer", "Assistant Mix Engineer", "Assistant Producer",
    "Assistant Recording Engineer", "Associated Performer", "Audio Director", "Audio Editor",
    "Audio Post Production", "Co-Producer", "Compiler", "Conductor", "Creative Director",
    "Design", "Digital Editor", "Director", "Editing", "Engineer", "Executive Producer",
    "Featured Artist", "Graphic Design", "Illustration", "Liner Notes", "Mastering",
    "Mastering Engineer", "Mix Engineer", "Mixer", "Mixing", "Music Director",
    "Music Supervisor", "Orchestra Contractor", "Orchestrator", "Package Design",
    "Performer", "Photography", "Post Production", "Producer", "Production",
    "Production Assistant", "Production Coordinator", "Production Manager", "Programming",
    "Project Coordinator", "Recording", "Recording Arranger", "Recording Engineer",
    "Recording Producer", "Remastering", "Remixer", "Restoration", "Sound Design",
    "Sound Editor", "Sound Effects", "Sound Engineer", "Studio Personnel", "Supervisor",
    "Technical Producer", "Tracking", "Tracking Engineer", "Transfer", "Video Director",
    "Video Editor", "Video Producer", "Visual Effects", "Vocal Arranger", "Vocal Coach",
    "Vocal Engineer", "Vocal Producer",
)  # fmt: skip

COMPOSER_LYRICIST_ROLES: tuple[str, ...] = (
    "Adapter", "Author", "Composer", "Composer Lyricist", "Contributing Artist",
    "Librettist", "Lyricist", "Music", "Music Arranger", "Music Publisher",
    "Original Artist", "Original Lyricist", "Originator", "Primary", "Publisher", "Score",
    "Songwriter", "Translator", "Words", "Writer",
)  # fmt: skip

PERFORMER_DDEX_ROLES: Mapping[str, str] = MappingProxyType(
    {
        "Vocals": "MainVocalist",
        "Lead Vocals": "LeadVocalist",
        "Background Vocals": "BackgroundVocalist",
        "Choir": "Choir",
        "Guitar": "Guitar",
        "Bass Guitar": "BassGuitar",
        "Drums": "Drums",
        "Keyboard": "Keyboard",
        "Piano": "Piano",
        "Saxophone": "Saxophone",
        "Violin": "Violin",
        "Orchestra": "Orchestra",
        "DJ": "DJ",
        "Rapper": "Rapper",
        "Percussion": "Percussion",
        "Synthesizer": "Synthesizer",
        "Trumpet": "Trumpet",
        "Cello": "Cello",
    }
)

PRODUCER_ENGINEER_DDEX_ROLES: Mapping[str, str] = MappingProxyType(
    {
        "Producer": "Producer",
        "Co-Producer": "CoProducer",
        "Executive Producer": "ExecutiveProducer",
        "Mix Engineer": "Mixer",
        "Mastering Engineer": "MasteringEngineer",
        "Recording Engineer": "RecordingEngineer",
        "Remixer": "Remixer",
        "Arranger": "Arranger",
        "Orchestrator": "Orchestrator",
        "Conductor": "Conductor",
        "Programming": "Programmer",
        "A&R": "AssociatedPerformer",
        "Assistant Producer": "AssistantProducer",
        "Assistant Engineer": "StudioPersonnel",
        "Audio Editor": "Editor",
        "Sound Design": "SoundDesigner",
    }
)

COMPOSER_LYRICIST_DDEX_ROLES: Mapping[str, str] = MappingProxyType(
    {
        "Composer": "Composer",
        "Lyricist": "Lyricist",
        "Songwriter": "ComposerLyricist",
        "Arranger": "MusicArranger",
        "Adapter": "Adapter",
        "Translator": "Translator",
        "Author": "Author",
        "Writer": "Writer",
    }
)


@dataclass(frozen=True, slots=True)
class RoleDictionary:
    """Closed, sorted vocabulary of contributor roles for one category."""

    category: ContributorCategory
    roles: tuple[str, ...]
    ddex_roles: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "roles", tuple(sorted(set(self.roles))))

    def __contains__(self, role: object) -> bool:
        return role in self.roles

    def __iter__(self) -> Iterator[str]:
        return iter(self.roles)

    def __len__(self) -> int:
        return len(self.roles)

    def search(self, query: str | None) -> tuple[str, ...]:
        """Roles containing ``query``, case-insensitively; empty for a blank query."""

        if not query or not query.strip():
            return ()
        needle = query.strip().lower()
        return tuple(role for role in self.roles if needle in role.lower())

    def ddex_role(self, role: str) -> str | None:
        return self.ddex_roles.get(role)


@dataclass(frozen=True, slots=True)
class RoleCatalog:
    """The role dictionaries of every contributor category.

    ``categorize`` checks dictionaries in the order given, so a role listed in
    more than one category (``Programming``) resolves to the first.
    """

    dictionaries: tuple[RoleDictionary, ...]

    def dictionary_for(self, category: ContributorCategory) -> RoleDictionary | None:
        for dictionary in self.dictionaries:
            if dictionary.category is category:
                return dictionary
        return None

    def categorize(self, role: str | None) -> ContributorCategory | None:
        if not role:
            return None
        for dictionary in self.dictionaries:
            if role in dictionary:
                return dictionary.category
        return None

    def roles_for(self, category: ContributorCategory) -> tuple[str, ...]:
        dictionary = self.dictionary_for(category)
        return dictionary.roles if dictionary else ()

    def all_roles(self) -> tuple[str, ...]:
        return tuple(sorted({role for dictionary in self.dictionaries for role in dictionary}))

    def search(
        self, query: str | None, category: ContributorCategory | None = None
    ) -> list[tuple[str, ContributorCategory]]:
        return [
            (role, dictionary.category)
            for dictionary in self.dictionaries
            if category is None or dictionary.category is category
            for role in dictionary.search(query)
        ]

    def ddex_role(self, role: str, category: ContributorCategory | None) -> str | None:
        if category is None:
            return None
        dictionary = self.dictionary_for(category)
        return dictionary.ddex_role(role) if dictionary else None


DEFAULT_ROLE_CATALOG = RoleCatalog(
    (
        RoleDictionary(ContributorCategory.PERFORMER, PERFORMER_ROLES, PERFORMER_DDEX_ROLES),
        RoleDictionary(
            ContributorCategory.PRODUCER_ENGINEER,
            PRODUCER_ENGINEER_ROLES,
            PRODUCER_ENGINEER_DDEX_ROLES,
        ),
        RoleDictionary(
            ContributorCategory.COMPOSER_LYRICIST,
            COMPOSER_LYRICIST_ROLES,
            COMPOSER_LYRICIST_DDEX_ROLES,
        ),
    )
)
