"""Message-scoped party references (``P1``, ``P2``, ...) for the ERN 4.3 PartyList."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .model import PartyReference

UNKNOWN_PARTY_REFERENCE = "PUnknown"


class PartyReferenceRegistry:
    """Allocates one reference per distinct party name within a single message.

    Names are matched exactly. Empty names share ``PUnknown`` instead of
    allocating. Create a new registry for every message; references carry no
    meaning across messages.
    """

    def __init__(self, prefix: str = "P") -> None:
        self._prefix = prefix
        self._references: dict[str, PartyReference] = {}
        self._uses_unknown = False

    def get_or_create_reference(self, name: str | None) -> PartyReference:
        if name is None or not name.strip():
            self._uses_unknown = True
            return UNKNOWN_PARTY_REFERENCE
        reference = self._references.get(name)
        if reference is None:
            reference = f"{self._prefix}{len(self._references) + 1}"
            self._references[name] = reference
        return reference

    def register_all(self, names: Iterable[str | None]) -> None:
        for name in names:
            self.get_or_create_reference(name)

    def reference_for(self, name: str | None) -> PartyReference | None:
        """Look up an existing reference without allocating one."""

        if name is None or not name.strip():
            return UNKNOWN_PARTY_REFERENCE if self._uses_unknown else None
        return self._references.get(name)

    @property
    def uses_unknown(self) -> bool:
        return self._uses_unknown

    def entries(self) -> Iterator[tuple[PartyReference, str | None]]:
        """Yield ``(reference, name)`` in allocation order, the sentinel last."""

        for name, reference in self._references.items():
            yield reference, name
        if self._uses_unknown:
            yield UNKNOWN_PARTY_REFERENCE, None

    def __len__(self) -> int:
        return len(self._references) + int(self._uses_unknown)

    def __contains__(self, name: object) -> bool:
        return name in self._references
