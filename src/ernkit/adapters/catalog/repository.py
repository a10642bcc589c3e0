"""Release repository backed by a directory of JSON catalog documents."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from .schema import CatalogRelease
from .translator import translate_release

if TYPE_CHECKING:
    from ernkit.domain.model import Release

log = getLogger(__name__)


def load_release_document(path: Path | str) -> Release:
    """Parse and translate a single ``{release}.json`` document."""

    document = CatalogRelease.model_validate_json(Path(path).read_text(encoding="utf-8"))
    return translate_release(document)


class JsonReleaseRepository:
    """Reads ``{release_id}.json`` files from ``directory``."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def get(self, release_id: str) -> Release | None:
        path = self.directory / f"{release_id}.json"
        if not path.is_file():
            log.debug("No catalog document at %s", path)
            return None
        return load_release_document(path)
