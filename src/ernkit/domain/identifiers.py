"""Identifier validation, DDEX reference formatting and file naming."""

from __future__ import annotations

import re
import string
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from urllib.parse import quote, urlsplit, urlunsplit
from uuid import uuid4

if TYPE_CHECKING:
    from .model import Grid, Isrc, ReleaseReference, ResourceReference, Upc

UPC_PATTERN = re.compile(r"^\d{12,14}$")
ISRC_PATTERN = re.compile(r"^[A-Z]{2}[A-Z0-9]{3}\d{7}$")

# RFC 3986 reserved and unreserved characters plus "%" so existing escapes survive.
_URL_SAFE_CHARACTERS = "/:?#[]@!$&'()*+,;=%-._~"
_GRID_ALPHABET = string.digits + string.ascii_uppercase


def is_valid_upc(value: str | None) -> bool:
    return bool(value) and UPC_PATTERN.fullmatch(value or "") is not None


def is_valid_isrc(value: str | None) -> bool:
    return bool(value) and ISRC_PATTERN.fullmatch(normalize_isrc(value or "")) is not None


def normalize_isrc(value: Isrc) -> Isrc:
    """Strip the dashes and whitespace ISRCs are often written with."""

    return re.sub(r"[\s-]", "", value).upper()


def xml_safe_url(url: str | None) -> str:
    """Percent-encode characters that may not appear in a ``URI`` element.

    Entity escaping is left to the XML serializer; encoding ``&`` here as well
    would double escape query strings.
    """

    if not url:
        return ""
    parts = urlsplit(str(url).strip())
    return urlunsplit(
        (
            parts.scheme,
            parts.netloc,
            quote(parts.path, safe=_URL_SAFE_CHARACTERS),
            quote(parts.query, safe=_URL_SAFE_CHARACTERS),
            quote(parts.fragment, safe=_URL_SAFE_CHARACTERS),
        )
    )


def audio_file_name(upc: Upc, disc_number: int, track_number: int, extension: str = "wav") -> str:
    """DDEX file name ``{UPC}_{disc:02}_{track:03}.{ext}`` expected by DSP ingestion."""

    return f"{upc}_{disc_number:02d}_{track_number:03d}.{extension}"


def cover_file_name(upc: Upc) -> str:
    return f"{upc}.jpg"


def format_iso_duration(seconds: float | None) -> str:
    """ISO-8601 duration, ``PT{m}M{s}S``, with an hours part only past one hour."""

    total = max(int(seconds or 0), 0)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"PT{hours}H{minutes}M{secs}S"
    return f"PT{minutes}M{secs}S"


def format_clock_duration(seconds: float | None) -> str:
    total = max(int(seconds or 0), 0)
    minutes, secs = divmod(total, 60)
    return f"{minutes}:{secs:02d}"


def resource_reference(index: int, *, padded: bool) -> ResourceReference:
    """Reference for the ``index``-th resource (1-based): ``A001`` or ``A1``."""

    return f"A{index:03d}" if padded else f"A{index}"


def release_reference(index: int, *, padded: bool) -> ReleaseReference:
    return f"R{index:03d}" if padded else f"R{index}"


def technical_reference(reference: ResourceReference) -> str:
    return f"T{reference}"


def grid_check_character(body: str) -> str:
    """ISO 7064 MOD 37,36 check character for a 17 character GRid body."""

    modulus = len(_GRID_ALPHABET)
    product = modulus
    for char in body.upper():
        total = (product + _GRID_ALPHABET.index(char)) % modulus
        if total == 0:
            total = modulus
        product = (total * 2) % (modulus + 1)
    return _GRID_ALPHABET[(modulus + 1 - product) % modulus]


def synthesize_grid(issuer: str, upc: Upc) -> Grid:
    """Build a GRid from an issuer code and a release's UPC.

    Layout is ``A1`` + 5 character issuer + 10 character release number +
    check character. The issuer is taken from the alphanumeric characters of
    ``issuer`` (for instance a DPID) and zero padded.
    """

    issuer_code = re.sub(r"[^A-Z0-9]", "", issuer.upper())[-5:].rjust(5, "0")
    release_number = re.sub(r"\D", "", upc)[-10:].rjust(10, "0")
    body = f"A1{issuer_code}{release_number}"
    return body + grid_check_character(body)


def new_message_id(now: datetime | None = None) -> str:
    """Message id of the form ``MSG_{epoch millis}_{random}``."""

    moment = now or datetime.now(UTC)
    return f"MSG_{int(moment.timestamp() * 1000)}_{uuid4().hex[:9]}"
