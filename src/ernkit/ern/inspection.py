"""Read identifying fields back out of a generated message."""

from __future__ import annotations

from lxml import etree

from ernkit.domain.model import ErnVersion

from .policy import POLICIES
from .xml import parse


def extract_message_id(xml: str | bytes) -> str | None:
    """``MessageHeader/MessageId`` of a message, or ``None`` when absent or unparsable."""

    try:
        root = parse(xml)
    except etree.XMLSyntaxError:
        return None
    message_id = root.findtext("MessageHeader/MessageId")
    return message_id.strip() if message_id else None


def detect_ern_version(xml: str | bytes) -> ErnVersion | None:
    """Version from the root namespace, falling back to ``MessageSchemaVersionId``."""

    try:
        root = parse(xml)
    except etree.XMLSyntaxError:
        return None
    namespace = etree.QName(root).namespace
    schema_version_id = root.get("MessageSchemaVersionId")
    for version, policy in POLICIES.items():
        if namespace == policy.namespace or schema_version_id == policy.schema_version_id:
            return version
    return None
