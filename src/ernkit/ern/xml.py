"""Thin lxml helpers shared by the section builders."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

from lxml import etree

from .policy import XSI_NAMESPACE

if TYPE_CHECKING:
    from .policy import ErnVersionPolicy

ROOT_TAG = "NewReleaseMessage"
NAMESPACE_PREFIX = "ern"


def _text(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def sub(
    parent: etree._Element,
    tag: str,
    text: object | None = None,
    **attributes: str,
) -> etree._Element:
    """Append ``tag`` to ``parent``; ``text`` is stringified, ``None`` leaves it empty."""

    element = etree.SubElement(parent, tag, attrib=attributes or None)
    if text is not None:
        element.text = _text(text)
    return element


def sub_if(parent: etree._Element, tag: str, text: object | None, **attributes: str) -> None:
    """Append ``tag`` only when ``text`` is non-empty."""

    if text is None or text == "":
        return
    sub(parent, tag, text, **attributes)


def new_message(policy: ErnVersionPolicy, **attributes: str | None) -> etree._Element:
    root = etree.Element(
        etree.QName(policy.namespace, ROOT_TAG),
        nsmap={NAMESPACE_PREFIX: policy.namespace, "xsi": XSI_NAMESPACE},
    )
    root.set(f"{{{XSI_NAMESPACE}}}schemaLocation", policy.schema_location)
    for name, value in attributes.items():
        if value is not None:
            root.set(name, value)
    return root


def serialize(root: etree._Element) -> str:
    return etree.tostring(
        root,
        xml_declaration=True,
        encoding="UTF-8",
        pretty_print=True,
    ).decode("utf-8")


def parse(xml: str | bytes) -> etree._Element:
    """Parse a generated message; accepts the ``str`` returned by the builders."""

    payload = xml.encode("utf-8") if isinstance(xml, str) else xml
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    return etree.fromstring(payload, parser=parser)
