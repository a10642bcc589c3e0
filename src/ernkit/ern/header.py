"""MessageHeader section."""

from __future__ import annotations

from datetime import UTC
from typing import TYPE_CHECKING

from ernkit.domain.model import MessageSubType

from .xml import sub, sub_if

if TYPE_CHECKING:
    from lxml import etree

    from .context import BuildContext


def build_message_header(root: etree._Element, context: BuildContext) -> etree._Element:
    config = context.config
    header = sub(root, "MessageHeader")
    if context.policy.message_thread_id:
        sub(header, "MessageThreadId", config.message_id)
    sub(header, "MessageId", config.message_id)

    sender = sub(header, "MessageSender")
    sub_if(sender, "PartyId", config.sender_party_id)
    sub(sub(sender, "PartyName"), "FullName", config.sender_name)

    recipient = sub(header, "MessageRecipient")
    sub_if(recipient, "PartyId", config.recipient_party_id)
    sub(sub(recipient, "PartyName"), "FullName", config.recipient_name)

    created_at = config.created_at.astimezone(UTC).replace(microsecond=0)
    sub(header, "MessageCreatedDateTime", created_at.isoformat().replace("+00:00", "Z"))
    sub(header, "MessageControlType", config.control_type.value)
    return header


def build_update_indicator(root: etree._Element, context: BuildContext) -> None:
    """ERN 3.8.2 only: flag whether the message replaces an earlier one."""

    if not context.policy.update_indicator:
        return
    sub_type = context.config.message_sub_type
    if sub_type is MessageSubType.UPDATE:
        sub(root, "UpdateIndicator", "UpdateMessage")
    elif sub_type is MessageSubType.INITIAL:
        sub(root, "UpdateIndicator", "OriginalMessage")
