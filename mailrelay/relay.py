"""Relay a message to the vip or everyone mailbox.

Two variants share the same routing rule (see domain.classifier):

- relay_message_to_relevant_people: fixed HTTP mailboxes from RelayConfig.
- relay_message_to_relevant_channel: caller-injected channels, no network.

Neither retries. Failures surface as DeliveryFailure.
"""

import sys
from typing import Tuple, Union

from mailrelay.adapters.mailbox import MailboxClient
from mailrelay.config import RelayConfig
from mailrelay.domain.classifier import classify, destination_for
from mailrelay.domain.models import Category, DeliveryReceipt
from mailrelay.errors import DeliveryFailure
from mailrelay.ports.outbound import Channel, RelayChannels


def _log(msg: str):
    print(msg, file=sys.stderr)


def _describe(message: str, category: Category) -> str:
    # Restricted bodies stay out of the logs
    if category is Category.RESTRICTED:
        return f"<{len(message)} chars>"
    preview = message if len(message) <= 60 else message[:57] + "..."
    return repr(preview)


async def relay_message_to_relevant_people(message: str) -> DeliveryReceipt:
    """Classify and POST the message to exactly one fixed mailbox."""
    category = classify(message)
    destination = destination_for(category)
    url = RelayConfig.from_env().mailbox_url(destination)
    _log(f"[relay] {_describe(message, category)} -> {destination} ({url})")

    status = await MailboxClient(url, destination).deliver(message)
    return DeliveryReceipt(category=category, destination=destination, url=url, status=status)


async def relay_message_to_relevant_channel(
    message: str,
    channels: Union[RelayChannels, Tuple[Channel, Channel]],
) -> Category:
    """Classify and hand the message to exactly one of the supplied channels.

    Args:
        message: Text to relay.
        channels: RelayChannels, or a (vip, everyone) pair.

    Returns:
        The category the message was routed by.
    """
    if not isinstance(channels, RelayChannels):
        vip, everyone = channels
        channels = RelayChannels(vip=vip, everyone=everyone)

    category = classify(message)
    destination = destination_for(category)
    _log(f"[relay] {_describe(message, category)} -> {destination} channel")

    try:
        await channels.select(category)(message)
    except DeliveryFailure:
        raise
    except Exception as e:
        _log(f"[relay] {destination} channel failed: {type(e).__name__}: {e}")
        raise DeliveryFailure(destination, str(e) or type(e).__name__) from e
    return category
