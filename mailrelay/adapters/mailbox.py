"""Mailbox client using aiohttp: POSTs {"message": ...} to a mailbox URL."""

import asyncio
import sys
from typing import Optional

import aiohttp

from mailrelay.config import RelayConfig
from mailrelay.errors import DeliveryFailure
from mailrelay.ports.outbound import Channel, RelayChannels


def _log(msg: str):
    print(msg, file=sys.stderr)


class MailboxClient:
    """Delivers messages to a single mailbox endpoint."""

    def __init__(self, url: str, destination: str = ""):
        self.url = url
        self.destination = destination or url

    async def deliver(self, message: str) -> int:
        """POST the message and return the HTTP status.

        Raises:
            DeliveryFailure: on a non-2xx response, a transport error or a timeout.
        """
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(self.url, json={"message": message}) as resp:
                    if not 200 <= resp.status < 300:
                        body = await resp.text()
                        _log(f"[mailbox] {self.destination}: HTTP {resp.status}")
                        raise DeliveryFailure(
                            self.destination, body, url=self.url, status=resp.status
                        )
                    return resp.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            _log(f"[mailbox] {self.destination}: {type(e).__name__}: {e}")
            raise DeliveryFailure(self.destination, str(e) or type(e).__name__, url=self.url) from e

    async def __call__(self, message: str) -> None:
        await self.deliver(message)


def mailbox_channel(url: str, destination: str = "") -> Channel:
    """Adapt a mailbox URL to the Channel protocol."""
    return MailboxClient(url, destination)


def default_channels(config: Optional[RelayConfig] = None) -> RelayChannels:
    """Build the configured vip/everyone HTTP channel pair."""
    config = config or RelayConfig.from_env()
    return RelayChannels(
        vip=mailbox_channel(config.mailbox_url("vip"), "vip"),
        everyone=mailbox_channel(config.mailbox_url("everyone"), "everyone"),
    )
