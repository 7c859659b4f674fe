"""Outbound ports: delivery interfaces the relay depends on."""

from dataclasses import dataclass
from typing import Iterator, Protocol, runtime_checkable

from mailrelay.domain.models import Category


@runtime_checkable
class Channel(Protocol):
    """Async delivery capability: accepts message text, completes or raises."""

    async def __call__(self, message: str) -> None: ...


@dataclass(frozen=True)
class RelayChannels:
    """The (vip, everyone) channel pair supplied per relay call."""

    vip: Channel
    everyone: Channel

    def select(self, category: Category) -> Channel:
        if category is Category.RESTRICTED:
            return self.vip
        return self.everyone

    def __iter__(self) -> Iterator[Channel]:
        # Allows `vip, everyone = channels`
        return iter((self.vip, self.everyone))
