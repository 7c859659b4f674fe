"""Port interfaces (Hexagonal Architecture)."""

from mailrelay.ports.outbound import Channel, RelayChannels

__all__ = ["Channel", "RelayChannels"]
