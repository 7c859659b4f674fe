"""Conditional message relay: CONFIDENTIAL messages go to vip, the rest to everyone."""

from mailrelay.config import __version__

__all__ = ["__version__"]
