"""Adapters: HTTP mailbox delivery and the web surface."""

from mailrelay.adapters.mailbox import MailboxClient, default_channels, mailbox_channel

__all__ = ["MailboxClient", "default_channels", "mailbox_channel"]
