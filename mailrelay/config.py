"""Configuration and mailbox endpoints."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_VIP_MAILBOX_URL = "http://vip/mailbox"
DEFAULT_EVERYONE_MAILBOX_URL = "http://everyone/mailbox"


def _mailbox_url(env_name: str, default: str) -> str:
    value = os.getenv(env_name, default).strip()
    if not value:
        _stderr_print(f"Empty {env_name}, falling back to {default!r}")
        return default
    return value


CONFIG = {
    "port": int(os.getenv("PORT", "3000")),
    "vip_mailbox_url": _mailbox_url("VIP_MAILBOX_URL", DEFAULT_VIP_MAILBOX_URL),
    "everyone_mailbox_url": _mailbox_url("EVERYONE_MAILBOX_URL", DEFAULT_EVERYONE_MAILBOX_URL),
}


@dataclass
class RelayConfig:
    """Typed view over CONFIG."""

    port: int = 3000
    vip_mailbox_url: str = DEFAULT_VIP_MAILBOX_URL
    everyone_mailbox_url: str = DEFAULT_EVERYONE_MAILBOX_URL

    @classmethod
    def from_env(cls) -> "RelayConfig":
        """Create RelayConfig from the environment-derived CONFIG."""
        return cls(
            port=CONFIG["port"],
            vip_mailbox_url=CONFIG["vip_mailbox_url"],
            everyone_mailbox_url=CONFIG["everyone_mailbox_url"],
        )

    def mailbox_url(self, destination: str) -> str:
        if destination == "vip":
            return self.vip_mailbox_url
        if destination == "everyone":
            return self.everyone_mailbox_url
        raise KeyError(destination)
