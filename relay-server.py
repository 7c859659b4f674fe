"""
Mail relay server

Usage:
    python relay-server.py

Environment (.env supported):
    VIP_MAILBOX_URL        default http://vip/mailbox
    EVERYONE_MAILBOX_URL   default http://everyone/mailbox
    PORT                   default 3000
"""

import uvicorn

from mailrelay.adapters.web.server import app
from mailrelay.config import CONFIG

if __name__ == "__main__":
    print(f"vip mailbox:      {CONFIG['vip_mailbox_url']}")
    print(f"everyone mailbox: {CONFIG['everyone_mailbox_url']}")
    uvicorn.run(app, host="0.0.0.0", port=CONFIG["port"], log_level="info")
