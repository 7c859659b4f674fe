"""FastAPI application."""

from fastapi import FastAPI

from mailrelay.adapters.web.relay_routes import relay_router
from mailrelay.config import __version__

app = FastAPI(title="Mail Relay", version=__version__)
app.include_router(relay_router)
