"""Relay API routes."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from mailrelay.errors import DeliveryFailure
from mailrelay.relay import relay_message_to_relevant_people

relay_router = APIRouter(tags=["Relay"])


class RelayRequest(BaseModel):
    message: str


class RelayResponse(BaseModel):
    category: str
    destination: str
    status: int


@relay_router.post("/relay", response_model=RelayResponse)
async def relay(req: RelayRequest):
    try:
        receipt = await relay_message_to_relevant_people(req.message)
    except DeliveryFailure as e:
        raise HTTPException(status_code=502, detail=str(e))
    return RelayResponse(
        category=receipt.category.value,
        destination=receipt.destination,
        status=receipt.status,
    )


@relay_router.get("/health")
async def health():
    return {"status": "ok"}
