"""Domain layer: pure Python, no framework dependencies."""

from mailrelay.domain.models import Category, DeliveryReceipt
from mailrelay.domain.classifier import (
    CONFIDENTIAL_MARKER,
    DESTINATIONS,
    classify,
    destination_for,
    is_confidential,
)

__all__ = [
    "Category",
    "DeliveryReceipt",
    "CONFIDENTIAL_MARKER",
    "DESTINATIONS",
    "classify",
    "destination_for",
    "is_confidential",
]
