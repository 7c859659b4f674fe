"""Domain data models: pure Python, no framework dependencies."""

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    """Routing category derived from message text."""

    RESTRICTED = "restricted"
    GENERAL = "general"


@dataclass(frozen=True)
class DeliveryReceipt:
    """Outcome of a fixed-endpoint relay."""

    category: Category
    destination: str  # "vip" or "everyone"
    url: str
    status: int
