"""Message classification.

Pure Python, no I/O. The match is case-sensitive and not whole-word:
"not CONFIDENTIAL at all" is still restricted.
"""

from typing import Dict

from mailrelay.domain.models import Category

CONFIDENTIAL_MARKER = "CONFIDENTIAL"

# Category -> mailbox destination name
DESTINATIONS: Dict[Category, str] = {
    Category.RESTRICTED: "vip",
    Category.GENERAL: "everyone",
}


def is_confidential(message: str) -> bool:
    return CONFIDENTIAL_MARKER in message


def classify(message: str) -> Category:
    """Return RESTRICTED if the marker occurs anywhere in the text, else GENERAL."""
    if is_confidential(message):
        return Category.RESTRICTED
    return Category.GENERAL


def destination_for(category: Category) -> str:
    return DESTINATIONS[category]
