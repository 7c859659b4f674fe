"""Relay error types."""

from typing import Optional


class DeliveryFailure(Exception):
    """The single outbound delivery (HTTP call or channel) did not succeed."""

    def __init__(
        self,
        destination: str,
        detail: str,
        url: Optional[str] = None,
        status: Optional[int] = None,
    ):
        self.destination = destination
        self.detail = detail
        self.url = url
        self.status = status
        target = url or destination
        if status is not None:
            super().__init__(f"Delivery to {target} failed: HTTP {status}: {detail}")
        else:
            super().__init__(f"Delivery to {target} failed: {detail}")
