"""Tests for DeliveryFailure."""

from mailrelay.errors import DeliveryFailure


class TestDeliveryFailure:
    def test_with_status(self):
        e = DeliveryFailure("vip", "Service Unavailable", url="http://vip/mailbox", status=503)
        assert e.status == 503
        assert str(e) == "Delivery to http://vip/mailbox failed: HTTP 503: Service Unavailable"

    def test_without_url(self):
        e = DeliveryFailure("everyone", "timeout")
        assert e.url is None
        assert e.status is None
        assert str(e) == "Delivery to everyone failed: timeout"

    def test_is_exception(self):
        assert isinstance(DeliveryFailure("vip", "x"), Exception)
