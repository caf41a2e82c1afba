"""Tests for MCP server tools."""

import httpx
import pytest
from unittest.mock import MagicMock, patch

from tests.fixtures.common import ERROR_MULTIPLE
from tests.fixtures.purchase_orders import ORDER_RESPONSE as PO_ORDER_RESPONSE, PURCHASE_ORDER
from tests.fixtures.sales_orders import (
    EMPTY_QUEUE,
    ORDER_FULL,
    ORDER_FULL_HEADERS,
    ORDER_RESPONSE,
)


_RESOURCE_MODULES = [
    "jakamo_client.resources.sales_orders",
    "jakamo_client.resources.purchase_orders",
]


@pytest.fixture
def patch_transport(mock_transport):
    """Patch JakamoTransport.from_env in all tool modules.

    Usage:
        transport = patch_transport(200, b"<Order/>")
    """
    patchers = []

    def _patch(*args, **kwargs):
        transport = mock_transport(*args, **kwargs)
        mock_class = MagicMock()
        mock_class.from_env.return_value = transport
        for mod in _RESOURCE_MODULES:
            p = patch(f"{mod}.JakamoTransport", mock_class)
            p.start()
            patchers.append(p)
        return transport

    yield _patch
    for p in patchers:
        p.stop()


# ---------------------------------------------------------------------------
# Sales order tools
# ---------------------------------------------------------------------------


class TestJakamoGetSalesOrder:

    async def test_order(self, patch_transport):
        transport = patch_transport(200, ORDER_FULL, headers=ORDER_FULL_HEADERS)

        from jakamo_client.resources.sales_orders import jakamo_get_sales_order

        result = await jakamo_get_sales_order()

        assert result["status"] == "ok"
        assert result["errors"] == []
        assert result["value"]["order_number"] == "PO-5001"
        assert result["value"]["acknowledgement_uri"] == "https://dummy.local/api/queue/ack/77"
        assert result["value"]["confirmation_uri"] == "https://dummy.local/api/order/5001/confirm"
        assert result["value"]["xml"] == ORDER_FULL.decode("utf-8")
        assert transport.http.is_closed

    async def test_empty_queue(self, patch_transport):
        patch_transport(200, EMPTY_QUEUE)

        from jakamo_client.resources.sales_orders import jakamo_get_sales_order

        result = await jakamo_get_sales_order()

        assert result == {"status": "not_found", "value": None, "errors": []}

    async def test_transport_closed_on_fault(self, patch_transport):
        transport = patch_transport(error=httpx.ConnectError("refused"))

        from jakamo_client.resources.sales_orders import jakamo_get_sales_order

        with pytest.raises(httpx.ConnectError):
            await jakamo_get_sales_order()
        assert transport.http.is_closed


class TestJakamoRemoveSalesOrder:

    async def test_success(self, patch_transport, sent_requests):
        patch_transport(200)

        from jakamo_client.resources.sales_orders import jakamo_remove_sales_order

        result = await jakamo_remove_sales_order("https://dummy.local/api/queue/ack/77")

        assert result == {"status": "ok", "value": True, "errors": []}
        assert sent_requests[0].url.path == "/api/queue/ack/77"


class TestJakamoSendOrderResponse:

    async def test_errors_returned(self, patch_transport, sent_requests):
        patch_transport(400, ERROR_MULTIPLE)

        from jakamo_client.resources.sales_orders import jakamo_send_order_response

        result = await jakamo_send_order_response(ORDER_RESPONSE.decode("utf-8"))

        assert result["status"] == "error"
        assert result["errors"] == ["Order not found", "Also this is an error"]
        assert sent_requests[0].content == ORDER_RESPONSE


class TestJakamoConfirmAllChanges:

    async def test_success(self, patch_transport, sent_requests):
        patch_transport(200)

        from jakamo_client.resources.sales_orders import jakamo_confirm_all_changes

        result = await jakamo_confirm_all_changes("https://dummy.local/api/order/5001/confirm")

        assert result["status"] == "ok"
        assert sent_requests[0].headers["Content-Type"] == "application/xml"


# ---------------------------------------------------------------------------
# Purchase order tools
# ---------------------------------------------------------------------------


class TestPurchaseOrderTools:

    async def test_send(self, patch_transport, sent_requests):
        patch_transport(200)

        from jakamo_client.resources.purchase_orders import jakamo_send_purchase_order

        result = await jakamo_send_purchase_order(PURCHASE_ORDER.decode("utf-8"))

        assert result["status"] == "ok"
        assert sent_requests[0].url.path == "/api/order"

    async def test_update(self, patch_transport, sent_requests):
        patch_transport(400)

        from jakamo_client.resources.purchase_orders import jakamo_update_purchase_order

        result = await jakamo_update_purchase_order(9001, "<Order/>")

        assert result == {"status": "error", "value": None, "errors": ["Bad Request"]}
        assert sent_requests[0].url.path == "/api/order/9001"

    async def test_cancel(self, patch_transport, sent_requests):
        patch_transport(200)

        from jakamo_client.resources.purchase_orders import jakamo_cancel_purchase_order

        result = await jakamo_cancel_purchase_order(9001, "<Order/>")

        assert result["status"] == "ok"
        assert sent_requests[0].url.path == "/api/order/9001"

    async def test_received(self, patch_transport, sent_requests):
        patch_transport(200)

        from jakamo_client.resources.purchase_orders import jakamo_purchase_order_received

        result = await jakamo_purchase_order_received(9001, "<Order/>")

        assert result["status"] == "ok"
        assert sent_requests[0].url.path == "/api/order/9001"

    async def test_get_order_response(self, patch_transport):
        transport = patch_transport(200, PO_ORDER_RESPONSE)

        from jakamo_client.resources.purchase_orders import jakamo_get_order_response

        result = await jakamo_get_order_response()

        assert result["status"] == "ok"
        assert result["value"] == PO_ORDER_RESPONSE.decode("utf-8")
        assert transport.http.is_closed
