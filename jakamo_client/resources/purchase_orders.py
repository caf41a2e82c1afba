"""Purchase order tools."""

from __future__ import annotations

from typing import Any, Dict

from ..purchase_orders import PurchaseOrderClient
from ..transport import JakamoTransport
from ..utils.logging import get_logger, truncate

logger = get_logger("resources.purchase_orders")


async def jakamo_send_purchase_order(xml: str) -> Dict[str, Any]:
    """Submit a new purchase order XML document."""
    logger.debug("Tool call: jakamo_send_purchase_order(xml=%s)", truncate(xml))
    transport = JakamoTransport.from_env()
    try:
        result = await PurchaseOrderClient(transport).send_order(xml)
    finally:
        await transport.aclose()
    return result.to_dict()


async def jakamo_update_purchase_order(order_id: int, xml: str) -> Dict[str, Any]:
    """Update an existing purchase order.

    Parameters:
    - order_id: Jakamo order ID
    - xml: The updated order document
    """
    logger.debug("Tool call: jakamo_update_purchase_order(order_id=%s)", order_id)
    transport = JakamoTransport.from_env()
    try:
        result = await PurchaseOrderClient(transport).update_order(order_id, xml)
    finally:
        await transport.aclose()
    return result.to_dict()


async def jakamo_cancel_purchase_order(order_id: int, xml: str) -> Dict[str, Any]:
    """Cancel a purchase order by posting a cancellation document."""
    logger.debug("Tool call: jakamo_cancel_purchase_order(order_id=%s)", order_id)
    transport = JakamoTransport.from_env()
    try:
        result = await PurchaseOrderClient(transport).cancel_order(order_id, xml)
    finally:
        await transport.aclose()
    return result.to_dict()


async def jakamo_purchase_order_received(order_id: int, xml: str) -> Dict[str, Any]:
    """Mark a purchase order as received."""
    logger.debug("Tool call: jakamo_purchase_order_received(order_id=%s)", order_id)
    transport = JakamoTransport.from_env()
    try:
        result = await PurchaseOrderClient(transport).order_received(order_id, xml)
    finally:
        await transport.aclose()
    return result.to_dict()


async def jakamo_get_order_response() -> Dict[str, Any]:
    """Read the next order response for submitted purchase orders.

    value holds the response XML as text when status is "ok".
    """
    logger.debug("Tool call: jakamo_get_order_response()")
    transport = JakamoTransport.from_env()
    try:
        result = await PurchaseOrderClient(transport).get_order_response()
    finally:
        await transport.aclose()
    data = result.to_dict()
    if result.is_success:
        data["value"] = result.value.read().decode("utf-8", errors="replace")
    logger.debug("Tool result: jakamo_get_order_response -> %s", truncate(str(data)))
    return data
