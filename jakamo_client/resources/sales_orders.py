"""Sales order tools."""

from __future__ import annotations

from typing import Any, Dict

from ..result import Result
from ..sales_orders import SalesOrderClient
from ..transport import JakamoTransport
from ..utils.logging import get_logger, truncate

logger = get_logger("resources.sales_orders")


def _order_dict(result: Result) -> Dict[str, Any]:
    data = result.to_dict()
    if result.is_success:
        order = result.value
        data["value"] = {
            "order_number": order.order_number,
            "acknowledgement_uri": order.acknowledgement_uri,
            "confirmation_uri": order.confirmation_uri,
            "xml": order.xml_body.read().decode("utf-8", errors="replace"),
        }
    return data


async def jakamo_get_sales_order() -> Dict[str, Any]:
    """Get the sales order at the head of the Jakamo queue.

    Returns status "not_found" when the queue is empty. The order stays in
    the queue until jakamo_remove_sales_order is called with its
    acknowledgement_uri, so calling this again returns the same order.

    Returns:
    - status: "ok", "not_found" or "error"
    - value: order_number, acknowledgement_uri, confirmation_uri, xml
    - errors: error messages when status is "error"
    """
    logger.debug("Tool call: jakamo_get_sales_order()")
    transport = JakamoTransport.from_env()
    try:
        result = await SalesOrderClient(transport).get_sales_order()
        data = _order_dict(result)
    finally:
        await transport.aclose()
    logger.debug("Tool result: jakamo_get_sales_order -> %s", truncate(str(data)))
    return data


async def jakamo_remove_sales_order(acknowledgement_uri: str) -> Dict[str, Any]:
    """Remove a processed sales order from the queue.

    Parameters:
    - acknowledgement_uri: The acknowledgement_uri returned by jakamo_get_sales_order
    """
    logger.debug("Tool call: jakamo_remove_sales_order(acknowledgement_uri=%s)", acknowledgement_uri)
    transport = JakamoTransport.from_env()
    try:
        result = await SalesOrderClient(transport).remove_sales_order_from_queue(
            acknowledgement_uri
        )
    finally:
        await transport.aclose()
    data = result.to_dict()
    logger.debug("Tool result: jakamo_remove_sales_order -> %s", data)
    return data


async def jakamo_send_order_response(xml: str) -> Dict[str, Any]:
    """Post an OrderResponse XML document to Jakamo.

    Parameters:
    - xml: The complete OrderResponse document

    On rejection, errors holds each <error> message Jakamo returned.
    """
    logger.debug("Tool call: jakamo_send_order_response(xml=%s)", truncate(xml))
    transport = JakamoTransport.from_env()
    try:
        result = await SalesOrderClient(transport).send_order_response(xml)
    finally:
        await transport.aclose()
    data = result.to_dict()
    logger.debug("Tool result: jakamo_send_order_response -> %s", data)
    return data


async def jakamo_confirm_all_changes(confirmation_uri: str) -> Dict[str, Any]:
    """Approve all proposed changes to a sales order without an OrderConfirmation.

    Parameters:
    - confirmation_uri: The confirmation_uri returned by jakamo_get_sales_order
    """
    logger.debug("Tool call: jakamo_confirm_all_changes(confirmation_uri=%s)", confirmation_uri)
    transport = JakamoTransport.from_env()
    try:
        result = await SalesOrderClient(transport).confirm_all_changes_for_sales_order(
            confirmation_uri
        )
    finally:
        await transport.aclose()
    data = result.to_dict()
    logger.debug("Tool result: jakamo_confirm_all_changes -> %s", data)
    return data
