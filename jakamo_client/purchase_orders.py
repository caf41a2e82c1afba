from __future__ import annotations

import io
import logging
from typing import BinaryIO, Optional

from .result import Result
from .transport import JakamoTransport
from .utils.logging import get_logger
from .utils.xml import XmlBody, read_body


class PurchaseOrderClient:
    """Client for outbound purchase orders.

    Only status codes are mapped here: 2xx is a success, anything else an
    error carrying the HTTP reason phrase.
    """

    def __init__(
        self, transport: JakamoTransport, logger: Optional[logging.Logger] = None
    ) -> None:
        self.transport = transport
        self.logger = logger or get_logger("purchase_orders")

    async def send_order(self, order_xml: XmlBody) -> Result[bool]:
        self.logger.info("Sending purchase order")
        response = await self.transport.request(
            "POST",
            "/api/order",
            action="sending purchase order",
            logger=self.logger,
            content=read_body(order_xml),
        )
        if not response.is_success:
            return Result.error(response.reason_phrase)
        return Result.success(True)

    async def update_order(self, order_id: int, order_xml: XmlBody) -> Result[bool]:
        self.logger.info("Updating purchase order %s", order_id)
        response = await self.transport.request(
            "POST",
            f"/api/order/{order_id}",
            action=f"updating purchase order {order_id}",
            logger=self.logger,
            content=read_body(order_xml),
        )
        if not response.is_success:
            return Result.error(response.reason_phrase)
        return Result.success(True)

    async def cancel_order(self, order_id: int, cancellation_xml: XmlBody) -> Result[bool]:
        """Cancel a purchase order; Jakamo models this as an order update."""
        return await self.update_order(order_id, cancellation_xml)

    async def order_received(
        self, order_id: int, order_received_xml: XmlBody
    ) -> Result[bool]:
        """Mark a purchase order as received; also an order update."""
        return await self.update_order(order_id, order_received_xml)

    async def get_order_response(self) -> Result[BinaryIO]:
        self.logger.info("Retrieving order response")
        response = await self.transport.request(
            "GET",
            "/order/response",
            action="retrieving order response",
            logger=self.logger,
        )
        if not response.is_success:
            return Result.error(response.reason_phrase)
        return Result.success(io.BytesIO(response.content))
