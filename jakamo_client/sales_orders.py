from __future__ import annotations

import io
import logging
from typing import Optional

import httpx

from .models import (
    ACKNOWLEDGE_URI_HEADER,
    CONFIRM_URL_HEADER,
    EMPTY_QUEUE_MARKER,
    ORDER_NUMBER_HEADER,
    SalesOrder,
)
from .result import Result
from .transport import JakamoTransport
from .utils.logging import get_logger
from .utils.xml import XmlBody, contains_marker, error_messages, read_body


XML_CONTENT_TYPE = {"Content-Type": "application/xml"}


def _first_header(response: httpx.Response, name: str) -> Optional[str]:
    values = response.headers.get_list(name)
    return values[0] if values else None


class SalesOrderClient:
    """Client for the inbound sales order queue.

    A sales order stays at the head of the queue until it is removed with
    ``remove_sales_order_from_queue``; polling alone never consumes it.

    Transport failures (connection, DNS, timeout) and cancellation are
    logged and re-raised.
    Everything the server answers becomes a ``Result``.
    """

    def __init__(
        self, transport: JakamoTransport, logger: Optional[logging.Logger] = None
    ) -> None:
        self.transport = transport
        self.logger = logger or get_logger("sales_orders")

    async def get_sales_order(self) -> Result[SalesOrder]:
        """Get the sales order at the head of the Jakamo queue.

        Returns NOT_FOUND when the queue is empty.
        """
        self.logger.info("Retrieving Sales Order")
        response = await self.transport.request(
            "GET",
            "/api/order/response",
            action="retrieving the sales order",
            logger=self.logger,
        )

        if not response.is_success:
            return Result.error(response.reason_phrase)

        xml_body = io.BytesIO(response.content)

        self.logger.debug("Checking if queue is empty...")
        if contains_marker(xml_body, EMPTY_QUEUE_MARKER):
            self.logger.debug("No more messages in queue")
            return Result.not_found()

        order = SalesOrder(
            xml_body=xml_body,
            order_number=_first_header(response, ORDER_NUMBER_HEADER),
            acknowledgement_uri=_first_header(response, ACKNOWLEDGE_URI_HEADER),
            confirmation_uri=_first_header(response, CONFIRM_URL_HEADER),
        )
        self.logger.debug("Retrieved sales order %s", order.order_number)
        return Result.success(order)

    async def remove_sales_order_from_queue(self, ack_uri: str) -> Result[bool]:
        """Tell Jakamo the order was processed so it leaves the queue.

        ack_uri is the acknowledgement URI of the order returned by
        ``get_sales_order``.
        """
        if not ack_uri or not ack_uri.strip():
            return Result.error("No acknowledgement URI given")

        self.logger.info("Attempting to remove sales order from queue")
        response = await self.transport.request(
            "POST",
            ack_uri,
            action="removing a sales order from the queue",
            logger=self.logger,
        )

        if not response.is_success:
            return Result.error(response.reason_phrase)
        return Result.success(True)

    async def send_order_response(self, response_xml: XmlBody) -> Result[bool]:
        """Post an OrderResponse document.

        On failure Jakamo answers with ``<errors><error>...</error></errors>``;
        each error text becomes one message, in document order.
        """
        self.logger.info("Sending order response")
        response = await self.transport.request(
            "POST",
            "/api/orderresponse",
            action="sending order response",
            logger=self.logger,
            content=read_body(response_xml),
            headers=XML_CONTENT_TYPE,
        )

        if response.is_success:
            return Result.success(True)

        errors = error_messages(response.content)
        if not errors:
            return Result.error(response.reason_phrase)
        return Result.error(errors)

    async def confirm_all_changes_for_sales_order(
        self, confirmation_uri: str
    ) -> Result[bool]:
        """Approve all proposed changes to a sales order.

        Posts an empty body to the order's confirmation URI instead of an
        explicit OrderConfirmation message.
        """
        if not confirmation_uri or not confirmation_uri.strip():
            return Result.error("No confirmation URI given")

        self.logger.info("Confirming all changes for sales order")
        response = await self.transport.request(
            "POST",
            confirmation_uri,
            action="confirming changes for sales order",
            logger=self.logger,
            content=b"",
            headers=XML_CONTENT_TYPE,
        )

        if not response.is_success:
            # Result.error falls back to a generic message for an empty phrase
            return Result.error(response.reason_phrase)
        return Result.success(True)
