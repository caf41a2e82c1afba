"""Data carried between the Jakamo API and its consumers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Optional


ORDER_NUMBER_HEADER = "Jakamo-Order-Number"
CONFIRM_URL_HEADER = "Jakamo-Confirm-Url"
ACKNOWLEDGE_URI_HEADER = "X-Acknowledge-Uri"

# Jakamo answers with a status element holding this text when the queue is empty
EMPTY_QUEUE_MARKER = "No more messages available."


@dataclass
class SalesOrder:
    """A sales order taken from the Jakamo queue.

    Attributes:
    - xml_body: The order XML, positioned at the start. Read it once.
    - order_number: The seller-provided order number.
    - acknowledgement_uri: Where the consumer must POST once the order has
      been processed. Until then the same order is returned on every poll.
    - confirmation_uri: Where the consumer may POST an empty body to approve
      all proposed order changes without an explicit OrderConfirmation.
    """

    xml_body: BinaryIO
    order_number: Optional[str] = None
    acknowledgement_uri: Optional[str] = None
    confirmation_uri: Optional[str] = None
