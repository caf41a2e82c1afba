"""XML body helpers."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import BinaryIO, List, Union

from .logging import get_logger

logger = get_logger("utils.xml")

XmlBody = Union[BinaryIO, bytes, bytearray, str]


def read_body(xml: XmlBody) -> bytes:
    """Return the bytes to send for a stream, bytes or str body.

    httpx's AsyncClient rejects synchronous file objects, so streams are
    read up front.
    """
    if isinstance(xml, str):
        return xml.encode("utf-8")
    if isinstance(xml, (bytes, bytearray)):
        return bytes(xml)
    data = xml.read()
    if isinstance(data, str):
        return data.encode("utf-8")
    return data


def contains_marker(stream: BinaryIO, marker: str) -> bool:
    """Check whether the stream contains marker, then rewind it."""
    try:
        text = stream.read().decode("utf-8", errors="replace")
    finally:
        stream.seek(0)
    return marker in text


def error_messages(body: bytes) -> List[str]:
    """Return the text of every ``error`` element in document order.

    The root element counts too. Elements without text are skipped; an
    empty or unparseable body yields an empty list.
    """
    if not body or not body.strip():
        return []
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        logger.debug("Error body is not valid XML: %s", e)
        return []
    texts = ("".join(el.itertext()) for el in root.iter("error"))
    return [text for text in texts if text.strip()]
