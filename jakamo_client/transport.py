from __future__ import annotations

import asyncio
import base64
import logging
import os
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx
from dotenv import load_dotenv

from .errors import JakamoClientError
from .utils.logging import get_logger


logger = get_logger("http")

DEFAULT_BASE_URL = "https://demo.thejakamo.com"
DEFAULT_TIMEOUT = 30.0
CONNECT_TIMEOUT = 10.0


def _redact_headers(headers: Dict[str, Any]) -> Dict[str, Any]:
    redacted = {}
    for k, v in headers.items():
        if str(k).lower() in {"authorization", "cookie"}:
            redacted[k] = "[REDACTED]"
        else:
            redacted[k] = v
    return redacted


def _basic_auth(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


@dataclass
class JakamoTransport:
    """Shared holder for a pre-configured httpx.AsyncClient.

    Base URL, Accept and Authorization headers are set once when the
    transport is built; client methods only add a per-request Content-Type.
    No retries are made: one call, one request.
    """

    http: httpx.AsyncClient
    logger: logging.Logger = field(default=logger)

    @classmethod
    def from_env(cls) -> "JakamoTransport":
        """Create a transport using environment variables loaded via dotenv.

        Required env vars (either):
        - JAKAMO_USERNAME and JAKAMO_PASSWORD (HTTP Basic)
        - JAKAMO_AUTHORIZATION (full Authorization header value)
        Optional:
        - JAKAMO_BASE_URL (defaults to the Jakamo demo environment)
        - JAKAMO_TIMEOUT (seconds, defaults to 30)
        """
        load_dotenv()
        base_url = os.getenv("JAKAMO_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
        username = os.getenv("JAKAMO_USERNAME")
        password = os.getenv("JAKAMO_PASSWORD")
        authorization = os.getenv("JAKAMO_AUTHORIZATION")

        if username and password:
            authorization = _basic_auth(username, password)
        if not authorization:
            raise JakamoClientError(
                "Missing JAKAMO_USERNAME/JAKAMO_PASSWORD or JAKAMO_AUTHORIZATION in environment."
            )

        raw_timeout = os.getenv("JAKAMO_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise JakamoClientError(f"Invalid JAKAMO_TIMEOUT: {raw_timeout!r}")

        http = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "Accept": "application/xml",
                "Authorization": authorization,
            },
            timeout=httpx.Timeout(timeout, connect=CONNECT_TIMEOUT),
        )
        return cls(http=http)

    @classmethod
    def from_client(
        cls, http: httpx.AsyncClient, logger: Optional[logging.Logger] = None
    ) -> "JakamoTransport":
        """Wrap an httpx.AsyncClient configured elsewhere."""
        if logger is None:
            return cls(http=http)
        return cls(http=http, logger=logger)

    async def _send(
        self, method: str, url: str, **kwargs: Any
    ) -> httpx.Response:
        start = time.perf_counter()
        response = await self.http.request(method, url, **kwargs)
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        self.logger.debug(
            "HTTP %s %s status=%s elapsed_ms=%.2f headers=%s",
            method,
            url,
            response.status_code,
            elapsed_ms,
            _redact_headers(dict(response.request.headers)),
        )
        return response

    async def request(
        self,
        method: str,
        url: str,
        *,
        action: str,
        logger: Optional[logging.Logger] = None,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """Issue one request on behalf of a client method.

        Transport faults and cancellation are logged at ERROR on the
        caller's logger, naming the action, and re-raised unchanged.
        """
        log = logger or self.logger
        try:
            if method.upper() == "GET":
                return await self.get(url)
            return await self.post(url, content=content, headers=headers)
        except (httpx.TransportError, asyncio.CancelledError):
            log.exception("An exception was thrown while %s", action)
            raise

    async def get(self, url: str) -> httpx.Response:
        return await self._send("GET", url)

    async def post(
        self,
        url: str,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        return await self._send("POST", url, content=content, headers=headers)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "JakamoTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
