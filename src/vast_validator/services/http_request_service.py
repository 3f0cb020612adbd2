# src/vast_validator/services/http_request_service.py
import asyncio
import logging
import time
from typing import Dict, Optional

import aiohttp
from pydantic import BaseModel, Field

from vast_validator.utils.config_loader import get_nested_config

logger = logging.getLogger(__name__)

# Transport failures never raise out of perform_request; they are reported
# through these negative status codes.
STATUS_TRANSPORT_ERROR = -1
STATUS_UNEXPECTED_ERROR = -2
STATUS_UNSUPPORTED_METHOD = -99


class ProbeResponse(BaseModel):
    """What the validator needs to know about one HTTP exchange."""
    url: str
    method: str
    status: int
    headers: Dict[str, str] = Field(default_factory=dict)
    error: Optional[str] = None
    elapsed_time: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None and self.status >= 0

    @property
    def content_type(self) -> str:
        """The response media type, lower-cased, without ';' parameters."""
        # Header names are case-insensitive
        raw = next((value for name, value in self.headers.items() if name.lower() == "content-type"), "")
        return raw.split(";", 1)[0].strip().lower()


class HttpRequestService:
    """
    Central service for executing HTTP requests (HEAD/GET) for network hooks.

    Manages the aiohttp session and error handling. A session supplied by the
    caller is borrowed and never closed here; otherwise one is created on
    first use and closed with the service.
    """

    def __init__(
            self,
            config: Optional[Dict] = None,
            user_agent: Optional[str] = None,
            session: Optional[aiohttp.ClientSession] = None,
    ):
        self.config = config or {}
        self.user_agent = user_agent or get_nested_config("http.user_agent", "vast-validator")
        self.timeout = float(self.config.get('timeout', get_nested_config("http.timeout", 2.0)))
        self.max_redirects = int(self.config.get('max_redirects', get_nested_config("http.max_redirects", 10)))

        self.session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def initialize(self):
        if not self.session or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={'User-Agent': self.user_agent},
            )
            self._owns_session = True
            logger.debug("HttpRequestService: Session initialized.")

    async def close(self):
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()
            logger.debug("HttpRequestService: Session closed.")

    async def perform_request(
            self, url: str, method: str = "HEAD", headers: Optional[Dict[str, str]] = None
    ) -> ProbeResponse:
        """
        Sends a single request without downloading the body.

        Redirects are followed by aiohttp (bounded by max_redirects). Transport
        errors and timeouts are returned as a ProbeResponse with a negative
        status and the error text instead of being raised.
        """
        start_time = time.perf_counter()
        method = method.upper()

        if method not in ("HEAD", "GET"):
            return ProbeResponse(url=url, method=method, status=STATUS_UNSUPPORTED_METHOD,
                                 error=f"Method {method} not supported")

        if not self.session or self.session.closed:
            await self.initialize()

        try:
            async with self.session.request(
                    method,
                    url,
                    headers=headers,
                    allow_redirects=True,
                    max_redirects=self.max_redirects,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                result = ProbeResponse(
                    url=str(response.url),
                    method=method,
                    status=response.status,
                    headers=dict(response.headers),
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            result = ProbeResponse(url=url, method=method, status=STATUS_TRANSPORT_ERROR,
                                   error=str(e) or type(e).__name__)
        except ValueError as e:
            # yarl/aiohttp reject some URLs only when the request is built
            result = ProbeResponse(url=url, method=method, status=STATUS_UNEXPECTED_ERROR, error=str(e))

        result.elapsed_time = round(time.perf_counter() - start_time, 4)
        logger.debug("%s %s -> %s (%.4fs)", method, url, result.status, result.elapsed_time)
        return result
