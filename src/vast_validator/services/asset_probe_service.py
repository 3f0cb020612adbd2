# src/vast_validator/services/asset_probe_service.py
import logging

from vast_validator.services.http_request_service import HttpRequestService, ProbeResponse
from vast_validator.utils.url_utils import UrlUtils

logger = logging.getLogger(__name__)

PROBE_RANGE_HEADER = "bytes=0-0"


class AssetProbeService:
    """
    Checks that a referenced asset is reachable without downloading it.

    Sends a HEAD request first. Servers that answer 405 Method Not Allowed get
    a GET restricted to the first byte instead.
    """

    def __init__(self, http: HttpRequestService):
        self.http = http

    async def probe(self, raw_url: str) -> ProbeResponse:
        """
        Args:
            raw_url: The URL as written in the document.

        Returns:
            ProbeResponse: The final response; check `.error` for transport failures.

        Raises:
            InvalidProbeUrlError: If the URL cannot be normalised to http(s).
        """
        url = UrlUtils.normalize_probe_url(raw_url)

        response = await self.http.perform_request(url, method="HEAD")
        if response.status != 405:
            return response

        logger.debug("HEAD not allowed for %s, falling back to ranged GET", url)
        return await self.http.perform_request(url, method="GET", headers={"Range": PROBE_RANGE_HEADER})
