# src/vast_validator/hooks/modules/media_file_hook.py
import logging
from typing import TYPE_CHECKING, Optional

from vast_validator.errors import InvalidProbeUrlError
from vast_validator.hooks.base import NetworkHook, NodeContext
from vast_validator.model import CUSTOM_ANALYSIS_CATEGORY, NodeAnalysisResult, ResultStatus
from vast_validator.services.asset_probe_service import AssetProbeService
from vast_validator.services.http_request_service import HttpRequestService

if TYPE_CHECKING:
    from vast_validator.hooks.registry import HookRegistry

logger = logging.getLogger(__name__)

MEDIA_FILE_NODE = "MediaFile"


def _fail(reason: str) -> NodeAnalysisResult:
    return NodeAnalysisResult(category=CUSTOM_ANALYSIS_CATEGORY, status=ResultStatus.FAIL, reasons=[reason])


class MediaFileHook(NetworkHook):
    """
    Probes the URL in a <MediaFile> and checks it against the declared 'type'.

    Fails when the URL is empty or invalid, the request fails, the server
    answers with an HTTP error, or the response Content-Type contradicts the
    declared media type. A response without Content-Type is not penalised.
    """

    async def inspect(self, ctx: NodeContext, http: HttpRequestService) -> Optional[NodeAnalysisResult]:
        url = ctx.text
        if not url:
            return _fail("media file URL is empty")

        try:
            response = await AssetProbeService(http).probe(url)
        except InvalidProbeUrlError as e:
            return _fail(f"media file request failed: {e}")

        if response.error:
            logger.debug("Media file probe failed for %s: %s", url, response.error)
            return _fail(f"media file request failed: {response.error}")

        if response.status >= 400:
            return _fail(f"media file responded with HTTP {response.status}")

        expected = (ctx.attribute("type") or "").strip().lower()
        if expected:
            actual = response.content_type
            if actual and actual != expected:
                return _fail(f"content type mismatch: expected {expected}, got {actual}")

        return NodeAnalysisResult(category=CUSTOM_ANALYSIS_CATEGORY, status=ResultStatus.PASS)


def register_builtin_hooks(registry: 'HookRegistry') -> None:
    registry.register_network(MEDIA_FILE_NODE, MediaFileHook())
