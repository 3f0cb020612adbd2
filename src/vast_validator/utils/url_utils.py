# src/vast_validator/utils/url_utils.py
import logging
from urllib.parse import urlparse, urlunparse

from vast_validator.errors import InvalidProbeUrlError

logger = logging.getLogger(__name__)

PROBE_SCHEMES = ("http", "https")


class UrlUtils:
    """A collection of static methods for URL parsing and manipulation."""

    @staticmethod
    def normalize_probe_url(raw: str) -> str:
        """
        Turns a media URL taken from a document into an absolute http(s) URL.

        Schema-relative URLs ('//cdn.example.com/a.mp4') are treated as HTTPS.

        Raises:
            InvalidProbeUrlError: With a distinct message for empty input,
                unparseable input, a missing scheme or host, and non-HTTP schemes.
        """
        trimmed = (raw or "").strip()
        if not trimmed:
            raise InvalidProbeUrlError("media URL is empty")

        if trimmed.startswith("//"):
            trimmed = "https:" + trimmed

        try:
            parsed = urlparse(trimmed)
            # Accessing the port validates it (e.g. 'http://host:abc/')
            parsed.port
        except ValueError as e:
            raise InvalidProbeUrlError(f"invalid media URL {raw!r}: {e}") from e

        if not parsed.scheme or not parsed.netloc:
            raise InvalidProbeUrlError(f"invalid media URL {raw!r}: missing scheme or host")

        scheme = parsed.scheme.lower()
        if scheme not in PROBE_SCHEMES:
            raise InvalidProbeUrlError(f"unsupported media URL scheme {parsed.scheme!r}")

        # Fragments are client-side only
        return urlunparse(parsed._replace(scheme=scheme, fragment=""))
