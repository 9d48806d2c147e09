"""MediaFlow proxy URL rewriting.

When a MediaFlow Proxy instance is configured, the addon skips local
extraction and hands the target page to the proxy's VixCloud extractor,
which performs the same scrape server-side and redirects to the stream.
"""

from __future__ import annotations

from urllib.parse import quote

# Characters JavaScript's encodeURIComponent leaves as-is.
_URI_COMPONENT_SAFE = "!~*'()"


class MediaFlowProxy:
    """Builds ``/extractor/video`` URLs for a MediaFlow Proxy instance."""

    def __init__(self, *, base_url: str, api_password: str) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_password = api_password

    def rewrite(self, target_url: str) -> str:
        """Extractor URL for ``target_url``.

        Both the password and the target are percent-encoded, so a password
        such as ``a&b`` appears as ``a%26b``; MediaFlow decodes it back.
        """
        password = quote(self._api_password, safe=_URI_COMPONENT_SAFE)
        destination = quote(target_url, safe=_URI_COMPONENT_SAFE)
        return (
            f"{self._base_url}/extractor/video?host=VixCloud&redirect_stream=true"
            f"&api_password={password}&d={destination}"
        )
