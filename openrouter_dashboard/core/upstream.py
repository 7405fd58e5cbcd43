import asyncio
import json
import logging
from typing import Any, Dict, Optional

import aiohttp

from openrouter_dashboard.config.settings import settings
from openrouter_dashboard.core.errors import TransportError, UpstreamError

logger = logging.getLogger("openrouter_dashboard.upstream")


class OpenRouterClient:
    """Relays read-only GETs to the OpenRouter API with the server-held key.

    Settings are read on every call so the client holds no state of its own;
    a fresh `aiohttp.ClientSession` is opened per request.
    """

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {settings.OPENROUTER_API_KEY}",
            "Content-Type": "application/json",
        }

    def _timeout(self) -> Optional[aiohttp.ClientTimeout]:
        if settings.UPSTREAM_TIMEOUT is None:
            return None
        return aiohttp.ClientTimeout(total=settings.UPSTREAM_TIMEOUT)

    def url_for(self, resource: str) -> str:
        return f"{settings.OPENROUTER_BASE_URL}/{resource.lstrip('/')}"

    async def relay(self, resource: str, label: str) -> Any:
        """GET `resource` upstream and return its parsed JSON body.

        - 2xx: the JSON body, unchanged
        - non-2xx: raises `UpstreamError` with the upstream status and text body
        - transport failure or undecodable body: raises `TransportError`
        """
        url = self.url_for(resource)
        session_kwargs = {}
        timeout = self._timeout()
        if timeout is not None:
            session_kwargs["timeout"] = timeout
        try:
            async with aiohttp.ClientSession(**session_kwargs) as session:
                async with session.get(url, headers=self._headers()) as resp:
                    if not 200 <= resp.status < 300:
                        body = await resp.text(errors="replace")
                        logger.error("OpenRouter API error: %s %s", resp.status, body)
                        raise UpstreamError(resp.status, f"Failed to fetch {label}", body)
                    # parse whatever the upstream declares; an empty body is not valid JSON
                    raw = await resp.read()
                    return json.loads(raw)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            message = str(e) or e.__class__.__name__
            logger.error("Error fetching %s: %s", label, message)
            raise TransportError(message) from e


openrouter_client = OpenRouterClient()
