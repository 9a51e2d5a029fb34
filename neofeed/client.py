"""
Client for the NEO data API: resolves the base address from settings and
fetches the NEO collection through the guarded fetch.
"""

from typing import Callable, Optional

import httpx
import structlog

from .config import Settings
from .fetcher import fetch_with_guard
from .outcome import FetchOutcome
from .resolver import Environment, environment_from_setting, resolve_for_environment

logger = structlog.get_logger(__name__)


class NeoClient:
    """Fetches NEO records, leaving retries and presentation to the caller."""

    def __init__(
        self,
        settings: Settings,
        classify: Optional[Callable[[], Environment]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings
        self.classify = classify or (lambda: environment_from_setting(settings.environment))
        self._client = client

    @property
    def base_url(self) -> str:
        return resolve_for_environment(
            self.settings.base_url_override,
            self.settings.origin,
            self.classify,
            development_address=self.settings.development_url,
        )

    def endpoint_url(self, path: str) -> str:
        """Join the resolved base address and a resource path with a single slash."""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    async def fetch_neos(self, hazardous: Optional[bool] = None) -> FetchOutcome:
        url = self.endpoint_url(self.settings.neos_path)
        params = {}
        if hazardous is not None:
            params['hazardous'] = 'true' if hazardous else 'false'

        logger.debug("fetching_neos", url=url, hazardous=hazardous)
        return await fetch_with_guard(
            url,
            params,
            timeout_ms=self.settings.timeout_ms,
            client=self._client,
        )
