import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

import httpx

from domain.models.upstream import FetchResult, FetchStatus
from monitoring.logger import log_upstream_call

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseUpstreamProvider(ABC, Generic[T]):
    """A base class for upstream providers, handling common HTTP logic.

    Subclasses describe how to turn a JSON body into a domain object; this
    class performs the single GET and classifies every failure into a
    ``FetchStatus`` instead of raising.
    """

    def __init__(self, url: str, client: httpx.AsyncClient | None = None, timeout: float = 5.0):
        self.url = url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def _parse(self, payload: Any) -> T:
        """Map a decoded JSON body to the domain type; raise ValueError if it does not fit."""
        ...

    async def _fetch(self, params: dict | None = None) -> FetchResult[T]:
        start_time = time.perf_counter()

        def elapsed_ms() -> int:
            return int((time.perf_counter() - start_time) * 1000)

        response = None
        try:
            response = await self._client.get(self.url, params=params)
            response.raise_for_status()
            data = self._parse(response.json())
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            result = FetchResult.failure(
                self.name,
                FetchStatus.NOT_FOUND if status_code == 404 else FetchStatus.HTTP_ERROR,
                f"HTTP {status_code}: {e.response.text[:200]}",
                http_status_code=status_code,
                response_time_ms=elapsed_ms(),
            )
        except httpx.RequestError as e:
            # timeouts, refused connections, DNS failures
            result = FetchResult.failure(
                self.name,
                FetchStatus.NETWORK_ERROR,
                f"Request failed: {e.__class__.__name__}",
                response_time_ms=elapsed_ms(),
            )
        except ValueError as e:
            # invalid JSON and pydantic validation errors both land here
            result = FetchResult.failure(
                self.name,
                FetchStatus.PARSING_ERROR,
                f"Response parsing error: {str(e)[:200]}",
                http_status_code=response.status_code if response is not None else None,
                response_time_ms=elapsed_ms(),
            )
        else:
            result = FetchResult.success(
                self.name, data, http_status_code=response.status_code, response_time_ms=elapsed_ms()
            )

        log_upstream_call(logger, self.url, result)
        return result

    async def close(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self._client.aclose()
