from typing import Any

import httpx

from domain.models.quote import Quote
from domain.models.upstream import FetchResult
from infrastructure.providers.base import BaseUpstreamProvider
from infrastructure.providers.payloads import QuotablePayload


class QuotableProvider(BaseUpstreamProvider[Quote]):
    BASE_URL = "https://api.quotable.io/random"

    def __init__(self, url: str = BASE_URL, client: httpx.AsyncClient | None = None, timeout: float = 5.0):
        super().__init__(url, client=client, timeout=timeout)

    @property
    def name(self) -> str:
        return "quotable"

    def _parse(self, payload: Any) -> Quote:
        return QuotablePayload.model_validate(payload).to_domain()

    async def fetch_quote(self) -> FetchResult[Quote]:
        return await self._fetch()
