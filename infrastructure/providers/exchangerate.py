from typing import Any

import httpx

from domain.models.currency import INRRates
from domain.models.upstream import FetchResult
from infrastructure.providers.base import BaseUpstreamProvider
from infrastructure.providers.payloads import ExchangeRatePayload


class ExchangeRateAPIProvider(BaseUpstreamProvider[INRRates]):
    """INR-based rates from exchangerate-api.com (no key required)."""

    BASE_URL = "https://api.exchangerate-api.com/v4/latest/INR"

    def __init__(self, url: str = BASE_URL, client: httpx.AsyncClient | None = None, timeout: float = 5.0):
        super().__init__(url, client=client, timeout=timeout)

    @property
    def name(self) -> str:
        return "exchangerate-api"

    def _parse(self, payload: Any) -> INRRates:
        return ExchangeRatePayload.model_validate(payload).to_domain(source=self.name)

    async def fetch_inr_rates(self) -> FetchResult[INRRates]:
        return await self._fetch()
