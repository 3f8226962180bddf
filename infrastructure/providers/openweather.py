from typing import Any

import httpx

from domain.models.upstream import FetchResult
from domain.models.weather import WeatherReport
from infrastructure.providers.base import BaseUpstreamProvider
from infrastructure.providers.payloads import OpenWeatherPayload


class OpenWeatherProvider(BaseUpstreamProvider[WeatherReport]):
    BASE_URL = "https://api.openweathermap.org/data/2.5/weather"

    def __init__(self, api_key: str, url: str = BASE_URL, client: httpx.AsyncClient | None = None,
                 timeout: float = 5.0):
        super().__init__(url, client=client, timeout=timeout)
        self.api_key = api_key

    @property
    def name(self) -> str:
        return "openweathermap"

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _parse(self, payload: Any) -> WeatherReport:
        return OpenWeatherPayload.model_validate(payload).to_domain()

    async def fetch_weather(self, city: str) -> FetchResult[WeatherReport]:
        return await self._fetch({"q": city, "appid": self.api_key, "units": "metric"})
