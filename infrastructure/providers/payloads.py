"""Typed shapes of the upstream JSON bodies and their mapping to domain models.

A payload that does not match raises ``pydantic.ValidationError`` on
``model_validate``; the provider base class reports it as a parsing failure.
"""
import math
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.models.currency import INRRates
from domain.models.quote import Quote
from domain.models.weather import WeatherReport


class UpstreamPayload(BaseModel):
    model_config = ConfigDict(extra='ignore', frozen=True, allow_inf_nan=False)


class QuotablePayload(UpstreamPayload):
    content: str
    author: str

    def to_domain(self) -> Quote:
        return Quote(text=self.content, author=self.author)


class OpenWeatherMain(UpstreamPayload):
    temp: float
    humidity: int


class OpenWeatherCondition(UpstreamPayload):
    main: str
    description: str
    icon: str


class OpenWeatherPayload(UpstreamPayload):
    name: str
    main: OpenWeatherMain
    weather: list[OpenWeatherCondition] = Field(min_length=1)

    def to_domain(self) -> WeatherReport:
        current = self.weather[0]
        return WeatherReport(
            city=self.name,
            # rounds like JS Math.round: halves go up
            temperature=math.floor(self.main.temp + 0.5),
            condition=current.main,
            description=current.description,
            humidity=self.main.humidity,
            icon=current.icon,
        )


class INRRatesBlock(UpstreamPayload):
    USD: Decimal = Field(gt=0)
    EUR: Decimal = Field(gt=0)

    @field_validator('USD', 'EUR', mode='before')
    @classmethod
    def float_as_decimal(cls, v):
        if isinstance(v, float):
            return Decimal(str(v))
        return v


class ExchangeRatePayload(UpstreamPayload):
    rates: INRRatesBlock

    def to_domain(self, source: str) -> INRRates:
        return INRRates(usd=self.rates.USD, eur=self.rates.EUR, source=source)
