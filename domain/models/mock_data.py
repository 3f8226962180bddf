from decimal import Decimal

from domain.models.currency import INRRates
from domain.models.quote import Quote
from domain.models.weather import WeatherReport

MOCK_QUOTES: tuple[Quote, ...] = (
    Quote(
        text="The only way to do great work is to love what you do.",
        author="Steve Jobs",
    ),
    Quote(
        text="Success is not final, failure is not fatal: it is the courage to continue that counts.",
        author="Winston Churchill",
    ),
    Quote(
        text="Believe you can and you're halfway there.",
        author="Theodore Roosevelt",
    ),
    Quote(
        text="The future belongs to those who believe in the beauty of their dreams.",
        author="Eleanor Roosevelt",
    ),
    Quote(
        text="It does not matter how slowly you go as long as you do not stop.",
        author="Confucius",
    ),
)

MOCK_RATES = INRRates(usd=Decimal("0.012"), eur=Decimal("0.011"), source="mock")


def mock_weather(city: str) -> WeatherReport:
    return WeatherReport(
        city=city,
        temperature=22,
        condition="Clear",
        description="Clear sky",
        humidity=60,
        icon="01d",
    )
