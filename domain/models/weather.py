from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherReport:
    city: str
    temperature: int  # degrees Celsius
    condition: str
    description: str
    humidity: int  # percent
    icon: str
