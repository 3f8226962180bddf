from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class INRRates:
    usd: Decimal
    eur: Decimal
    source: str


@dataclass(frozen=True)
class CurrencyConversion:
    inr: Decimal
    usd: Decimal  # quantized to 2 places
    eur: Decimal
    inr_to_usd: Decimal  # quantized to 6 places
    inr_to_eur: Decimal
    source: str
